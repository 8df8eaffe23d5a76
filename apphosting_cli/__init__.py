"""apphosting command line interface."""
