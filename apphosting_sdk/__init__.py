"""apphosting SDK - build-time helpers for Node.js applications.

Example:
    >>> from apphosting_sdk import normalize_adaptor_version, resolve_installed_version
    >>> normalize_adaptor_version("14.2.3")
    '14.2'
    >>> resolve_installed_version("next", "^14.0.0", ".")
    '14.2.3'
"""

from apphosting_common import APPHOSTING_VERSION

from .dependencies import (
    PackageJSON,
    adaptor_package_spec,
    detect_adaptor_package,
    installed_version,
    normalize_adaptor_version,
    read_package_json,
    resolve_installed_version,
)

__version__ = APPHOSTING_VERSION

__all__ = [
    "PackageJSON",
    "adaptor_package_spec",
    "detect_adaptor_package",
    "installed_version",
    "normalize_adaptor_version",
    "read_package_json",
    "resolve_installed_version",
]
