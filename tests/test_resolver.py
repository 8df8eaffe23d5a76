"""
Tests for installed version resolution.

Tests cover:
- Each lockfile format (pnpm v6/v9, yarn classic/berry, npm v1/v3)
- Lockfile priority order
- Fallthrough on missing entries and malformed lockfiles
- Fallback to the declared specifier
- package.json manifest parsing
"""

import json

import pytest

from apphosting_common import ManifestError
from apphosting_sdk.dependencies import (
    LOCKFILE_READERS,
    PackageJSON,
    installed_version,
    read_npm_lockfile,
    read_package_json,
    read_pnpm_lockfile,
    read_yarn_lockfile,
    resolve_installed_version,
)


# ============================================================================
# Lockfile Reader Tests
# ============================================================================


class TestPnpmLockfile:
    """Tests for pnpm-lock.yaml parsing."""

    def test_peer_qualifier_stripped(self, tmp_path, lockfiles):
        path = tmp_path / "pnpm-lock.yaml"
        path.write_text(lockfiles["pnpm"])
        assert read_pnpm_lockfile(path, "next") == "14.2.3"
        assert read_pnpm_lockfile(path, "react") == "18.2.0"

    def test_v9_importers(self, tmp_path, lockfiles):
        path = tmp_path / "pnpm-lock.yaml"
        path.write_text(lockfiles["pnpm_v9"])
        assert read_pnpm_lockfile(path, "next") == "14.1.4"

    def test_v5_plain_string(self, tmp_path):
        path = tmp_path / "pnpm-lock.yaml"
        path.write_text("lockfileVersion: 5.4\ndependencies:\n  next: 12.3.4_react@18.2.0\n")
        assert read_pnpm_lockfile(path, "next") == "12.3.4_react@18.2.0"

    def test_missing_entry(self, tmp_path, lockfiles):
        path = tmp_path / "pnpm-lock.yaml"
        path.write_text(lockfiles["pnpm"])
        assert read_pnpm_lockfile(path, "vue") == ""

    def test_wrong_shape_raises(self, tmp_path):
        path = tmp_path / "pnpm-lock.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ValueError):
            read_pnpm_lockfile(path, "next")


class TestYarnLockfile:
    """Tests for yarn.lock block scanning."""

    def test_classic(self, tmp_path, lockfiles):
        path = tmp_path / "yarn.lock"
        path.write_text(lockfiles["yarn_classic"])
        assert read_yarn_lockfile(path, "next", "^14.0.0") == "14.2.3"

    def test_declared_specifier_selects_major(self, tmp_path, lockfiles):
        path = tmp_path / "yarn.lock"
        path.write_text(lockfiles["yarn_classic"])
        assert read_yarn_lockfile(path, "next", "^13.5.0") == "13.5.6"

    def test_berry(self, tmp_path, lockfiles):
        path = tmp_path / "yarn.lock"
        path.write_text(lockfiles["yarn_berry"])
        assert read_yarn_lockfile(path, "next", "^14.0.0") == "14.0.4"

    def test_crlf_line_endings(self, tmp_path, lockfiles):
        path = tmp_path / "yarn.lock"
        path.write_bytes(lockfiles["yarn_classic"].replace("\n", "\r\n").encode())
        assert read_yarn_lockfile(path, "next", "^14.0.0") == "14.2.3"

    def test_no_matching_block(self, tmp_path, lockfiles):
        path = tmp_path / "yarn.lock"
        path.write_text(lockfiles["yarn_classic"])
        assert read_yarn_lockfile(path, "next", "^15.0.0") == ""
        assert read_yarn_lockfile(path, "vue", "^3.0.0") == ""


class TestNpmLockfile:
    """Tests for package-lock.json / npm-shrinkwrap.json parsing."""

    def test_packages_key(self, tmp_path, lockfiles):
        path = tmp_path / "package-lock.json"
        path.write_text(lockfiles["npm"])
        assert read_npm_lockfile(path, "next") == "14.2.1"

    def test_lockfile_v1(self, tmp_path, lockfiles):
        path = tmp_path / "package-lock.json"
        path.write_text(lockfiles["npm_v1"])
        assert read_npm_lockfile(path, "next") == "13.4.19"

    def test_missing_entry(self, tmp_path, lockfiles):
        path = tmp_path / "package-lock.json"
        path.write_text(lockfiles["npm"])
        assert read_npm_lockfile(path, "vue") == ""

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "package-lock.json"
        path.write_text("{not json")
        with pytest.raises(ValueError):
            read_npm_lockfile(path, "next")


def test_lockfile_priority_order():
    assert [name for name, _ in LOCKFILE_READERS] == [
        "pnpm-lock.yaml",
        "yarn.lock",
        "npm-shrinkwrap.json",
        "package-lock.json",
    ]


# ============================================================================
# Resolution Tests
# ============================================================================


class TestResolveInstalledVersion:
    """Tests for resolve_installed_version."""

    def test_no_lockfiles_falls_back_to_declared(self, app_root):
        assert resolve_installed_version("next", "^14.0.0", app_root) == "^14.0.0"

    def test_pnpm(self, app_root, lockfiles):
        (app_root / "pnpm-lock.yaml").write_text(lockfiles["pnpm"])
        assert resolve_installed_version("next", "^14.0.0", app_root) == "14.2.3"

    def test_yarn(self, app_root, lockfiles):
        (app_root / "yarn.lock").write_text(lockfiles["yarn_classic"])
        assert resolve_installed_version("next", "^14.0.0", app_root) == "14.2.3"

    def test_npm(self, app_root, lockfiles):
        (app_root / "package-lock.json").write_text(lockfiles["npm"])
        assert resolve_installed_version("next", "^14.0.0", str(app_root)) == "14.2.1"

    def test_shrinkwrap_before_package_lock(self, app_root, lockfiles):
        (app_root / "package-lock.json").write_text(lockfiles["npm"])
        (app_root / "npm-shrinkwrap.json").write_text(lockfiles["npm_v1"])
        assert resolve_installed_version("next", "^14.0.0", app_root) == "13.4.19"

    def test_pnpm_wins_over_npm(self, app_root, lockfiles):
        (app_root / "pnpm-lock.yaml").write_text(lockfiles["pnpm"])
        (app_root / "package-lock.json").write_text(lockfiles["npm"])
        assert resolve_installed_version("next", "^14.0.0", app_root) == "14.2.3"

    def test_corrupt_lockfile_falls_through(self, app_root, lockfiles):
        (app_root / "pnpm-lock.yaml").write_text("dependencies: [unclosed\n")
        (app_root / "package-lock.json").write_text(lockfiles["npm"])
        assert resolve_installed_version("next", "^14.0.0", app_root) == "14.2.1"

    def test_corrupt_npm_lockfile_falls_back_to_declared(self, app_root):
        (app_root / "package-lock.json").write_text("{not json")
        assert resolve_installed_version("next", "^14.0.0", app_root) == "^14.0.0"

    def test_empty_match_falls_through(self, app_root, lockfiles):
        (app_root / "yarn.lock").write_text(lockfiles["yarn_classic"])
        (app_root / "package-lock.json").write_text(lockfiles["npm"])
        # yarn.lock has no ^15 block; npm has next
        assert resolve_installed_version("next", "^15.0.0", app_root) == "14.2.1"

    def test_npm_miss_falls_back_to_declared(self, app_root, lockfiles):
        (app_root / "package-lock.json").write_text(lockfiles["npm"])
        assert resolve_installed_version("vue", "^3.4.0", app_root) == "^3.4.0"

    def test_lockfile_directory_skipped(self, app_root):
        (app_root / "yarn.lock").mkdir()
        assert resolve_installed_version("next", "^14.0.0", app_root) == "^14.0.0"

    def test_installed_version_uses_manifest(self, app_root, lockfiles):
        manifest = read_package_json(app_root)
        assert installed_version(manifest, "next", app_root) == "^14.0.0"
        (app_root / "pnpm-lock.yaml").write_text(lockfiles["pnpm"])
        assert installed_version(manifest, "next", app_root) == "14.2.3"


# ============================================================================
# Manifest Tests
# ============================================================================


class TestPackageJSON:
    """Tests for package.json parsing."""

    def test_read(self, app_root):
        manifest = read_package_json(app_root)
        assert manifest.name == "web"
        assert manifest.declared("next") == "^14.0.0"

    def test_dev_dependency_lookup(self, app_root):
        manifest = read_package_json(app_root)
        assert manifest.declared("typescript") == "^5.3.0"
        assert manifest.declared("vue") == ""

    def test_dependencies_take_precedence(self):
        manifest = PackageJSON.model_validate({
            "dependencies": {"next": "14.2.3"},
            "devDependencies": {"next": "^13.0.0"},
        })
        assert manifest.declared("next") == "14.2.3"

    def test_missing(self, tmp_path):
        with pytest.raises(ManifestError) as exc_info:
            read_package_json(tmp_path)
        assert "not found" in exc_info.value.message

    def test_invalid_json(self, tmp_path):
        (tmp_path / "package.json").write_text("{")
        with pytest.raises(ManifestError):
            read_package_json(tmp_path)

    def test_wrong_shape(self, tmp_path):
        (tmp_path / "package.json").write_text(json.dumps({"dependencies": ["next"]}))
        with pytest.raises(ManifestError):
            read_package_json(tmp_path)
