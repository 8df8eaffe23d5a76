"""
package.json Manifest
=====================

Minimal typed view of a Node.js package.json: just enough to look up the
specifier an application declares for a dependency.
"""

import json
from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from apphosting_common import PACKAGE_JSON_FILENAME, ManifestError


class PackageJSON(BaseModel):
    """
    Parsed package.json.

    Unknown keys are accepted and kept.
    """
    name: Optional[str] = None
    version: Optional[str] = None
    dependencies: Dict[str, str] = {}
    dev_dependencies: Dict[str, str] = Field(default_factory=dict, alias="devDependencies")
    scripts: Dict[str, str] = {}
    engines: Dict[str, str] = {}

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def declared(self, name: str) -> str:
        """Specifier declared for `name`, checking dependencies then devDependencies."""
        if name in self.dependencies:
            return self.dependencies[name]
        return self.dev_dependencies.get(name, "")


def read_package_json(app_root: Union[str, Path]) -> PackageJSON:
    """Read and parse package.json from the application root.

    Raises:
        ManifestError: If the file is missing, not JSON, or has the wrong shape
    """
    path = Path(app_root) / PACKAGE_JSON_FILENAME

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ManifestError(f"{PACKAGE_JSON_FILENAME} not found in {app_root}") from e
    except (OSError, ValueError) as e:
        raise ManifestError(f"Failed to read {path}: {e}") from e

    try:
        return PackageJSON.model_validate(raw)
    except PydanticValidationError as e:
        raise ManifestError(f"Invalid {path}: {e.errors()[0]['msg']}") from e
