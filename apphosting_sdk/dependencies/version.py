"""
Version Parsing
===============

Parses npm-style semantic versions and range specifiers as they appear in
package.json dependencies.

Supported forms:
- Concrete versions: 14.2.3, 1.0.0-canary.5, 1.0.0+build.7
- Comparator clauses: <14.0.15, >=13, ^14.0.0, ~1.2, !=2.0.0, 14.x
- AND-joined clauses: ">=13.0.0 <15.0.0" or ">=13.0.0, <15.0.0"
- OR alternatives: "^13.0.0 || ^14.0.0"
- Hyphen ranges: "1.2.3 - 2.3.4"
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class VersionOperator(str, Enum):
    """Range comparison operators."""

    EQ = "="  # Exact match
    NE = "!="  # Not equal
    GE = ">="  # Greater or equal
    GT = ">"  # Greater than
    LE = "<="  # Less or equal
    LT = "<"  # Less than
    CARET = "^"  # Compatible with major
    TILDE = "~"  # Compatible with minor
    TILDE_GT = "~>"  # Alias of ~


WILDCARDS = ("x", "X", "*")

_STRICT_VERSION = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[A-Za-z-][0-9A-Za-z-]*)(?:\.(?:0|[1-9]\d*|\d*[A-Za-z-][0-9A-Za-z-]*))*))?"
    r"(?:\+([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)

_COMPARATOR = re.compile(
    r"^(?P<op>!=|>=|<=|~>|[<>=^~])?\s*v?"
    r"(?P<major>\d+|[xX*])(?:\.(?P<minor>\d+|[xX*]))?(?:\.(?P<patch>\d+|[xX*]))?"
    r"(?:-(?P<pre>[0-9A-Za-z.-]+))?(?:\+(?P<build>[0-9A-Za-z.-]+))?$"
)

_HYPHEN_RANGE = re.compile(r"^(\S+)\s+-\s+(\S+)$")

# Glue a detached operator to its version: ">= 1.2.3" -> ">=1.2.3"
_DETACHED_OPERATOR = re.compile(r"(!=|>=|<=|~>|[<>=^~])\s+")


@dataclass
class Version:
    """
    A concrete semantic version.

    Only fully specified versions are accepted (major.minor.patch), with
    optional pre-release and build metadata.
    """

    major: int
    minor: int
    patch: int
    pre_release: Optional[str] = None
    build: Optional[str] = None

    def __str__(self) -> str:
        result = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            result += f"-{self.pre_release}"
        if self.build:
            result += f"+{self.build}"
        return result


def parse_version(version_str: str) -> Version:
    """
    Parse a strict semantic version.

    Args:
        version_str: Version string like "14.2.3" or "15.0.0-rc.1"

    Returns:
        Version object

    Raises:
        ValueError: If the string is not a complete semantic version
            (partial versions, ranges and a "v" prefix are rejected)
    """
    match = _STRICT_VERSION.match(version_str.strip())
    if not match:
        raise ValueError(f"Invalid version string: '{version_str}'")

    return Version(
        major=int(match.group(1)),
        minor=int(match.group(2)),
        patch=int(match.group(3)),
        pre_release=match.group(4),
        build=match.group(5),
    )


@dataclass
class Comparator:
    """
    One clause of a range, e.g. ``<14.0.15`` or ``^14``.

    `components` holds the dotted version parts as written (one to three,
    digits or wildcards). `operator` is None for a bare version.
    """

    operator: Optional[VersionOperator]
    components: List[str]
    pre_release: Optional[str] = None
    build: Optional[str] = None

    def __str__(self) -> str:
        result = (self.operator.value if self.operator else "") + ".".join(self.components)
        if self.pre_release:
            result += f"-{self.pre_release}"
        if self.build:
            result += f"+{self.build}"
        return result

    @property
    def is_complete(self) -> bool:
        """True when major, minor and patch are all concrete numbers."""
        return len(self.components) == 3 and not any(c in WILDCARDS for c in self.components)


def parse_comparator(clause: str) -> Comparator:
    """
    Parse a single comparator clause.

    Raises:
        ValueError: If the clause is not an operator followed by a version
    """
    match = _COMPARATOR.match(clause.strip())
    if not match:
        raise ValueError(f"Invalid version constraint: '{clause}'")

    components = [match.group("major")]
    for name in ("minor", "patch"):
        if match.group(name) is None:
            break
        components.append(match.group(name))

    op = match.group("op")
    return Comparator(
        operator=VersionOperator(op) if op else None,
        components=components,
        pre_release=match.group("pre"),
        build=match.group("build"),
    )


@dataclass
class VersionRange:
    """
    A parsed range: OR-alternatives of AND-joined comparators.

    ``">=13.0.0 <15 || ^16"`` ->
    ``[[>=13.0.0, <15], [^16]]``
    """

    alternatives: List[List[Comparator]] = field(default_factory=list)

    def __str__(self) -> str:
        return " || ".join(
            " ".join(str(c) for c in clauses) for clauses in self.alternatives
        )


def _parse_alternative(text: str) -> List[Comparator]:
    text = text.strip()
    if not text:
        raise ValueError("Empty version constraint")

    hyphen = _HYPHEN_RANGE.match(text)
    if hyphen:
        lower = parse_comparator(hyphen.group(1))
        upper = parse_comparator(hyphen.group(2))
        if lower.operator or upper.operator:
            raise ValueError(f"Invalid hyphen range: '{text}'")
        lower.operator = VersionOperator.GE
        upper.operator = VersionOperator.LE
        return [lower, upper]

    text = _DETACHED_OPERATOR.sub(r"\1", text)
    return [parse_comparator(part) for part in re.split(r"[\s,]+", text) if part]


def parse_range(range_str: str) -> VersionRange:
    """
    Parse a range expression.

    Args:
        range_str: Range like ">=13.0.0 <15.0.0" or "^13 || ^14"

    Returns:
        VersionRange object

    Raises:
        ValueError: If any clause is not a valid comparator
    """
    return VersionRange(
        alternatives=[_parse_alternative(part) for part in range_str.split("||")]
    )
