"""
Adaptor Version Selection
=========================

The Next.js build adaptor is published once per major.minor release of
Next.js. This module maps the framework's declared specifier onto the
coarser major.minor specifier to request from the registry.

Mapping Rules:
1. Concrete version → "major.minor" (14.2.3 → 14.2)
2. Range → every complete clause loses its patch component:
   - "<X.Y.Z" with Z > 0 becomes "<=X.Y" (<14.0.15 must still admit 14.0)
   - ">X.Y.Z" becomes ">=X.Y"
   - partial clauses (^14, 14.x) are kept as written
3. Anything else → "latest"
"""

from apphosting_common import ADAPTOR_PACKAGE, FALLBACK_ADAPTOR_VERSION, get_logger

from .version import (
    Comparator,
    VersionOperator,
    VersionRange,
    parse_range,
    parse_version,
)

logger = get_logger(__name__)


def _truncate_clause(clause: Comparator) -> Comparator:
    if not clause.is_complete:
        return clause

    operator = clause.operator
    if operator == VersionOperator.LT and int(clause.components[2]) != 0:
        operator = VersionOperator.LE
    elif operator == VersionOperator.GT:
        operator = VersionOperator.GE

    return Comparator(operator=operator, components=clause.components[:2])


def normalize_adaptor_version(specifier: str) -> str:
    """
    Translate a framework specifier into an adaptor specifier.

    Args:
        specifier: Declared framework version, e.g. "14.2.3" or ">13.0.2 <14.0.15"

    Returns:
        Adaptor specifier at major.minor granularity, or "latest" if the
        specifier is neither a version nor a valid range

    Examples:
        >>> normalize_adaptor_version("14.2.3")
        '14.2'
        >>> normalize_adaptor_version(">13.0.2 <14.0.15")
        '>=13.0 <=14.0'
        >>> normalize_adaptor_version("canary")
        'latest'
    """
    try:
        version = parse_version(specifier)
    except ValueError:
        pass
    else:
        return f"{version.major}.{version.minor}"

    try:
        version_range = parse_range(specifier)
    except ValueError as e:
        logger.debug(
            "Specifier is not a version range, using fallback",
            specifier=specifier,
            fallback=FALLBACK_ADAPTOR_VERSION,
            error=str(e),
        )
        return FALLBACK_ADAPTOR_VERSION

    normalized = VersionRange(
        alternatives=[
            [_truncate_clause(clause) for clause in clauses]
            for clauses in version_range.alternatives
        ]
    )
    return str(normalized)


def adaptor_package_spec(adaptor_version: str) -> str:
    """Registry request string, e.g. "@apphosting/adapter-nextjs@14.2"."""
    return f"{ADAPTOR_PACKAGE}@{adaptor_version}"


def detect_adaptor_package(framework_specifier: str) -> str:
    """Adaptor request string for a declared framework specifier."""
    adaptor_version = normalize_adaptor_version(framework_specifier)
    logger.debug(
        "Selected adaptor version",
        framework_specifier=framework_specifier,
        adaptor_version=adaptor_version,
    )
    return adaptor_package_spec(adaptor_version)
