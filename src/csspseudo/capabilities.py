"""Which pseudo-class, pseudo-element and pseudo-function names a CSS level admits.

Every lookup is keyed by the enums below and returns one of the frozen
tables from ``constants`` or ``None`` when no table exists for the
combination. ``None`` is not an error: callers treat it as "reject" for
names and "not applicable" for the pseudo-element exceptions.
"""

from __future__ import annotations

import enum
from types import MappingProxyType

from .constants import (
    PROFILE_LABELS,
    PSEUDO_CLASSES_CSS1,
    PSEUDO_CLASSES_CSS2,
    PSEUDO_CLASSES_CSS3,
    PSEUDO_CLASSES_MOBILE,
    PSEUDO_CLASSES_TV,
    PSEUDO_ELEMENTS_CSS1,
    PSEUDO_ELEMENTS_CSS2,
    PSEUDO_ELEMENTS_CSS3,
    PSEUDO_FUNCTIONS_CSS2,
    PSEUDO_FUNCTIONS_CSS3,
    VERSION_LABELS,
)


class CssVersion(enum.IntEnum):
    CSS1 = 1
    CSS2 = 2
    CSS21 = 3
    CSS3 = 4


class CssProfile(enum.IntEnum):
    DEFAULT = 0
    TV = 1
    MOBILE = 2


NameSet = frozenset[str]

# Profiles with a table of their own; a hit here overrides the version.
_PROFILE_PSEUDO_CLASSES = MappingProxyType(
    {
        CssProfile.TV: PSEUDO_CLASSES_TV,
        CssProfile.MOBILE: PSEUDO_CLASSES_MOBILE,
    }
)

_VERSION_PSEUDO_CLASSES = MappingProxyType(
    {
        CssVersion.CSS1: PSEUDO_CLASSES_CSS1,
        CssVersion.CSS2: PSEUDO_CLASSES_CSS2,
        CssVersion.CSS21: PSEUDO_CLASSES_CSS2,
        CssVersion.CSS3: PSEUDO_CLASSES_CSS3,
    }
)

_PSEUDO_ELEMENTS = MappingProxyType(
    {
        CssVersion.CSS1: PSEUDO_ELEMENTS_CSS1,
        CssVersion.CSS2: PSEUDO_ELEMENTS_CSS2,
        CssVersion.CSS21: PSEUDO_ELEMENTS_CSS2,
        CssVersion.CSS3: PSEUDO_ELEMENTS_CSS3,
    }
)

_PSEUDO_FUNCTIONS = MappingProxyType(
    {
        CssVersion.CSS2: PSEUDO_FUNCTIONS_CSS2,
        CssVersion.CSS21: PSEUDO_FUNCTIONS_CSS2,
        CssVersion.CSS3: PSEUDO_FUNCTIONS_CSS3,
    }
)

# Pseudo-elements that may still be written with a single colon.
_PSEUDO_ELEMENT_EXCEPTIONS = MappingProxyType(
    {
        CssVersion.CSS2: PSEUDO_ELEMENTS_CSS2,
        CssVersion.CSS21: PSEUDO_ELEMENTS_CSS2,
        CssVersion.CSS3: PSEUDO_ELEMENTS_CSS2,
    }
)


def pseudo_classes(version: CssVersion, profile: CssProfile = CssProfile.DEFAULT) -> NameSet | None:
    """Return the pseudo-classes for a version/profile pair.

    A TV or MOBILE profile wins regardless of version; the tables are not
    merged.
    """
    table = _PROFILE_PSEUDO_CLASSES.get(profile)
    if table is not None:
        return table
    return _VERSION_PSEUDO_CLASSES.get(version)


def pseudo_elements(version: CssVersion) -> NameSet | None:
    return _PSEUDO_ELEMENTS.get(version)


def pseudo_functions(version: CssVersion) -> NameSet | None:
    """Return the pseudo-functions for a version (``None`` for CSS1)."""
    return _PSEUDO_FUNCTIONS.get(version)


def pseudo_element_exceptions(version: CssVersion) -> NameSet | None:
    """Return the pseudo-elements that are also legal with pseudo-class syntax."""
    return _PSEUDO_ELEMENT_EXCEPTIONS.get(version)


def _contains(table: NameSet | None, name: str | None) -> bool:
    return table is not None and name is not None and name in table


def is_pseudo_class(name: str | None, version: CssVersion, profile: CssProfile = CssProfile.DEFAULT) -> bool:
    return _contains(pseudo_classes(version, profile), name)


def is_pseudo_element(name: str | None, version: CssVersion) -> bool:
    return _contains(pseudo_elements(version), name)


def is_pseudo_function(name: str | None, version: CssVersion) -> bool:
    return _contains(pseudo_functions(version), name)


def is_pseudo_element_exception(name: str | None, version: CssVersion) -> bool:
    return _contains(pseudo_element_exceptions(version), name)


def parse_version(label: str | CssVersion) -> CssVersion:
    """Map a label such as ``"css21"`` or ``"CSS3"`` to a CssVersion."""
    if isinstance(label, CssVersion):
        return label
    key = str(label).strip().lower()
    if key not in VERSION_LABELS:
        accepted = ", ".join(sorted(VERSION_LABELS))
        raise ValueError(f"Unknown CSS version {label!r} (expected one of: {accepted})")
    return CssVersion[VERSION_LABELS[key]]


def parse_profile(label: str | CssProfile | None) -> CssProfile:
    """Map a label such as ``"tv"`` to a CssProfile; empty means DEFAULT."""
    if isinstance(label, CssProfile):
        return label
    if label is None:
        return CssProfile.DEFAULT
    key = str(label).strip().lower()
    if not key:
        return CssProfile.DEFAULT
    if key not in PROFILE_LABELS:
        accepted = ", ".join(sorted(PROFILE_LABELS))
        raise ValueError(f"Unknown CSS profile {label!r} (expected one of: {accepted})")
    return CssProfile[PROFILE_LABELS[key]]
