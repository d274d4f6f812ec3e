"""Selector name tables per CSS level and delivery profile."""

from __future__ import annotations

PSEUDO_CLASSES_CSS1: frozenset[str] = frozenset({"link", "visited", "active"})

PSEUDO_CLASSES_CSS2: frozenset[str] = frozenset(
    {
        "link",
        "visited",
        "active",
        "focus",
        "hover",
        "first-child",
    }
)

PSEUDO_CLASSES_CSS3: frozenset[str] = frozenset(
    {
        "link",
        "visited",
        "active",
        "focus",
        "target",
        "hover",
        "first-child",
        "enabled",
        "disabled",
        "checked",
        "indeterminate",
        "root",
        "last-child",
        "first-of-type",
        "last-of-type",
        "only-of-type",
        "only-child",
        "empty",
        "fullscreen",
        "default",
        "valid",
        "invalid",
        "in-range",
        "out-of-range",
        "required",
        "optional",
        "read-only",
        "read-write",
        "defined",
        "placeholder-shown",
        # selectors-4, unstable list (2019-06-26)
        "any-link",
        "local-link",
        "target-within",
        "scope",
        "focus-visible",
        "focus-within",
        "current",
        "past",
        "future",
        "playing",
        "pause",
        "blank",
        "user-invalid",
    }
)

PSEUDO_CLASSES_TV: frozenset[str] = frozenset({"link", "visited", "active", "focus", "first-child"})

PSEUDO_CLASSES_MOBILE: frozenset[str] = frozenset({"link", "visited", "active", "focus"})

PSEUDO_ELEMENTS_CSS1: frozenset[str] = frozenset({"first-line", "first-letter"})

PSEUDO_ELEMENTS_CSS2: frozenset[str] = frozenset({"first-line", "first-letter", "before", "after"})

PSEUDO_ELEMENTS_CSS3: frozenset[str] = frozenset(
    {
        "first-line",
        "first-letter",
        "before",
        "after",
        "marker",
        "selection",
        "placeholder",
        "backdrop",
    }
)

PSEUDO_FUNCTIONS_CSS2: frozenset[str] = frozenset({"lang"})

PSEUDO_FUNCTIONS_CSS3: frozenset[str] = frozenset(
    {
        "nth-child",
        "nth-last-child",
        "nth-of-type",
        "nth-last-of-type",
        "lang",
        "not",
        # selectors-4, unstable list (2019-06-24)
        "nth-col",
        "nth-last-col",
        "is",
        "where",
        "has",
        "dir",
    }
)

# Accepted spellings for the command line and ValidationContext helpers
VERSION_LABELS: dict[str, str] = {
    "css1": "CSS1",
    "css2": "CSS2",
    "css21": "CSS21",
    "css2.1": "CSS21",
    "css3": "CSS3",
}

PROFILE_LABELS: dict[str, str] = {
    "default": "DEFAULT",
    "none": "DEFAULT",
    "tv": "TV",
    "mobile": "MOBILE",
}

WHITESPACE: str = " \t\n\r\f"
ASCII_DIGITS: str = "0123456789"
