from .capabilities import (
    CssProfile,
    CssVersion,
    parse_profile,
    parse_version,
    pseudo_classes,
    pseudo_element_exceptions,
    pseudo_elements,
    pseudo_functions,
)
from .context import ValidationContext
from .diagnostics import SelectorDiagnostic
from .errors import ArgumentSyntaxError, MissingInputError, SelectorError, UnknownNameError
from .nth import NthExpression
from .parser import SelectorValidator, StrictModeError
from .pseudo import (
    PseudoFunctionKind,
    PseudoFunctionLang,
    PseudoFunctionNot,
    PseudoFunctionNthChild,
    PseudoFunctionNthLastChild,
    PseudoFunctionNthLastOfType,
    PseudoFunctionNthOfType,
    PseudoFunctionSelector,
    new_pseudo_function,
)
from .selector import parse_selector

__all__ = [
    "ArgumentSyntaxError",
    "CssProfile",
    "CssVersion",
    "MissingInputError",
    "NthExpression",
    "PseudoFunctionKind",
    "PseudoFunctionLang",
    "PseudoFunctionNot",
    "PseudoFunctionNthChild",
    "PseudoFunctionNthLastChild",
    "PseudoFunctionNthLastOfType",
    "PseudoFunctionNthOfType",
    "PseudoFunctionSelector",
    "SelectorDiagnostic",
    "SelectorError",
    "SelectorValidator",
    "StrictModeError",
    "UnknownNameError",
    "ValidationContext",
    "new_pseudo_function",
    "parse_profile",
    "parse_selector",
    "parse_version",
    "pseudo_classes",
    "pseudo_element_exceptions",
    "pseudo_elements",
    "pseudo_functions",
]
