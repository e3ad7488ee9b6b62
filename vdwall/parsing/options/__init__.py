"""
Host option-bag parsing.

Resolves ``$(...)`` placeholders through a caller-supplied resolver and
converts action ids plus option values into typed actions.
"""
from vdwall.parsing.options.resolve import (
    parse_action,
    parse_int_option,
    resolve_variables,
    ACTION_PARSERS,
    VARIABLE_MARKER,
)

__all__ = [
    "parse_action",
    "parse_int_option",
    "resolve_variables",
    "ACTION_PARSERS",
    "VARIABLE_MARKER",
]
