"""
Option-bag handling for host-driven actions.

Control surfaces describe an action as an id plus a flat mapping of option
values, any of which may still contain ``$(...)`` placeholders. This module
resolves those placeholders through a caller-supplied callable and turns
the result into a typed :mod:`vdwall.domain.actions` action.
"""
from __future__ import annotations

import re
from typing import Any, Callable, Mapping, Optional, Union

from vdwall.domain.actions import Brightness, InputSwitch
from vdwall.errors import ParameterOutOfRange, UnknownAction

VARIABLE_MARKER = "$("
NUMBER_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")

Resolver = Callable[[str], str]


def resolve_variables(raw_options: Mapping[str, Any], resolver: Optional[Resolver] = None) -> dict[str, Any]:
    """
    Return a new option dict with placeholder values resolved.

    String values containing ``$(`` are passed through ``resolver`` and
    stripped. ``raw_options`` is never modified.
    """
    resolved: dict[str, Any] = {}
    for key, value in raw_options.items():
        if resolver is not None and isinstance(value, str) and VARIABLE_MARKER in value:
            value = resolver(value).strip()
        resolved[key] = value
    return resolved


def parse_int_option(name: str, value: Any, low: int, high: int) -> int:
    """Coerce an option value (int or numeric string) to an int within bounds."""
    if isinstance(value, bool):
        raise ParameterOutOfRange(name, value, low, high)
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and NUMBER_PATTERN.match(value):
        number = int(value)
    else:
        raise ParameterOutOfRange(name, value, low, high)
    if not low <= number <= high:
        raise ParameterOutOfRange(name, value, low, high)
    return number


def _input_switch(options: Mapping[str, Any]) -> InputSwitch:
    return InputSwitch(
        fade_time=parse_int_option("fade", options.get("fade", 0), *InputSwitch.BOUNDS["fade_time"]),
        input_source=parse_int_option("input", options.get("input", 0), *InputSwitch.BOUNDS["input_source"]),
    )


def _brightness(options: Mapping[str, Any]) -> Brightness:
    return Brightness(
        level=parse_int_option("value", options.get("value", 0), *Brightness.BOUNDS["level"]),
    )


ACTION_PARSERS: dict[str, Callable[[Mapping[str, Any]], Union[InputSwitch, Brightness]]] = {
    "input_switch": _input_switch,
    "brightness": _brightness,
}


def parse_action(
    action_id: str,
    options: Mapping[str, Any],
    resolver: Optional[Resolver] = None,
) -> Union[InputSwitch, Brightness]:
    """
    Build a typed action from a host action id and its raw options.

    Args:
        action_id: ``"input_switch"`` (options ``input``, ``fade``) or
            ``"brightness"`` (option ``value``).
        options: Raw option values; missing options fall back to ``0``.
        resolver: Optional placeholder resolver, see :func:`resolve_variables`.

    Raises:
        UnknownAction: If ``action_id`` is not recognised.
        ParameterOutOfRange: If an option is not numeric or out of range.
    """
    parser = ACTION_PARSERS.get(action_id)
    if parser is None:
        raise UnknownAction(action_id, tuple(ACTION_PARSERS))
    return parser(resolve_variables(options, resolver))
