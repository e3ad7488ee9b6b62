"""
Typed actions understood by VDWall LVP-series video-wall processors.

Each action is a frozen pydantic model carrying its already-validated
parameters. The ``kind`` field is the discriminator used by the
:data:`Action` union and by the command encoder.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Annotated, Any, ClassVar, Literal, Mapping, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from vdwall.errors import ParameterOutOfRange, UnknownAction


class InputSource(IntEnum):
    """Physical inputs selectable on the processor."""
    V1 = 0
    V2 = 1
    VGA1 = 2
    VGA2 = 3
    HDMI = 4
    DVI = 5
    DP = 6
    EXT = 7
    YPBPR = 8


class FadeTime(IntEnum):
    """Cross-fade duration applied when switching inputs."""
    INSTANT = 0
    HALF_SECOND = 1
    ONE_SECOND = 2
    ONE_AND_HALF_SECONDS = 3

    @property
    def seconds(self) -> float:
        return self.value * 0.5

    @property
    def label(self) -> str:
        return f"{self.seconds:.1f}s"


def _require_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("value must be an integer")
    return int(value)


# Plain ints only: no bools, numeric strings or floats.
ParamInt = Annotated[int, BeforeValidator(_require_int)]


class _ActionBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # field name -> inclusive (low, high)
    BOUNDS: ClassVar[dict[str, tuple[int, int]]] = {}

    @classmethod
    def from_params(cls, params: Mapping[str, Any]):
        """
        Build the action from a plain parameter mapping.

        Raises:
            ParameterOutOfRange: If a parameter is missing, not an integer,
                or outside its bounds.
        """
        values = {key: value for key, value in params.items() if key in cls.BOUNDS}
        try:
            return cls(**values)
        except ValidationError as exc:
            error = _out_of_range(cls, params, exc)
            if error is None:
                raise
            raise error from exc


class InputSwitch(_ActionBase):
    """
    Switch the wall to another input.

    Attributes:
        fade_time: Fade duration index, 0-3 (see :class:`FadeTime`).
        input_source: Input index, 0-8 (see :class:`InputSource`).
    """
    BOUNDS: ClassVar[dict[str, tuple[int, int]]] = {
        "fade_time": (0, 3),
        "input_source": (0, 8),
    }

    kind: Literal["InputSwitch"] = "InputSwitch"
    fade_time: ParamInt = Field(..., ge=0, le=3)
    input_source: ParamInt = Field(..., ge=0, le=8)


class Brightness(_ActionBase):
    """
    Set the wall brightness.

    Some units run on a 0-64 scale and others on 0-100; the client accepts
    0-100 and leaves the device-specific ceiling to the caller.
    """
    BOUNDS: ClassVar[dict[str, tuple[int, int]]] = {"level": (0, 100)}

    kind: Literal["Brightness"] = "Brightness"
    level: ParamInt = Field(..., ge=0, le=100)


Action = Annotated[Union[InputSwitch, Brightness], Field(discriminator="kind")]

ACTION_TYPES: dict[str, type[_ActionBase]] = {
    "InputSwitch": InputSwitch,
    "Brightness": Brightness,
}


def create_action(name: str, params: Mapping[str, Any]) -> Union[InputSwitch, Brightness]:
    """Look up an action type by name and build it from ``params``."""
    try:
        action_type = ACTION_TYPES[name]
    except (KeyError, TypeError):
        raise UnknownAction(name, tuple(ACTION_TYPES)) from None
    return action_type.from_params(params)


def _out_of_range(
    cls: type[_ActionBase],
    params: Mapping[str, Any],
    exc: ValidationError,
) -> Optional[ParameterOutOfRange]:
    for error in exc.errors():
        loc = error.get("loc") or ()
        name = str(loc[0]) if loc else ""
        if name in cls.BOUNDS:
            low, high = cls.BOUNDS[name]
            return ParameterOutOfRange(name, params.get(name), low, high)
    return None
