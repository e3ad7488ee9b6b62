"""
This package defines the core domain models for the vdwall library: the
address of a processor and the typed actions it accepts.

The :class:`~vdwall.domain.device.VideoWall` facade lives in
``vdwall.domain.device`` and is re-exported from the top-level package.
"""
from vdwall.domain.actions import (
    Action,
    ACTION_TYPES,
    Brightness,
    FadeTime,
    InputSource,
    InputSwitch,
    create_action,
)
from vdwall.domain.models import DeviceAddress

__all__ = [
    "Action",
    "ACTION_TYPES",
    "Brightness",
    "DeviceAddress",
    "FadeTime",
    "InputSource",
    "InputSwitch",
    "create_action",
]
