"""
Command frame builder for VDWall LVP video-wall processors.

Every command is a fixed 13-byte frame:
``[0x05] [serial] [subopcode] [param1] [param2] [0x00 * 7] [0x05]``
"""
from __future__ import annotations

from typing import Any, Mapping, Union

from vdwall.domain.actions import Brightness, InputSwitch, create_action
from vdwall.errors import ParameterOutOfRange, UnknownAction

# Frame markers and lengths.
COMMAND_OPCODE = 0x05
TERMINATOR = 0x05
FRAME_LENGTH = 13
PAYLOAD_LENGTH = FRAME_LENGTH - 4

# Subopcodes.
SUBOPCODE_INPUT_SWITCH = 0x00
SUBOPCODE_BRIGHTNESS = 0x10

# Serial 0 addresses every unit on the link.
BROADCAST_SERIAL = 0
MAX_SERIAL = 0xFF


def build_frame(serial_number: int, subopcode: int, param1: int = 0, param2: int = 0) -> bytes:
    """
    Build a raw 13-byte command frame.

    Args:
        serial_number: Target unit, 1-255, or 0 for all units.
        subopcode: The command selector byte.
        param1: First parameter byte.
        param2: Second parameter byte.

    Returns:
        The frame as ``bytes``, ready to be written to the socket.
    """
    if isinstance(serial_number, bool) or not isinstance(serial_number, int):
        raise ParameterOutOfRange("serial_number", serial_number, BROADCAST_SERIAL, MAX_SERIAL)
    if not 0 <= serial_number <= MAX_SERIAL:
        raise ParameterOutOfRange("serial_number", serial_number, BROADCAST_SERIAL, MAX_SERIAL)
    payload = bytes([param1, param2]) + bytes(PAYLOAD_LENGTH - 2)
    return bytes([COMMAND_OPCODE, serial_number, subopcode]) + payload + bytes([TERMINATOR])


def encode_action(action: Union[InputSwitch, Brightness], serial_number: int) -> bytes:
    """Encode an already-validated action for the unit at ``serial_number``."""
    if isinstance(action, InputSwitch):
        return build_frame(serial_number, SUBOPCODE_INPUT_SWITCH, action.fade_time, action.input_source)
    if isinstance(action, Brightness):
        return build_frame(serial_number, SUBOPCODE_BRIGHTNESS, action.level)
    raise UnknownAction(type(action).__name__)


def encode(action_name: str, params: Mapping[str, Any], serial_number: int) -> bytes:
    """
    Validate ``params`` for ``action_name`` and encode the command frame.

    Args:
        action_name: ``"InputSwitch"`` or ``"Brightness"``.
        params: ``fade_time`` and ``input_source`` for InputSwitch,
            ``level`` for Brightness.
        serial_number: Target unit, 0 for broadcast.

    Raises:
        UnknownAction: If ``action_name`` is not a known action.
        ParameterOutOfRange: If a parameter or the serial number is invalid.
    """
    return encode_action(create_action(action_name, params), serial_number)
