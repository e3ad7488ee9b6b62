"""
Command frame builder for VDWall LVP video-wall processors.

This sub-package turns typed actions into the fixed-length binary frames
the processor accepts over TCP.
"""
from vdwall.parsing.commands.builder import (
    build_frame,
    encode,
    encode_action,
    BROADCAST_SERIAL,
    COMMAND_OPCODE,
    FRAME_LENGTH,
    SUBOPCODE_BRIGHTNESS,
    SUBOPCODE_INPUT_SWITCH,
    TERMINATOR,
)

__all__ = [
    "build_frame",
    "encode",
    "encode_action",
    "BROADCAST_SERIAL",
    "COMMAND_OPCODE",
    "FRAME_LENGTH",
    "SUBOPCODE_BRIGHTNESS",
    "SUBOPCODE_INPUT_SWITCH",
    "TERMINATOR",
]
