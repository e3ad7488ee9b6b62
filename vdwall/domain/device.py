"""
High-level handle for one video-wall processor.

:class:`VideoWall` owns a :class:`~vdwall.transports.tcp.TcpTransport` and
the current :class:`~vdwall.domain.models.DeviceAddress`, and turns typed
actions into frames sent over that transport.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from vdwall.domain.actions import Brightness, InputSwitch
from vdwall.domain.models import DeviceAddress
from vdwall.parsing.commands.builder import encode_action
from vdwall.parsing.options.resolve import Resolver, parse_action
from vdwall.transports.tcp.transport import ConnectionStatus, TcpTransport


class VideoWall:
    def __init__(self, address: DeviceAddress, transport: Optional[TcpTransport] = None) -> None:
        self.address = address
        self.transport = transport or TcpTransport()

    @property
    def status(self) -> ConnectionStatus:
        return self.transport.status

    @property
    def connected(self) -> bool:
        return self.transport.connected

    async def connect(self) -> None:
        await self.transport.connect(self.address)

    async def reconfigure(self, address: DeviceAddress) -> bool:
        """Apply a new address, reconnecting only if it differs from the current one."""
        self.address = address
        return await self.transport.reconfigure(address)

    async def close(self) -> None:
        await self.transport.close()

    def execute(self, action: Union[InputSwitch, Brightness]) -> bool:
        """
        Encode ``action`` for this unit and send it.

        Returns:
            Whether the frame was handed to the socket.

        Raises:
            ParameterOutOfRange: If the configured serial number is invalid.
        """
        return self.transport.send(encode_action(action, self.address.serial_number))

    def run(self, action_id: str, options: Mapping[str, Any], resolver: Optional[Resolver] = None) -> bool:
        """Parse a host action id plus raw options, then :meth:`execute` it."""
        return self.execute(parse_action(action_id, options, resolver))

    def switch_input(self, input_source: int, fade_time: int = 0) -> bool:
        return self.execute(InputSwitch.from_params({"input_source": input_source, "fade_time": fade_time}))

    def set_brightness(self, level: int) -> bool:
        return self.execute(Brightness.from_params({"level": level}))

    async def __aenter__(self) -> "VideoWall":
        await self.connect()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
