"""Tests for the VideoWall facade and factory."""
import asyncio
from unittest.mock import MagicMock

import pytest

from vdwall.config import WallSettings
from vdwall.domain.actions import Brightness, InputSource, InputSwitch
from vdwall.domain.device import VideoWall
from vdwall.domain.factory import create_device
from vdwall.domain.models import DeviceAddress
from vdwall.errors import ParameterOutOfRange, UnknownAction
from vdwall.transports.tcp import TcpTransport


def _wall(serial_number=1):
    transport = MagicMock(spec=TcpTransport)
    transport.send.return_value = True
    return VideoWall(DeviceAddress(host="10.0.0.5", port=7, serial_number=serial_number), transport), transport


def test_execute_encodes_with_serial_number():
    wall, transport = _wall(serial_number=9)
    assert wall.execute(InputSwitch(fade_time=1, input_source=InputSource.VGA2)) is True
    transport.send.assert_called_once_with(bytes([5, 9, 0, 1, 3, 0, 0, 0, 0, 0, 0, 0, 5]))


def test_execute_returns_transport_result():
    wall, transport = _wall()
    transport.send.return_value = False
    assert wall.execute(Brightness(level=10)) is False


def test_run_parses_host_options():
    wall, transport = _wall(serial_number=0)
    wall.run("brightness", {"value": "$(custom:level)"}, lambda text: "55")
    transport.send.assert_called_once_with(bytes([5, 0, 16, 55, 0, 0, 0, 0, 0, 0, 0, 0, 5]))


def test_run_unknown_action_does_not_send():
    wall, transport = _wall()
    with pytest.raises(UnknownAction):
        wall.run("mute", {})
    transport.send.assert_not_called()


def test_helpers_validate_before_sending():
    wall, transport = _wall()
    with pytest.raises(ParameterOutOfRange):
        wall.switch_input(9)
    with pytest.raises(ParameterOutOfRange):
        wall.set_brightness(101)
    transport.send.assert_not_called()


def test_helpers_send_frames():
    wall, transport = _wall(serial_number=2)
    wall.switch_input(InputSource.HDMI, fade_time=2)
    wall.set_brightness(64)
    sent = [c.args[0] for c in transport.send.call_args_list]
    assert sent == [
        bytes([5, 2, 0, 2, 4, 0, 0, 0, 0, 0, 0, 0, 5]),
        bytes([5, 2, 16, 64, 0, 0, 0, 0, 0, 0, 0, 0, 5]),
    ]


def test_reconfigure_updates_address_used_for_encoding():
    wall, transport = _wall(serial_number=1)
    transport.reconfigure.return_value = True
    new_address = DeviceAddress(host="10.0.0.5", port=7, serial_number=4)

    assert asyncio.run(wall.reconfigure(new_address)) is True
    transport.reconfigure.assert_awaited_once_with(new_address)
    wall.set_brightness(1)
    assert transport.send.call_args.args[0][1] == 4


def test_create_device_from_settings():
    settings = WallSettings(host="10.1.2.3", port=5000, serial_number=12, connect_timeout=1.5)
    observer = MagicMock()
    wall = create_device(settings=settings, on_status=observer)

    assert wall.address == DeviceAddress(host="10.1.2.3", port=5000, serial_number=12)
    assert isinstance(wall.transport, TcpTransport)
    assert wall.transport.connect_timeout == 1.5
    assert not wall.connected
