from vdwall.config import WallSettings, get_settings
from vdwall.domain import Brightness, DeviceAddress, FadeTime, InputSource, InputSwitch
from vdwall.domain.device import VideoWall
from vdwall.domain.factory import create_device
from vdwall.errors import ParameterOutOfRange, UnknownAction, VDWallError
from vdwall.parsing.commands import encode, encode_action
from vdwall.parsing.options import parse_action, resolve_variables
from vdwall.transports.tcp import ConnectionState, ConnectionStatus, TcpTransport
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "Brightness",
    "ConnectionState",
    "ConnectionStatus",
    "DeviceAddress",
    "FadeTime",
    "InputSource",
    "InputSwitch",
    "ParameterOutOfRange",
    "TcpTransport",
    "UnknownAction",
    "VDWallError",
    "VideoWall",
    "WallSettings",
    "create_device",
    "encode",
    "encode_action",
    "get_settings",
    "parse_action",
    "resolve_variables",
]

try:
    __version__ = version("vdwall")
except PackageNotFoundError:
    __version__ = "0.0.0"
