from vdwall.transports.tcp.transport import (
    ConnectionState,
    ConnectionStatus,
    StatusObserver,
    TcpTransport,
    DEFAULT_CONNECT_TIMEOUT,
)

__all__ = [
    "ConnectionState",
    "ConnectionStatus",
    "StatusObserver",
    "TcpTransport",
    "DEFAULT_CONNECT_TIMEOUT",
]
