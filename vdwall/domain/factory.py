from __future__ import annotations

import logging
from typing import Optional

from vdwall.config import WallSettings, get_settings
from vdwall.domain.device import VideoWall
from vdwall.logging import create_logger
from vdwall.transports.tcp.transport import StatusObserver, TcpTransport


def create_device(
    settings: Optional[WallSettings] = None,
    logger: Optional[logging.Logger] = None,
    on_status: Optional[StatusObserver] = None,
) -> VideoWall:
    settings = settings or get_settings()
    if logger is None:
        logger = create_logger("vdwall", ring_size=settings.log_ring_size)
    transport = TcpTransport(
        logger=logger,
        on_status=on_status,
        connect_timeout=settings.connect_timeout,
    )
    return VideoWall(address=settings.to_address(), transport=transport)
