from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from vdwall.domain.models import DeviceAddress

DEFAULT_CONNECT_TIMEOUT = 5.0


class ConnectionState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    ERROR = "error"


@dataclass(frozen=True)
class ConnectionStatus:
    state: ConnectionState
    message: Optional[str] = None


StatusObserver = Callable[[ConnectionStatus], None]


class TcpTransport:
    """
    Single outbound TCP connection to one processor.

    Writes are fire-and-forget: nothing is queued, retried or read back.
    Network failures are reported as an ``ERROR`` status, never raised.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        on_status: Optional[StatusObserver] = None,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.connect_timeout = connect_timeout
        self._on_status = on_status
        self._address: Optional[DeviceAddress] = None
        self._writer: Optional[asyncio.StreamWriter] = None
        self._attempt: Optional[object] = None
        self._watcher: Optional[asyncio.Task] = None
        self._status = ConnectionStatus(ConnectionState.DISCONNECTED)

    @property
    def address(self) -> Optional[DeviceAddress]:
        return self._address

    @property
    def status(self) -> ConnectionStatus:
        return self._status

    @property
    def state(self) -> ConnectionState:
        return self._status.state

    @property
    def connected(self) -> bool:
        return self._writer is not None and self.state is ConnectionState.CONNECTED

    def set_observer(self, on_status: Optional[StatusObserver]) -> None:
        self._on_status = on_status

    # ---- helpers ----
    def _set_status(self, state: ConnectionState, message: Optional[str] = None) -> None:
        status = ConnectionStatus(state, message)
        if status == self._status:
            return
        self._status = status
        self.logger.info("status_changed", extra={"details": {"state": state.value, "message": message}})
        if self._on_status is not None:
            self._on_status(status)

    async def _close_writer(self, writer: asyncio.StreamWriter) -> None:
        writer.close()
        try:
            await writer.wait_closed()
        except OSError as exc:
            self.logger.debug("close_failed", extra={"details": {"error": str(exc)}})

    async def _watch(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        # Nothing is expected back; reading only detects EOF or a reset.
        try:
            while await reader.read(1024):
                pass
            message = "connection closed"
        except OSError as exc:
            message = str(exc) or type(exc).__name__
        if self._writer is not writer:
            return
        self._writer = None
        self._watcher = None
        self.logger.error("connection_lost", extra={"details": {"error": message}})
        self._set_status(ConnectionState.ERROR, message)
        await self._close_writer(writer)

    async def _teardown(self) -> None:
        self._attempt = None
        watcher, self._watcher = self._watcher, None
        if watcher is not None and watcher is not asyncio.current_task():
            watcher.cancel()
            try:
                await watcher
            except asyncio.CancelledError:
                pass
        writer, self._writer = self._writer, None
        if writer is not None:
            await self._close_writer(writer)

    # ---- public API ----
    async def connect(self, address: DeviceAddress) -> None:
        """
        Drop any current connection and open a new one to ``address``.

        Does nothing beyond the teardown when ``address.host`` is empty.
        """
        await self._teardown()
        self._address = address
        if not address.is_configured:
            self.logger.info("connect_skipped", extra={"details": {"reason": "host not configured"}})
            self._set_status(ConnectionState.DISCONNECTED)
            return

        attempt = object()
        self._attempt = attempt
        self._set_status(ConnectionState.CONNECTING)
        details = {"host": address.host, "port": address.port}
        try:
            reader, writer = await asyncio.wait_for(
                asyncio.open_connection(address.host, address.port),
                timeout=self.connect_timeout,
            )
        except (OSError, asyncio.TimeoutError) as exc:
            if self._attempt is not attempt:
                return
            self._attempt = None
            message = str(exc) or type(exc).__name__
            self.logger.error("connect_failed", extra={"details": {**details, "error": message}})
            self._set_status(ConnectionState.ERROR, message)
            return

        if self._attempt is not attempt:
            # Superseded by a later connect() or close() while opening.
            await self._close_writer(writer)
            return
        self._attempt = None
        self._writer = writer
        self._watcher = asyncio.create_task(self._watch(reader, writer))
        self.logger.info("connected", extra={"details": details})
        self._set_status(ConnectionState.CONNECTED)

    async def reconfigure(self, address: DeviceAddress) -> bool:
        """Reconnect only if host, port or serial number changed. Returns True if it did."""
        if self._address is not None and not address.differs_from(self._address):
            return False
        await self.connect(address)
        return True

    def send(self, data: bytes) -> bool:
        writer = self._writer
        if writer is None or self.state is not ConnectionState.CONNECTED:
            self.logger.debug("send_skipped", extra={"details": {"reason": "not connected"}})
            return False
        if writer.is_closing():
            self._writer = None
            self.logger.error("send_failed", extra={"details": {"error": "connection closed"}})
            self._set_status(ConnectionState.ERROR, "connection closed")
            return False
        try:
            writer.write(data)
        except (OSError, RuntimeError) as exc:
            self._writer = None
            writer.close()
            self.logger.error("send_failed", extra={"details": {"error": str(exc)}})
            self._set_status(ConnectionState.ERROR, str(exc))
            return False
        self.logger.debug("sent", extra={"details": {"data": data.hex(), "host": self._address.host}})
        return True

    async def close(self) -> None:
        """Close the connection. Safe to call repeatedly."""
        await self._teardown()
        self._set_status(ConnectionState.DISCONNECTED)

    async def __aenter__(self) -> "TcpTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
