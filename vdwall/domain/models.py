from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DeviceAddress(BaseModel):
    """Where a processor lives on the network and which unit to address."""
    model_config = ConfigDict(frozen=True)

    host: str = ""
    port: int = Field(7, ge=1, le=65535)
    serial_number: int = Field(0, ge=0, le=255)

    @property
    def is_configured(self) -> bool:
        return bool(self.host and self.host.strip())

    def differs_from(self, other: "DeviceAddress | None") -> bool:
        if other is None:
            return True
        return (
            self.host != other.host
            or self.port != other.port
            or self.serial_number != other.serial_number
        )
