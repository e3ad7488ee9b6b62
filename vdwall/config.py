from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings

from vdwall.domain.models import DeviceAddress


class WallSettings(BaseSettings):
    host: str = Field("192.168.1.8", validation_alias="VDWALL_HOST")
    port: int = Field(7, ge=1, le=65535, validation_alias="VDWALL_PORT")
    serial_number: int = Field(0, ge=0, le=255, validation_alias="VDWALL_SERIAL_NUMBER")

    connect_timeout: float = Field(5.0, gt=0, validation_alias="VDWALL_CONNECT_TIMEOUT")
    log_ring_size: int = Field(200, ge=1, validation_alias="VDWALL_LOG_RING_SIZE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    def to_address(self) -> DeviceAddress:
        return DeviceAddress(host=self.host, port=self.port, serial_number=self.serial_number)


@lru_cache
def get_settings() -> WallSettings:
    return WallSettings()
