from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="ERRWHAT_LOG_LEVEL")
    log_json: bool = Field(default=False, validation_alias="ERRWHAT_LOG_JSON")
    otel_enabled: bool = Field(default=False, validation_alias="ERRWHAT_OTEL")
    otel_service_name: str = Field(
        default="errwhat", validation_alias="OTEL_SERVICE_NAME"
    )
    tracer_name: str = Field(default="default", validation_alias="ERRWHAT_TRACER_NAME")

    @field_validator("log_json", "otel_enabled", mode="before")
    @classmethod
    def _parse_flag(cls, v: bool | str) -> bool | str:
        if v == "":
            return False
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )
