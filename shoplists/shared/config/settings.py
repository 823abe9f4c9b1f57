# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_DEFAULT_PASSWORD = "password"


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class SessionConfig(BaseSettings):
    ttl_seconds: int = Field(7 * 24 * 60 * 60, ge=1, alias="SESSION_TTL_SECONDS")
    # 0 disables the background sweep; expiry is still enforced lazily
    sweep_interval: float = Field(3600.0, ge=0, alias="SESSION_SWEEP_INTERVAL")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", validate_by_name=True
    )


class CredentialsConfig(BaseSettings):
    admin_password: str = Field(_DEFAULT_PASSWORD, min_length=1, alias="ADMIN_PASSWORD")
    user_password: str = Field(_DEFAULT_PASSWORD, min_length=1, alias="USER_PASSWORD")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", validate_by_name=True
    )


class SecurityConfig(BaseSettings):
    # CORS
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", validate_by_name=True
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_hsts(cls, value: str | bool) -> bool:
        return _parse_bool(value)


def _session_config_factory() -> SessionConfig:
    return SessionConfig()  # type: ignore[call-arg]


def _credentials_config_factory() -> CredentialsConfig:
    return CredentialsConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8888, ge=1, le=65535, alias="PORT")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: str | None = Field(None, alias="LOG_FILE")

    session: SessionConfig = Field(default_factory=_session_config_factory)
    credentials: CredentialsConfig = Field(default_factory=_credentials_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
        validate_by_name=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        warnings = []
        if self.credentials.admin_password == _DEFAULT_PASSWORD:
            warnings.append("⚠️  ADMIN_PASSWORD is left at its default value")
        if self.credentials.user_password == _DEFAULT_PASSWORD:
            warnings.append("⚠️  USER_PASSWORD is left at its default value")
        if "*" in self.security.allowed_origins:
            warnings.append("⚠️  CORS allows wildcard (*) origins")
        if self.session.sweep_interval == 0:
            warnings.append("⚠️  Session sweep is DISABLED, expired sessions are kept in memory")

        if warnings:
            print("\n⚠️  PRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)
            print("", file=sys.stderr)

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AppConfig",
    "CredentialsConfig",
    "SecurityConfig",
    "SessionConfig",
    "load_config",
]
