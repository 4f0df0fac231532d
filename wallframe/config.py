"""Service settings loaded from WALLFRAME_* environment variables."""

from __future__ import annotations
import os
from pydantic import BaseModel


class Settings(BaseModel):
    """Runtime settings for the HTTP service."""
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    @classmethod
    def from_env(cls) -> Settings:
        env = os.environ
        values: dict[str, object] = {}
        if "WALLFRAME_LOG_LEVEL" in env:
            values["log_level"] = env["WALLFRAME_LOG_LEVEL"].upper()
        if "WALLFRAME_CORS_ORIGINS" in env:
            values["cors_origins"] = [
                o.strip() for o in env["WALLFRAME_CORS_ORIGINS"].split(",") if o.strip()
            ]
        if "WALLFRAME_HOST" in env:
            values["host"] = env["WALLFRAME_HOST"]
        if "WALLFRAME_PORT" in env:
            values["port"] = env["WALLFRAME_PORT"]
        if "WALLFRAME_RELOAD" in env:
            values["reload"] = env["WALLFRAME_RELOAD"].lower() == "true"
        return cls(**values)
