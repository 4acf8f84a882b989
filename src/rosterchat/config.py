"""Service settings, loaded from the environment and an optional .env file."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rosterchat import __version__

DEFAULT_CLIENT_DIR = Path(__file__).resolve().parent / "client"


class Settings(BaseSettings):
    """Chat server settings.

    Env names follow the deployment conventions the server has always used
    (PORT / IP for the listen address).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    service_name: str = Field(default="rosterchat", alias="SERVICE_NAME")
    service_version: str = Field(default=__version__, alias="SERVICE_VERSION")

    # Listen address
    host: str = Field(default="0.0.0.0", alias="IP")
    port: int = Field(default=3000, alias="PORT")
    reload: bool = Field(default=False, alias="RELOAD")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    client_dir: Path = Field(default=DEFAULT_CLIENT_DIR, alias="CLIENT_DIR")

    # Comma-separated; empty means any origin (dev)
    ws_allowed_origins: str = Field(default="", alias="WS_ALLOWED_ORIGINS")
    socketio_namespace: str = Field(default="/", alias="SOCKETIO_NAMESPACE")

    # None keeps the whole transcript for the life of the process
    transcript_limit: Optional[int] = Field(default=None, alias="TRANSCRIPT_LIMIT", ge=1)

    def cors_origins(self) -> Union[str, List[str]]:
        """CORS origins for Socket.IO and the HTTP app, '*' in dev."""
        origins = [o.strip() for o in self.ws_allowed_origins.split(",") if o.strip()]
        return origins or "*"


@lru_cache
def get_settings() -> Settings:
    return Settings()
