from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8000
    auth_user: str | None = None
    auth_pass: str | None = None
    log_level: str = "info"

    @property
    def auth_enabled(self) -> bool:
        return bool(self.auth_user and self.auth_pass)


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    env = environ if environ is not None else os.environ
    host = env.get("NOTELIST_HOST", "127.0.0.1")
    port_raw = env.get("NOTELIST_PORT", "8000")
    try:
        port = int(port_raw)
    except ValueError as e:
        raise ValueError(f"Invalid NOTELIST_PORT: {port_raw}") from e

    log_level = env.get("NOTELIST_LOG_LEVEL", "info").lower()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Invalid NOTELIST_LOG_LEVEL: {log_level}")

    auth_user = env.get("NOTELIST_AUTH_USER") or None
    auth_pass = env.get("NOTELIST_AUTH_PASS") or None

    return Settings(host=host, port=port, auth_user=auth_user, auth_pass=auth_pass, log_level=log_level)
