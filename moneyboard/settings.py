"""Runtime settings read from the environment."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass

_PORT = re.compile(r"\+?\d+")
_PASSWORD = "password"


def _port(value: str | None, default: int) -> int:
    """A TCP port, or ``default`` when the value is missing or unusable."""
    if value is None or not _PORT.fullmatch(value):
        return default
    number = int(value)
    return number if number <= 0xFFFF else default


@dataclass(frozen=True)
class Settings:
    """Database connection and listening address."""

    db_host: str = "localhost"
    db_port: int = 8000
    db_user: str = "root"
    db_password: str = _PASSWORD
    db_namespace: str = "test"
    db_database: str = "test"
    host: str = "0.0.0.0"
    port: int = 8082

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Settings from ``environ`` (the process environment by default)."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            db_host=env.get("DB_HOST", defaults.db_host),
            db_port=_port(env.get("DB_PORT"), defaults.db_port),
            db_user=env.get("DB_USER", defaults.db_user),
            db_password=env.get("DB_PASSWORD", defaults.db_password),
            db_namespace=env.get("DB_NAMESPACE", defaults.db_namespace),
            db_database=env.get("DB_DATABASE", defaults.db_database),
            host=env.get("HOST", defaults.host),
            port=_port(env.get("PORT"), defaults.port),
        )