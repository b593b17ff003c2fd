"""Runtime settings loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Final, Literal

StorageBackend = Literal["memory", "sql"]

MAX_UPLOAD_BYTES: Final[int] = 10 * 1024 * 1024
_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def _env_list(name: str) -> tuple[str, ...]:
    raw = os.environ.get(name, "")
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    storage_backend: StorageBackend = "memory"
    database_url: str = "sqlite:///./team_dashboard.db"
    db_auto_create: bool = True
    upload_dir: str = "uploads"
    max_upload_bytes: int = MAX_UPLOAD_BYTES
    seed_default_members: bool = True
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not 0 < self.max_upload_bytes <= MAX_UPLOAD_BYTES:
            raise ValueError(f"max_upload_bytes must be between 1 and {MAX_UPLOAD_BYTES}")

    @classmethod
    def from_env(cls) -> "Settings":
        backend = os.environ.get("STORAGE_BACKEND", "memory").strip().lower()
        if backend not in {"memory", "sql"}:
            raise ValueError(f"STORAGE_BACKEND must be 'memory' or 'sql', got {backend!r}")
        return cls(
            storage_backend=backend,  # type: ignore[arg-type]
            database_url=os.environ.get("DATABASE_URL", cls.database_url),
            db_auto_create=_env_bool("DB_AUTO_CREATE", True),
            upload_dir=os.environ.get("UPLOAD_DIR", cls.upload_dir),
            # Upload metadata never accepts more than MAX_UPLOAD_BYTES, so larger values are clamped.
            max_upload_bytes=min(int(os.environ.get("MAX_UPLOAD_BYTES", MAX_UPLOAD_BYTES)), MAX_UPLOAD_BYTES),
            seed_default_members=_env_bool("SEED_DEFAULT_MEMBERS", True),
            log_level=os.environ.get("LOG_LEVEL", cls.log_level).upper(),
            cors_origins=_env_list("CORS_ORIGINS"),
        )


settings = Settings.from_env()
