# api/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    duckdb_read_only: bool
    rate_limit_per_minute: int
    debug: bool
    cors_origins: tuple[str, ...]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = os.environ.get("API_CORS_ORIGINS", "http://localhost:5173,http://localhost:3000")
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        duckdb_read_only=os.environ.get("DUCKDB_READ_ONLY", "false").lower() == "true",
        rate_limit_per_minute=int(os.environ.get("API_RATE_LIMIT_PER_MINUTE", "60")),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
    )
