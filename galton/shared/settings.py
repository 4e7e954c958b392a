# galton/shared/settings.py
import os
from dataclasses import dataclass

@dataclass
class Settings:
    rows: int = 12
    balls: int = 200
    capacity: int = 100
    log_level: str = "INFO"

def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default

def load_settings() -> Settings:
    """Initial control values; e.g. GALTON_ROWS=20 galton-board"""
    return Settings(
        rows=_env_int("GALTON_ROWS", 12),
        balls=_env_int("GALTON_BALLS", 200),
        capacity=_env_int("GALTON_CAPACITY", 100),
        log_level=os.getenv("GALTON_LOG_LEVEL", "INFO").upper(),
    )
