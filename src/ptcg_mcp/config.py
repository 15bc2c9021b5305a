"""Runtime settings, read from the environment (a .env file is honored by the server entry point)."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


DEFAULT_BASE_URL = "https://api.pokemontcg.io/v2"


def get_default_log_dir() -> Path:
    # src/ptcg_mcp/config.py -> repository root / logs
    return Path(__file__).resolve().parent.parent.parent / "logs"


@dataclass
class Settings:
    """Settings for the card API client and tool logging."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    max_retries: int = 3
    backoff_ms: int = 500
    log_dir: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "Settings":
        env_log_dir = os.getenv("PTCG_MCP_LOG_DIR")
        return cls(
            base_url=os.getenv("PTCG_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout=float(os.getenv("PTCG_API_TIMEOUT", "30")),
            max_retries=max(1, int(os.getenv("PTCG_API_MAX_RETRIES", "3"))),
            backoff_ms=int(os.getenv("PTCG_API_BACKOFF_MS", "500")),
            log_dir=Path(env_log_dir) if env_log_dir else get_default_log_dir(),
        )
