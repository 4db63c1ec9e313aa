from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

# Load .env if present
load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str = field(default_factory=lambda: os.getenv("BRAZIL_MODELS_LOG_LEVEL", "INFO"))
    mask_output: bool = field(default_factory=lambda: _env_bool("BRAZIL_MODELS_MASK_OUTPUT"))
    generate_limit: int = field(
        default_factory=lambda: int(os.getenv("BRAZIL_MODELS_GENERATE_LIMIT", "100"))
    )


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
