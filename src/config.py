"""Settings loaded from environment variables (+ optional .env).

All variables use the ``PLANNER_`` prefix. A ``.env`` in the working
directory is loaded first; real environment variables win over it.
"""
from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

from models import Category, Language

ENV_PREFIX = "PLANNER"
DEFAULT_HOME = Path("~/.transition_planner")

load_dotenv(override=False)


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off", ""}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default.expanduser()
    return Path(raw).expanduser()


def _env_language(name: str, default: Language) -> Language:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return Language.parse(raw)
    except ValueError:
        return default


def _valid_hex(value: str) -> Optional[str]:
    h = value.strip().lstrip('#')
    if len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h):
        return '#' + h
    return None


def color_env_name(category: Category) -> str:
    """PLANNER_COLOR_ADULT_LIFE, PLANNER_COLOR_SELF_ADVOCACY, ..."""
    return _k(f"COLOR_{category.name}")


def _env_category_colors() -> Dict[Category, str]:
    overrides: Dict[Category, str] = {}
    for category in Category:
        raw = os.getenv(color_env_name(category))
        hex_code = _valid_hex(raw) if raw else None
        if hex_code:
            overrides[category] = hex_code
    return overrides


@dataclass(frozen=True)
class Settings:
    data_file: Path
    language: Language
    log_level: str
    log_dir: Path
    alt_screen: bool
    category_colors: Dict[Category, str] = field(default_factory=dict)

    @staticmethod
    def from_env() -> "Settings":
        log_dir = _env_path(_k("LOG_DIR"), DEFAULT_HOME)
        return Settings(
            data_file=_env_path(_k("DATA_FILE"), DEFAULT_HOME / "planner.json"),
            language=_env_language(_k("LANGUAGE"), Language.ENGLISH),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").upper(),
            log_dir=log_dir,
            alt_screen=_env_bool(_k("ALT_SCREEN"), True),
            category_colors=_env_category_colors(),
        )


def get_settings() -> Settings:
    """Fresh settings from the current environment."""
    return Settings.from_env()
