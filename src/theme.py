"""Color & style helpers.

Decisions:
- Each category has its own bar color; status changes the bar shape/intensity.
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Category colors can be overridden via PLANNER_COLOR_<CATEGORY> in the
  environment or the project .env file (loaded by config).
"""
from __future__ import annotations
import os, sys
from typing import Dict

from config import get_settings
from models import CATEGORY_COLORS, Category, TaskStatus

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

def _code(part: str) -> str:
    return f"\033[{part}m" if _ENABLE else ''

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    idx = 16 + 36 * round(r / 255 * 5) + 6 * round(g / 255 * 5) + round(b / 255 * 5)
    return f"\033[38;5;{idx}m"

def fg(hex_code: str) -> str:
    """ANSI foreground sequence for a hex color ('' when color is off)."""
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"
    return _fg_256(r, g, b)

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')
UNDERLINE = _code('4')
REVERSE = _code('7')

HEX_HEADER = '#51467F'  # age band header purple
HEX_MUTED = '#9B9B9B'

_HEX_CATEGORY: Dict[Category, str] = {**CATEGORY_COLORS, **get_settings().category_colors}

CATEGORY_COLOR: Dict[Category, str] = {c: fg(h) for c, h in _HEX_CATEGORY.items()}

STATUS_COLOR: Dict[TaskStatus, str] = {
    TaskStatus.NOT_STARTED: fg(HEX_MUTED),
    TaskStatus.IN_PROGRESS: fg('#007AFF'),
    TaskStatus.COMPLETED: fg('#34C759'),
}

HEADER_COLOR = fg(HEX_HEADER) + BOLD
MUTED_COLOR = DIM + fg(HEX_MUTED)

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

def bar_style(category: Category, status: TaskStatus) -> str:
    """Reverse-video bar in the category color; completed bars are dimmed."""
    style = CATEGORY_COLOR[category] + REVERSE
    if status == TaskStatus.COMPLETED:
        style = DIM + style
    return style if _ENABLE else ''

__all__ = [
    'color','fg','bar_style','RESET','BOLD','DIM','UNDERLINE','REVERSE','CATEGORY_COLOR','STATUS_COLOR',
    'HEADER_COLOR','MUTED_COLOR','_ENABLE','_USE_TRUECOLOR','_FORCE'
]
