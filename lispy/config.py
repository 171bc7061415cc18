from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional


# Defaults
_DEFAULT_HISTORY_FILE = Path.home() / '.lispy_history'
_DEFAULT_PROMPT = 'lc> '
_DEFAULT_LOG_LEVEL = logging.WARNING

VERSION = '0.0.3'
BANNER = f"Lispy Couch Version {VERSION}\nPress 'ctrl-c' to exit\n"


def path_from_env(var: str, default: Optional[Path] = None) -> Optional[Path]:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip()).expanduser()


def get_history_path() -> Path:
    return path_from_env('LISPY_HISTORY', _DEFAULT_HISTORY_FILE)


def get_prelude_path() -> Optional[Path]:
    # unset means no prelude
    return path_from_env('LISPY_PRELUDE_PATH')


def get_prompt() -> str:
    return os.environ.get('LISPY_PROMPT') or _DEFAULT_PROMPT


def get_log_level() -> int:
    raw = os.environ.get('LISPY_LOGLEVEL', '').upper()
    if raw:
        level = getattr(logging, raw, None)
        if isinstance(level, int):
            return level
    return _DEFAULT_LOG_LEVEL
