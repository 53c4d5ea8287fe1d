from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (eden package directory)
_EDEN_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _EDEN_DIR / 'prelude'
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_load_path() -> List[Path]:
    """Directories searched by `load` for relative names that do not exist as given."""
    return paths_from_env('EDEN_LOAD_PATH', [Path.cwd()])


def get_prelude_root() -> Path:
    roots = paths_from_env('EDEN_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])
    # treat as single directory; if a file path is set, return its parent
    p = roots[0]
    return p if p.is_dir() else p.parent


def get_log_level() -> str:
    return os.environ.get('EDEN_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
