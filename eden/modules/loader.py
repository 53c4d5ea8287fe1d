"""Source-file loading for `load`, the prelude and the command line."""

from __future__ import annotations

import logging
from pathlib import Path

from eden import LispValue, EvaluatorFn
from eden.config import get_load_path, get_prelude_root
from eden.errors import EdenLoadError, EdenSyntaxError
from eden.reader.parser import read_all
from eden.types.environment import Environment

logger = logging.getLogger(__name__)

PRELUDE_FILE = "core.lisp"


def resolve_path(name: str) -> Path:
    """Return `name` if it exists, else the first match under the load path."""
    path = Path(name)
    if path.is_file():
        return path
    if not path.is_absolute():
        for root in get_load_path():
            candidate = root / path
            if candidate.is_file():
                return candidate
    raise EdenLoadError(f"Cannot find file to load: {name}")


def load_source(
    code: str, env: Environment, evaluate_fn: EvaluatorFn, origin: str = "<string>"
) -> LispValue:
    """Evaluate every top-level form of `code` in `env`; return the last value or ()."""
    try:
        forms = read_all(code)
    except EdenSyntaxError as exc:
        raise EdenLoadError(f"Cannot parse {origin}: {exc}") from exc

    logger.debug("Evaluating %d form(s) from %s", len(forms), origin)
    result: LispValue = []
    for form in forms:
        result = evaluate_fn(form, env)
    return result


def load_file(name: str, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    path = resolve_path(name)
    try:
        code = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise EdenLoadError(f"Error reading file {path}: {exc}") from exc
    logger.debug("Loading %s", path)
    return load_source(code, env, evaluate_fn, origin=str(path))


def load_prelude(env: Environment, evaluate_fn: EvaluatorFn) -> None:
    """Evaluate the prelude's core.lisp into `env`.

    Raises FileNotFoundError if the prelude root has no core.lisp.
    """
    core = get_prelude_root() / PRELUDE_FILE
    if not core.is_file():
        raise FileNotFoundError(f"No prelude at {core}")
    logger.debug("Loading prelude %s", core)
    load_source(core.read_text(encoding="utf-8"), env, evaluate_fn, origin=str(core))
