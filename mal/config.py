from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (mal package directory)
_MAL_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _MAL_DIR / 'prelude'

PRELUDE_SUFFIX = '.mal'

DEFAULT_RECURSION_LIMIT = 10_000


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_root() -> Path:
    roots = paths_from_env('MAL_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])
    # treat as single directory; if a file path is set, return its parent
    p = roots[0]
    return p if p.is_dir() else p.parent


def get_prelude_files() -> List[Path]:
    """Prelude sources in load order (sorted by file name)."""
    root = get_prelude_root()
    if not root.is_dir():
        return []
    return sorted(p for p in root.iterdir() if p.suffix == PRELUDE_SUFFIX)


def get_recursion_limit() -> int:
    """Minimum host recursion limit for nested (non-tail) evaluation and reading."""
    return int(os.environ.get('MAL_RECURSION_LIMIT', DEFAULT_RECURSION_LIMIT))
