"""Auto-discovery of Guesser subclasses.

Every module in this ``guessers/`` package is imported and each concrete
:class:`guesser.Guesser` subclass it defines becomes available by name.
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
from pathlib import Path

from guesser import Guesser

_PKG_DIR = Path(__file__).resolve().parent


def _subclasses_in_module(mod) -> list[type[Guesser]]:
    found: list[type[Guesser]] = []
    for attr_name in dir(mod):
        obj = getattr(mod, attr_name)
        if (
            isinstance(obj, type)
            and issubclass(obj, Guesser)
            and not inspect.isabstract(obj)
            and obj.__module__ == mod.__name__
        ):
            found.append(obj)
    return found


def discover_guessers() -> list[type[Guesser]]:
    """Return all built-in Guesser subclasses, ordered by module name."""
    found: list[type[Guesser]] = []
    for info in sorted(pkgutil.iter_modules([str(_PKG_DIR)]), key=lambda i: i.name):
        mod = importlib.import_module(f"guessers.{info.name}")
        found.extend(_subclasses_in_module(mod))
    return found


def find_guesser(name: str) -> type[Guesser]:
    """Resolve a guesser class by its display name (case-insensitive)."""
    classes = discover_guessers()
    for cls in classes:
        if cls().name.lower() == name.lower():
            return cls
    available = [cls().name for cls in classes]
    raise RuntimeError(f"Guesser {name!r} not found. Available: {available}")
