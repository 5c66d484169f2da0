"""Options from the ``critpath`` callback that commands read later.

The typer callback runs before any command, but commands only receive their
own arguments. The global ``--config`` path is parked here so that
``discover_config`` can find it while loading a project.
"""

from __future__ import annotations

from pathlib import Path


class _Context:
    def __init__(self) -> None:
        self.config_path: Path | None = None


_context = _Context()


def get_config_path() -> Path | None:
    """Config file named with ``critpath --config``, or None to search for one."""
    return _context.config_path


def set_config_path(path: Path | None) -> None:
    """Record the ``--config`` option; None restores config file discovery."""
    _context.config_path = path


def reset() -> None:
    """Forget every option set by a previous CLI invocation."""
    _context.config_path = None
