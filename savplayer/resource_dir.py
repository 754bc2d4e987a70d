"""Locate a resource directory near the working or application directory."""

from __future__ import annotations

import os
import sys
from pathlib import Path

_MAX_LEVELS_UP = 3


def _default_app_dir() -> Path:
    return Path(sys.argv[0] or ".").resolve().parent


def search_and_set_resource_dir(folder_name: str, app_dir: str | os.PathLike | None = None) -> bool:
    """Find ``folder_name`` and make it the working directory.

    The working directory is searched first, then the application directory
    and up to three levels above it. Returns True if a directory was found
    and entered, False if the working directory was left unchanged.
    """
    if os.path.isdir(folder_name):
        os.chdir(os.path.join(os.getcwd(), folder_name))
        return True

    base = Path(app_dir) if app_dir is not None else _default_app_dir()
    for levels in range(_MAX_LEVELS_UP + 1):
        candidate = base.joinpath(*([os.pardir] * levels), folder_name)
        if candidate.is_dir():
            os.chdir(candidate)
            return True
    return False