"""Directories scanned for application descriptors."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from platformdirs import user_data_dir

APPLICATIONS_SUBDIR = "applications"
FALLBACK_APPLICATIONS_DIR = Path("/run/current-system/sw/share/applications")


def user_applications_dir() -> Path:
    """Return the per-user applications directory under the platform data dir."""
    return Path(user_data_dir()) / APPLICATIONS_SUBDIR


def application_dirs(
    environ: Mapping[str, str] | None = None,
    extra_dirs: Iterable[Path] = (),
) -> list[Path]:
    """Build the ordered, de-duplicated list of directories to walk.

    Order: every ``XDG_DATA_DIRS`` entry joined with ``applications`` (kept
    only if it exists), the user data applications dir (only if it is a
    directory), the fixed fallback path, then ``extra_dirs``.
    """
    env = os.environ if environ is None else environ
    candidates: list[Path] = []
    for raw in env.get("XDG_DATA_DIRS", "").split(":"):
        if not raw:
            continue
        path = Path(raw) / APPLICATIONS_SUBDIR
        if path.exists():
            candidates.append(path)

    home = user_applications_dir()
    if home.is_dir():
        candidates.append(home)
    candidates.append(FALLBACK_APPLICATIONS_DIR)
    candidates.extend(Path(path) for path in extra_dirs)

    seen: set[Path] = set()
    out: list[Path] = []
    for path in candidates:
        if path in seen:
            continue
        seen.add(path)
        out.append(path)
    return out


__all__ = [
    "APPLICATIONS_SUBDIR",
    "FALLBACK_APPLICATIONS_DIR",
    "application_dirs",
    "user_applications_dir",
]
