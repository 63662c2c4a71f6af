# src/tasklist/config.py

"""Settings for a tasklist session, built from command-line arguments.

The store file name is fixed; only the directory it lives in can change.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

STORE_FILE_NAME = "taskList.yml"
LEGACY_STORE_FILE_NAME = "taskList.json"


@dataclass(frozen=True)
class Settings:
    work_dir: Path
    color: bool = True
    log_level: int = logging.WARNING
    log_file: Optional[Path] = None

    @property
    def store_path(self) -> Path:
        return self.work_dir / STORE_FILE_NAME

    @property
    def legacy_store_path(self) -> Path:
        return self.work_dir / LEGACY_STORE_FILE_NAME


def get_settings(args: Optional[argparse.Namespace] = None) -> Settings:
    """Build Settings from parsed arguments (defaults when `args` is None)."""
    if args is None:
        return Settings(work_dir=Path.cwd())

    work_dir = (Path.cwd() / (args.cd or ".")).resolve()
    log_file = Path(args.log_file).expanduser() if args.log_file else None

    return Settings(
        work_dir=work_dir,
        color=not bool(args.no_color),
        log_level=logging.DEBUG if args.verbose else logging.WARNING,
        log_file=log_file,
    )
