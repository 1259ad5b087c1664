"""Locate the javap disassembler of an installed JDK."""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path
from typing import Optional

from .exceptions import DisassemblerNotFoundError
from .logging_config import get_logger

logger = get_logger(__name__)

DISASSEMBLER_NAME = "javap"


def executable_name(name: str, platform: Optional[str] = None) -> str:
    """Append the platform's executable suffix to a tool name."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return f"{name}.exe"
    return name


def find_java_home(java_home: Optional[str] = None) -> Optional[Path]:
    """Resolve the JDK directory.

    Order: explicit value, JAVA_HOME, then the directory above the ``bin``
    holding the ``java`` found on PATH (symlinks resolved, so
    /usr/bin/java -> /usr/lib/jvm/.../bin/java works).
    """
    if java_home:
        return Path(java_home)

    env_home = os.environ.get("JAVA_HOME")
    if env_home:
        return Path(env_home)

    java = shutil.which(executable_name("java"))
    if java:
        return Path(java).resolve().parent.parent

    return None


def locate_disassembler(java_home: Optional[str] = None) -> Path:
    """Return the absolute path of javap.

    Raises:
        DisassemblerNotFoundError: If no JDK can be found or it has no javap
    """
    home = find_java_home(java_home)
    name = executable_name(DISASSEMBLER_NAME)

    if home is None:
        raise DisassemblerNotFoundError(Path(name))

    candidate = (home / "bin" / name).absolute()
    if not candidate.is_file():
        raise DisassemblerNotFoundError(candidate)

    logger.debug("Using disassembler %s", candidate)
    return candidate
