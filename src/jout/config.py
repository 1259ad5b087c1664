"""Configuration loading and management for jout.

Configuration sources are merged in priority order:
    1. Defaults (defined in JoutConfig)
    2. Global config (~/.jout.toml)
    3. Project config (./jout.toml)
    4. Explicit config file
    5. Environment variables (JOUT_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(strategy="batch", workers=4)
    >>> config.strategy
    'batch'
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import InvalidConfigError

Strategy = Literal["parallel", "batch"]
Verbosity = Literal["quiet", "normal", "verbose"]

STRATEGIES = ("parallel", "batch")
VERBOSITIES = ("quiet", "normal", "verbose")

_FIELD_TYPES: dict[str, Any] = {
    "strategy": str,
    "workers": int,
    "files_per_core": int,
    "timeout_seconds": (int, float),
    "java_home": str,
    "disassembler_flags": list,
    "class_suffix": str,
    "verbosity": str,
}
_OPTIONAL_FIELDS = frozenset({"workers", "timeout_seconds", "java_home"})


_TYPE_NAMES: dict[Any, str] = {
    int: "an integer",
    (int, float): "a number",
    str: "a string",
    list: "a list of strings",
}


@dataclass(frozen=True)
class JoutConfig:
    """Settings for one jout run.

    Attributes:
        Disassembly:
            strategy: "parallel" runs one javap per chunk of class files on a
                thread pool, "batch" runs a single javap over one pattern per
                directory
            workers: Upper bound on concurrent javap processes (None = one per chunk)
            files_per_core: Parallel threshold and chunk size factor; the
                threshold is cpu_count * files_per_core
            timeout_seconds: Kill a javap process after this many seconds
                (None = wait forever)

        Toolchain:
            java_home: JDK directory holding bin/javap (None = auto-detect)
            disassembler_flags: Flags passed to javap before the targets
            class_suffix: Suffix identifying compiled class files

        Output control:
            verbosity: Logging verbosity level
    """

    strategy: Strategy = "parallel"
    workers: Optional[int] = None
    files_per_core: int = 100
    timeout_seconds: Optional[float] = None

    java_home: Optional[str] = None
    disassembler_flags: list[str] = field(default_factory=lambda: ["-c", "-p"])
    class_suffix: str = ".class"

    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._check_types()

        if self.strategy not in STRATEGIES:
            raise InvalidConfigError(
                "strategy", self.strategy, f"must be one of {', '.join(STRATEGIES)}"
            )
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.files_per_core < 1:
            raise InvalidConfigError("files_per_core", self.files_per_core, "must be at least 1")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise InvalidConfigError("timeout_seconds", self.timeout_seconds, "must be positive")
        if not self.class_suffix:
            raise InvalidConfigError("class_suffix", self.class_suffix, "must not be empty")
        if self.verbosity not in VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"must be one of {', '.join(VERBOSITIES)}"
            )

    def _check_types(self) -> None:
        # TOML and JOUT_* values arrive untyped; bool is an int subclass.
        for name, expected in _FIELD_TYPES.items():
            value = getattr(self, name)
            if value is None and name in _OPTIONAL_FIELDS:
                continue
            if isinstance(value, bool) or not isinstance(value, expected):
                raise InvalidConfigError(name, value, f"must be {_TYPE_NAMES[expected]}")
        flags = self.disassembler_flags
        if not all(isinstance(flag, str) for flag in flags):
            raise InvalidConfigError("disassembler_flags", flags, "must be a list of strings")

    @property
    def parallel_threshold(self) -> int:
        """File count at which the parallel strategy starts splitting work."""
        return (os.cpu_count() or 1) * self.files_per_core


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> JoutConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); None values
            are ignored so unset flags do not mask file settings

    Returns:
        Validated JoutConfig instance

    Raises:
        InvalidConfigError: If a config file is missing or invalid, or a
            value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".jout.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "jout.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise InvalidConfigError("config_file", config_file, "file not found")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(JoutConfig)}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise InvalidConfigError(unknown[0], merged[unknown[0]], "unknown setting")

    return JoutConfig(**merged)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from JOUT_* environment variables.

    Supported environment variables:
        JOUT_STRATEGY: parallel/batch
        JOUT_WORKERS: int
        JOUT_FILES_PER_CORE: int
        JOUT_TIMEOUT_SECONDS: float
        JOUT_JAVA_HOME: str
        JOUT_CLASS_SUFFIX: str
        JOUT_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any JOUT_* vars found.
    """
    type_hints = get_type_hints(JoutConfig)

    result: dict[str, Any] = {}

    for config_field in fields(JoutConfig):
        env_key = f"JOUT_{config_field.name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hints[config_field.name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[config_field.name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that cannot be expressed as a single string
    (lists), which leaves the field to the other sources.
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file, reading settings from an optional [jout] table."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise InvalidConfigError("config_file", path, str(e))

    section = data.get("jout", data)
    if not isinstance(section, dict):
        raise InvalidConfigError("config_file", path, "[jout] must be a table")
    return dict(section)
