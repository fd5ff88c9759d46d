"""Configuration loader for profiling sessions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, FrozenSet, Mapping, Optional, Union

import voluptuous as vol
import yaml

from .const import (
    CONF_EXCLUDED_OPERATIONS,
    CONF_HOTSPOT_LIMIT,
    CONF_RECENT_CALLS_CAPACITY,
    CONF_RECENT_CALLS_VIEW,
    CONF_START_ACTIVE,
    CONF_TRACK_MEMORY,
    DEFAULT_EXCLUDED_OPERATIONS,
    HOTSPOT_LIMIT,
    RECENT_CALLS_CAPACITY,
    RECENT_CALLS_VIEW_SIZE,
)
from .domain.exceptions import ProfilerConfigError

_LOGGER = logging.getLogger(__name__)


def _not_bool(value: Any) -> Any:
    """Reject booleans, which would otherwise pass as int."""
    if isinstance(value, bool):
        raise vol.Invalid("expected int, got bool")
    return value


_POSITIVE_INT = vol.All(_not_bool, int, vol.Range(min=1))

PROFILER_CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(
            CONF_EXCLUDED_OPERATIONS, default=list(DEFAULT_EXCLUDED_OPERATIONS)
        ): vol.Any(None, [str]),
        vol.Optional(CONF_RECENT_CALLS_CAPACITY, default=RECENT_CALLS_CAPACITY): _POSITIVE_INT,
        vol.Optional(CONF_RECENT_CALLS_VIEW, default=RECENT_CALLS_VIEW_SIZE): _POSITIVE_INT,
        vol.Optional(CONF_HOTSPOT_LIMIT, default=HOTSPOT_LIMIT): _POSITIVE_INT,
        vol.Optional(CONF_TRACK_MEMORY, default=False): bool,
        vol.Optional(CONF_START_ACTIVE, default=True): bool,
    }
)


@dataclass(frozen=True)
class ProfilerConfig:
    """Validated settings for one profiling session.

    Attributes:
        excluded_operations: Member names never wrapped by discovery
        recent_calls_capacity: Ring buffer size per operation
        recent_calls_view: Recent calls exposed in statistics
        hotspot_limit: Entries per hotspot ranking
        track_memory: Sample heap usage around every call (tracemalloc)
        start_active: Record calls as soon as the target is instrumented
    """

    excluded_operations: FrozenSet[str] = field(
        default_factory=lambda: frozenset(DEFAULT_EXCLUDED_OPERATIONS)
    )
    recent_calls_capacity: int = RECENT_CALLS_CAPACITY
    recent_calls_view: int = RECENT_CALLS_VIEW_SIZE
    hotspot_limit: int = HOTSPOT_LIMIT
    track_memory: bool = False
    start_active: bool = True


def validate_profiler_config(config: Optional[Mapping[str, Any]]) -> ProfilerConfig:
    """Validate a configuration mapping and apply defaults.

    Args:
        config: Raw configuration; None or empty yields all defaults

    Returns:
        Validated ProfilerConfig

    Raises:
        ProfilerConfigError: If the configuration is invalid
    """
    try:
        data = PROFILER_CONFIG_SCHEMA(dict(config or {}))
    except vol.Invalid as err:
        raise ProfilerConfigError(f"Invalid profiler configuration: {err}") from err

    return ProfilerConfig(
        excluded_operations=frozenset(data[CONF_EXCLUDED_OPERATIONS] or ()),
        recent_calls_capacity=data[CONF_RECENT_CALLS_CAPACITY],
        recent_calls_view=data[CONF_RECENT_CALLS_VIEW],
        hotspot_limit=data[CONF_HOTSPOT_LIMIT],
        track_memory=data[CONF_TRACK_MEMORY],
        start_active=data[CONF_START_ACTIVE],
    )


def load_profiler_config(config_file: Union[str, Path]) -> ProfilerConfig:
    """Load and validate profiler configuration from YAML.

    Args:
        config_file: Path to the YAML file

    Returns:
        Validated ProfilerConfig

    Raises:
        FileNotFoundError: If the file does not exist
        ProfilerConfigError: If the YAML is malformed, empty or invalid
    """
    path = Path(config_file)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as err:
        raise ProfilerConfigError(f"Invalid YAML: {err}") from err

    if not raw:
        raise ProfilerConfigError("Configuration file is empty")
    if not isinstance(raw, dict):
        raise ProfilerConfigError(
            f"Configuration must be a mapping, got {type(raw).__name__}"
        )

    config = validate_profiler_config(raw)
    _LOGGER.info(
        "Loaded profiler configuration from %s: %d excluded operations, "
        "memory tracking %s",
        path,
        len(config.excluded_operations),
        "on" if config.track_memory else "off",
    )
    return config
