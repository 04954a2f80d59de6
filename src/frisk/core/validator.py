from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted configuration sources (CLI, JSON file) and the
scanner. Handles type coercion and default value injection so that the
builder and renderer always receive well-typed parameters.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from frisk.domain.config import get_default_config
from frisk.domain.constants import UNLIMITED_DEPTH
from frisk.domain.tree_models import ScanMode

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    merged["path"] = _as_str(merged.get("path"), defaults["path"], "path", warnings, strict)
    merged["compact"] = _as_bool(merged.get("compact"), defaults["compact"], "compact", warnings, strict)
    merged["ignore"] = _as_list_str(merged.get("ignore"), defaults["ignore"], "ignore", warnings, strict)

    # Tri-state: None means auto-detect
    if merged.get("color") is not None:
        merged["color"] = _as_bool(merged["color"], False, "color", warnings, strict)

    merged["depth"] = _normalize_depth(merged.get("depth"), warnings, strict)
    merged["mode"] = _normalize_mode(merged.get("mode"), warnings, strict)
    merged["workers"] = _normalize_workers(merged.get("workers"), warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """
    Ensure input is a list of sanitized strings, supporting CSV parsing.

    An explicitly empty list is kept: it disables the ignore list.
    """
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        return [x.strip() for x in value.split(",") if x.strip()]

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _as_int(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[int]:
    """Parse an integer, returning None (with a warning) when impossible."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and not strict:
        try:
            return int(value.strip())
        except ValueError:
            pass

    msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return None


def _normalize_depth(value: Any, warnings: List[str], strict: bool) -> int:
    """Depth is -1 (unlimited) or a non-negative integer."""
    if value is None:
        return UNLIMITED_DEPTH
    depth = _as_int(value, "depth", warnings, strict)
    if depth is None:
        return UNLIMITED_DEPTH
    if depth < UNLIMITED_DEPTH:
        msg = f"Field 'depth' must be >= {UNLIMITED_DEPTH}, received {depth}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Treated as unlimited.")
        return UNLIMITED_DEPTH
    return depth


def _normalize_mode(value: Any, warnings: List[str], strict: bool) -> str:
    """Accept a ScanMode or its string value."""
    if isinstance(value, ScanMode):
        return value.value
    if isinstance(value, str):
        candidate = value.strip().lower()
        if candidate in {m.value for m in ScanMode}:
            return candidate

    msg = f"Invalid field 'mode': {value!r} is not one of {[m.value for m in ScanMode]}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{ScanMode.CONCURRENT.value}'.")
    return ScanMode.CONCURRENT.value


def _normalize_workers(value: Any, warnings: List[str], strict: bool) -> Optional[int]:
    """Worker count is None (pool default) or a positive integer."""
    if value is None:
        return None
    workers = _as_int(value, "workers", warnings, strict)
    if workers is None:
        return None
    if workers < 1:
        msg = f"Field 'workers' must be >= 1, received {workers}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using pool default.")
        return None
    return workers
