"""
JSON serialization helpers for friction-factor-mcp.

This module provides utilities for safe JSON serialization, particularly
handling special float values (inf, nan) that are not valid in JSON per RFC 7159,
and the numeric input checks shared by the dispatcher and the tools.
"""

import json
import math
import numbers
from typing import Any

import numpy as np


def sanitize_for_json(obj: Any) -> Any:
    """
    Recursively sanitize an object for JSON serialization.

    Replaces inf and nan float values with None, which serializes to null.
    Numpy scalars and arrays are converted to plain Python values.

    Args:
        obj: Any Python object to sanitize

    Returns:
        Sanitized object safe for json.dumps

    Examples:
        >>> sanitize_for_json({'value': float('inf')})
        {'value': None}
        >>> sanitize_for_json([1.0, float('nan'), 3.0])
        [1.0, None, 3.0]
    """
    if obj is None:
        return None

    if isinstance(obj, (bool, np.bool_)):
        return bool(obj)

    if isinstance(obj, (int, str)):
        return obj

    if isinstance(obj, (float, np.floating, np.integer)):
        val = float(obj)
        if math.isnan(val) or math.isinf(val):
            return None
        return int(obj) if isinstance(obj, np.integer) else val

    if isinstance(obj, np.ndarray):
        return sanitize_for_json(obj.tolist())

    if isinstance(obj, dict):
        return {k: sanitize_for_json(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]

    # Enums and other value objects fall back to their string form
    return str(obj)


def safe_json_dumps(obj: Any, **kwargs) -> str:
    """
    Safely serialize an object to JSON string.

    Applies sanitization before serialization to handle inf/nan values.

    Args:
        obj: Object to serialize
        **kwargs: Additional arguments passed to json.dumps

    Returns:
        JSON string

    Examples:
        >>> safe_json_dumps({'value': float('inf')})
        '{"value": null}'
    """
    sanitized = sanitize_for_json(obj)
    return json.dumps(sanitized, **kwargs)


def is_valid_number(value: Any) -> bool:
    """
    Check if a value is a usable real number (not bool, nan or inf).

    Accepts Python ints and floats as well as numpy scalars.

    Args:
        value: Value to check

    Returns:
        True if value is a valid, finite real number
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def is_positive_real(value: Any) -> bool:
    """True for a finite, strictly positive real number (complex results are rejected)."""
    return is_valid_number(value) and value > 0
