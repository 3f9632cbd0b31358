"""
Canonical combination serialization for deterministic combination IDs.

Used to give every generated combination a stable short ID, e.g. for
pytest parametrize ids or fixture file names.
Float precision and ID length come from the fingerprint config section.
"""

import hashlib
import json
from typing import Any, Iterable, List, Mapping, Optional

import numpy as np

from . import config


def _serialize_value(value: Any, precision: int) -> Any:
    """Serialize a single value with deterministic float formatting."""
    if isinstance(value, np.generic):
        value = value.item()

    if isinstance(value, float):
        return f"{value:.{precision}f}"
    elif isinstance(value, Mapping):
        return {str(k): _serialize_value(v, precision) for k, v in sorted(value.items(), key=lambda kv: str(kv[0]))}
    elif isinstance(value, (list, tuple)):
        return [_serialize_value(v, precision) for v in value]
    elif isinstance(value, np.ndarray):
        return [_serialize_value(v, precision) for v in value.tolist()]
    elif value is None or isinstance(value, (str, int, bool)):
        return value
    else:
        # Arbitrary objects: repr is the best stable handle available
        return repr(value)


def canonicalize_combination(combo: Mapping[str, Any]) -> str:
    """
    Convert a combination to a canonical JSON string.

    Ensures:
    - Keys are sorted at all levels
    - Floats are serialized with fixed precision
    - Output is deterministic across Python sessions

    Args:
        combo: Combination dict

    Returns:
        Deterministic JSON string
    """
    precision = config.get('fingerprint', 'float_precision', 10)
    canonical = _serialize_value(combo, precision)
    return json.dumps(canonical, sort_keys=True, separators=(',', ':'))


def combination_id(combo: Mapping[str, Any], length: Optional[int] = None) -> str:
    """
    Generate a combination ID using sha256.

    Args:
        combo: Combination dict
        length: Hex digits to keep (default: fingerprint.length from config)

    Returns:
        Truncated sha256 hex digest
    """
    if length is None:
        length = config.get('fingerprint', 'length', 12)
    canonical = canonicalize_combination(combo)
    return hashlib.sha256(canonical.encode('utf-8')).hexdigest()[:length]


def combination_ids(combinations: Iterable[Mapping[str, Any]]) -> List[str]:
    """IDs for a sequence of combinations, in order."""
    return [combination_id(c) for c in combinations]
