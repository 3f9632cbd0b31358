"""
Grid helpers (combogen/grid.py).

Eager views over a builder's combinations: counting, previews, tables,
and numeric value ranges for fixed parameters.
"""

import logging
import math
from collections import abc
from itertools import islice
from typing import Any, Dict, Iterable, List, Optional, Sequence

import numpy as np
import pandas as pd

from . import config
from .builder import GeneratorBuilder

logger = logging.getLogger(__name__)


def expand(builder: GeneratorBuilder, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    Expand a builder to a list of combinations.

    Args:
        builder: Builder to expand
        limit: Optional maximum number of combinations

    Returns:
        List of dicts, in generation order
    """
    combos = builder.build()
    if limit is not None:
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        combos = islice(combos, limit)
    return list(combos)


def preview(builder: GeneratorBuilder, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    First few combinations of a builder.

    Only pulls as many combinations as it returns, so it is safe on
    infinite sources.

    Args:
        builder: Builder to preview
        limit: Rows to return (default: preview.limit from config)
    """
    if limit is None:
        limit = config.get('preview', 'limit', 10)
    return expand(builder, limit)


def count_combinations(builder: GeneratorBuilder) -> int:
    """
    Count combinations of a builder.

    Formula (all fixed, sized sources):
    combinations = prod(max(len(values), 1) for each parameter)

    Empty collections are skipped by the engine, so they count as 1.
    Zero parameters produce zero combinations. If any source is dependent
    or unsized the count comes from enumerating, which does not terminate
    on infinite sources.
    """
    specs = builder.specs
    if not specs:
        return 0

    if all(not s.is_dependent and isinstance(s.source, abc.Sized) for s in specs):
        return math.prod(max(len(s.source), 1) for s in specs)

    logger.debug(f"Counting {len(specs)} parameters by enumeration")
    return sum(1 for _ in builder.build())


def to_dataframe(
    combinations: Iterable[Dict[str, Any]],
    columns: Optional[Sequence[str]] = None,
) -> pd.DataFrame:
    """
    Tabulate combinations.

    Args:
        combinations: Dicts as yielded by GeneratorBuilder.build()
        columns: Column order (default: keys in first-seen order)

    Returns:
        DataFrame with one row per combination. Parameters skipped on a
        branch show up as NaN.
    """
    rows = list(combinations)
    if columns is None:
        seen: Dict[str, None] = {}
        for row in rows:
            for key in row:
                seen.setdefault(key, None)
        columns = list(seen)
    return pd.DataFrame.from_records(rows, columns=list(columns))


def value_range(min_value: float, max_value: float, step: float) -> List[float]:
    """
    Inclusive numeric range for a fixed parameter.

    Args:
        min_value: First value
        max_value: Last value (included when it falls on a step)
        step: Increment, must be positive

    Returns:
        List of floats
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if max_value < min_value:
        return []

    # Half a step of slack so the endpoint survives float error
    values = np.arange(min_value, max_value + step * 0.5, step)
    values = values[values <= max_value + 1e-10]
    values = np.round(values, decimals=10)
    return values.tolist()
