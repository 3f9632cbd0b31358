"""Lazy combination generation over fixed and dependent parameters."""

from .spec import ParameterSpec, fixed, dependent, make_spec
from .resolver import resolve
from .engine import iter_combinations
from .builder import GeneratorBuilder, generator_builder
from .grid import (
    expand,
    preview,
    count_combinations,
    to_dataframe,
    value_range,
)
from .canonical import canonicalize_combination, combination_id, combination_ids

__all__ = [
    'ParameterSpec',
    'fixed',
    'dependent',
    'make_spec',
    'resolve',
    'iter_combinations',
    'GeneratorBuilder',
    'generator_builder',
    'expand',
    'preview',
    'count_combinations',
    'to_dataframe',
    'value_range',
    'canonicalize_combination',
    'combination_id',
    'combination_ids',
]
