"""
Candidate resolution (combogen/resolver.py).

Turns a ParameterSpec plus the partial result of the current branch into
an iterator of candidate values. Nothing is cached: a dependent source is
called again for every branch that reaches it.
"""

from types import MappingProxyType
from typing import Any, Dict, Iterator

from .spec import ParameterSpec


def resolve(spec: ParameterSpec, partial: Dict[str, Any]) -> Iterator[Any]:
    """
    Resolve candidate values for spec on the current branch.

    Args:
        spec: Parameter being resolved
        partial: Values bound so far on this branch (never mutated)

    Returns:
        Iterator over the candidate values

    Raises:
        TypeError: If a dependent source returns something that is not iterable
                   (None included)
        Exception: Anything the dependent source itself raises
    """
    if not spec.is_dependent:
        return iter(spec.source)

    if spec.takes_partial:
        produced = spec.source(MappingProxyType(partial))
    elif spec.takes_keywords:
        produced = spec.source(**partial)
    else:
        produced = spec.source()

    return iter(produced)
