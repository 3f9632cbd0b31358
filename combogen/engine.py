"""
Combination engine (combogen/engine.py).

Depth-first walk over the ordered parameter list:
- first-declared parameter varies slowest, last-declared fastest
- each binding creates a new partial result (siblings never share bindings)
- a parameter whose candidates come back empty is skipped exactly once:
  no key, no branching factor
- zero declared parameters yield nothing (not one empty dict)

The walk keeps an explicit stack of per-level frames instead of recursing,
so long parameter lists never touch the interpreter recursion limit.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Sequence

from .resolver import resolve
from .spec import ParameterSpec

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """Cursor for one level of the walk."""
    index: int
    partial: Dict[str, Any]
    candidates: Iterator[Any]
    produced: bool = False


def _open_frame(specs: Sequence[ParameterSpec], index: int, partial: Dict[str, Any]) -> _Frame:
    spec = specs[index]
    try:
        candidates = resolve(spec, partial)
    except Exception:
        logger.warning(f"Parameter '{spec.name}' failed to resolve (bound: {list(partial)})")
        raise
    return _Frame(index=index, partial=partial, candidates=candidates)


def iter_combinations(specs: Sequence[ParameterSpec]) -> Iterator[Dict[str, Any]]:
    """
    Lazily yield every combination of specs.

    Nothing is resolved until the first item is pulled. Errors raised by a
    source propagate at the pull that needed it; items already yielded stay
    valid and the generator is finished afterwards.

    Args:
        specs: Parameter specs in declaration order

    Yields:
        Dicts mapping parameter name -> value, in declaration order
    """
    specs = tuple(specs)
    n_specs = len(specs)
    if n_specs == 0:
        return

    logger.debug(f"Enumerating {n_specs} parameters: {[s.name for s in specs]}")

    stack = [_open_frame(specs, 0, {})]
    while stack:
        frame = stack[-1]
        name = specs[frame.index].name

        try:
            value = next(frame.candidates)
        except StopIteration:
            stack.pop()
            if frame.produced:
                continue
            # Empty candidates: descend once with the partial unchanged
            result = frame.partial
        except Exception:
            logger.warning(f"Parameter '{name}' failed while iterating (bound: {list(frame.partial)})")
            raise
        else:
            frame.produced = True
            result = {**frame.partial, name: value}

        next_index = frame.index + 1
        if next_index == n_specs:
            yield result
        else:
            stack.append(_open_frame(specs, next_index, result))
