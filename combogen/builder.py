"""
Generator builder (combogen/builder.py).

Immutable accumulator of parameter specs:

    builder = generator_builder({'category': ['electronics', 'clothing']})
    builder = builder.add(subcategory=lambda deps: SUBCATEGORIES[deps['category']])
    for combo in builder.build():
        ...

add() never mutates the receiver, so a builder can be branched freely.
Name collisions follow dict-merge semantics: the new source replaces the old
one in its original position, new names are appended in the order given.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from .engine import iter_combinations
from .spec import ParameterSpec, ParamSource, make_specs


def _merge(
    existing: Tuple[ParameterSpec, ...],
    added: Tuple[ParameterSpec, ...],
) -> Tuple[ParameterSpec, ...]:
    merged = {spec.name: spec for spec in existing}
    for spec in added:
        merged[spec.name] = spec
    return tuple(merged.values())


def _collect(params: Optional[Mapping[str, ParamSource]], more: Dict[str, ParamSource]) -> Tuple[ParameterSpec, ...]:
    combined = dict(params) if params else {}
    combined.update(more)
    return make_specs(combined)


@dataclass(frozen=True)
class GeneratorBuilder:
    """Immutable set of parameter specs in declaration order."""

    specs: Tuple[ParameterSpec, ...] = ()

    def add(self, params: Optional[Mapping[str, ParamSource]] = None, **more: ParamSource) -> 'GeneratorBuilder':
        """
        Return a new builder with params overlaid on this one.

        Args:
            params: Mapping of name -> iterable or callable
            **more: Further sources by keyword (applied after params)

        Returns:
            New GeneratorBuilder; self is left unchanged

        Raises:
            TypeError: If a source is neither callable nor a non-string iterable
        """
        return GeneratorBuilder(specs=_merge(self.specs, _collect(params, more)))

    def build(self) -> Iterator[Dict[str, Any]]:
        """
        Return a fresh lazy generator over all combinations.

        Each call starts a new walk. Sources are not touched until the
        first item is pulled.
        """
        return iter_combinations(self.specs)

    @property
    def names(self) -> Tuple[str, ...]:
        """Declared parameter names, in order."""
        return tuple(spec.name for spec in self.specs)

    def __len__(self) -> int:
        return len(self.specs)

    def __contains__(self, name: object) -> bool:
        return name in self.names


def generator_builder(initial: Optional[Mapping[str, ParamSource]] = None, **params: ParamSource) -> GeneratorBuilder:
    """
    Create a builder seeded with zero or more parameters.

    Args:
        initial: Mapping of name -> values, in the order given
        **params: Further sources by keyword

    Returns:
        GeneratorBuilder
    """
    return GeneratorBuilder().add(initial, **params)
