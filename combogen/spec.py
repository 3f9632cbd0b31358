"""
Parameter specs (combogen/spec.py).

One spec = one named parameter and its value source:
- fixed:     an iterable of candidate values (list, tuple, range, ndarray, ...)
- dependent: a callable that receives the values bound so far and returns
             an iterable of candidate values

Specs are immutable once created.
"""

import inspect
from collections import abc
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Literal, Mapping, Tuple, Union

SpecKind = Literal['fixed', 'dependent']

PartialResult = Mapping[str, Any]
DependentFn = Callable[..., Iterable[Any]]
ParamSource = Union[Iterable[Any], DependentFn]


@dataclass(frozen=True)
class ParameterSpec:
    """
    Declaration of a single parameter.

    Contract:
    - fixed sources are re-iterated from the start for every branch, so
      they must be re-iterable (a generator object is exhausted after the
      first branch and every later branch skips the parameter)
    - dependent sources are called once per branch that reaches them and
      must return a fresh iterable on every call
    - takes_partial is False for callables without positional parameters;
      those taking **kwargs get the partial result as keywords
      (takes_keywords), the rest (plain generator functions) are called bare
    """

    name: str
    kind: SpecKind
    source: Any
    takes_partial: bool = True
    takes_keywords: bool = False

    def __post_init__(self):
        """Fail-closed validation."""
        if not isinstance(self.name, str):
            raise TypeError(
                f"Parameter name must be a string, got {type(self.name).__name__}"
            )
        if not self.name:
            raise ValueError("Parameter name must not be empty")
        if self.kind not in ('fixed', 'dependent'):
            raise ValueError(
                f"Invalid kind: {self.kind}. Must be 'fixed' or 'dependent'"
            )

    @property
    def is_dependent(self) -> bool:
        return self.kind == 'dependent'


def _call_style(fn: Callable) -> Tuple[bool, bool]:
    """
    How to hand the partial result to fn.

    Returns:
        (takes_partial, takes_keywords): positional parameters win, then
        **kwargs; neither means fn is called with no arguments
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        # builtins without introspectable signatures
        return True, False

    kinds = {param.kind for param in signature.parameters.values()}
    if kinds & {
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
        inspect.Parameter.VAR_POSITIONAL,
    }:
        return True, False
    return False, inspect.Parameter.VAR_KEYWORD in kinds


def fixed(name: str, values: Iterable[Any]) -> ParameterSpec:
    """Create a fixed spec. Any iterable is accepted, strings included."""
    if not isinstance(values, abc.Iterable):
        raise TypeError(
            f"Parameter '{name}': expected an iterable or a callable, "
            f"got {type(values).__name__}"
        )
    return ParameterSpec(name=name, kind='fixed', source=values)


def dependent(name: str, fn: DependentFn) -> ParameterSpec:
    """Create a dependent spec from a callable."""
    if not callable(fn):
        raise TypeError(
            f"Parameter '{name}': dependent source must be callable, "
            f"got {type(fn).__name__}"
        )
    takes_partial, takes_keywords = _call_style(fn)
    return ParameterSpec(
        name=name,
        kind='dependent',
        source=fn,
        takes_partial=takes_partial,
        takes_keywords=takes_keywords,
    )


def make_spec(name: str, source: ParamSource) -> ParameterSpec:
    """
    Classify a raw builder value into a spec.

    Iterables become fixed specs, even when callable (an Enum class is
    both). Other callables become dependent specs. Anything else is an
    error. An existing ParameterSpec is renamed to name.
    """
    if isinstance(source, ParameterSpec):
        if source.name == name:
            return source
        return ParameterSpec(
            name=name,
            kind=source.kind,
            source=source.source,
            takes_partial=source.takes_partial,
            takes_keywords=source.takes_keywords,
        )
    if callable(source) and not isinstance(source, abc.Iterable):
        return dependent(name, source)
    return fixed(name, source)


def make_specs(params: Mapping[str, ParamSource]) -> Tuple[ParameterSpec, ...]:
    """Convert a name -> source mapping into specs, preserving order."""
    return tuple(make_spec(name, source) for name, source in params.items())
