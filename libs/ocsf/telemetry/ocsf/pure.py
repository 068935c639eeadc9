from collections.abc import Callable
from typing import TypeVar

_F = TypeVar("_F", bound=Callable[..., object])


def pure(func: _F) -> _F:
    """Mark a function as pure (no side effects).

    Advisory only, nothing is enforced at runtime. The validation helpers are all
    marked this way: they read an object graph and return failures, they never
    touch the objects they inspect, log, or depend on process-wide state.

    Example usage:
        @pure
        def find_identity_failures(fields: Mapping[str, object]) -> tuple[ValidationFailure, ...]:
            ...
    """
    return func
