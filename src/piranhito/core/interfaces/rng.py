from __future__ import annotations
"""Random source protocol consumed by `@Random(N)` substitutions."""

from typing import Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar('T')


@runtime_checkable
class RandomSourceProtocol(Protocol):
    """Anything exposing `choice`, e.g. a seeded `random.Random` instance."""

    def choice(self, seq: Sequence[T]) -> T:
        ...
