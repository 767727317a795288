"""Deterministic seed derivation and value streams.

Every generated value is a pure function of an integer seed. Seeds come
from identifiers via :func:`hash_string`, and values are pulled from an
immutable :class:`SeedCursor`: each draw returns the value together with
the cursor positioned after it, so two callers can never share or corrupt
each other's stream.

Usage::

    cursor = SeedCursor.from_identifier("customer-42")
    name, cursor = cursor.choice(pools.customer_names)
    days, cursor = cursor.next_int(1, 730)

Fields of one record that need independent-looking values without
threading a cursor use arithmetic sub-seeds (``seed * 2``, ``seed * 3``,
...) with :func:`seeded_int` / :func:`seeded_float`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TypeVar

from backoffice_data.exceptions import EmptyPoolError

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF
_MODULUS = 0x80000000  # 2**31
_MULTIPLIER = 1103515245
_INCREMENT = 12345


def hash_string(identifier: str) -> int:
    """Map an identifier to a reproducible non-negative integer.

    Rolling ``h * 31 + code point`` accumulation, truncated to 32 unsigned
    bits. Collisions are acceptable; only per-identifier stability matters.

    Parameters
    ----------
    identifier : str
        Any string (entity id, branch id, batch seed).

    Returns
    -------
    int
        Seed in ``[0, 2**32)``.
    """
    h = 0
    for char in identifier:
        h = (h * 31 + ord(char)) & _MASK32
    return h


def mix_seed(seed: int) -> int:
    """Scramble a seed with the murmur3 32-bit finalizer.

    Adjacent seeds (``base + index``) map to unrelated states, which keeps
    neighbouring records in a batch from looking alike.
    """
    h = seed & _MASK32
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & _MASK32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & _MASK32
    h ^= h >> 16
    return h


def next_state(state: int) -> tuple[float, int]:
    """Advance a raw generator state by one linear-congruential step.

    Returns
    -------
    tuple[float, int]
        Value in ``[0, 1)`` and the next state.
    """
    state = (state * _MULTIPLIER + _INCREMENT) % _MODULUS
    return state / _MODULUS, state


@dataclass(frozen=True)
class SeedCursor:
    """Immutable position in a deterministic value stream."""

    state: int

    @classmethod
    def from_seed(cls, seed: int) -> SeedCursor:
        """Create a cursor at the start of the stream for ``seed``."""
        return cls(mix_seed(seed) % _MODULUS)

    @classmethod
    def from_identifier(cls, identifier: str) -> SeedCursor:
        """Create a cursor seeded by ``hash_string(identifier)``."""
        return cls.from_seed(hash_string(identifier))

    def next(self) -> tuple[float, SeedCursor]:
        """Draw a float in ``[0, 1)``."""
        value, state = next_state(self.state)
        return value, SeedCursor(state)

    def next_int(self, low: int, high: int) -> tuple[int, SeedCursor]:
        """Draw an integer in ``[low, high]`` (both inclusive)."""
        if low > high:
            raise ValueError(f"Empty range: low={low} > high={high}")
        value, cursor = self.next()
        return min(low + int(value * (high - low + 1)), high), cursor

    def next_float(self, low: float, high: float) -> tuple[float, SeedCursor]:
        """Draw a float in ``[low, high)``."""
        value, cursor = self.next()
        return low + value * (high - low), cursor

    def choice(self, pool: Sequence[T]) -> tuple[T, SeedCursor]:
        """Select one element of ``pool``.

        Raises
        ------
        EmptyPoolError
            If ``pool`` is empty.
        """
        if not pool:
            raise EmptyPoolError("Cannot choose from an empty pool")
        value, cursor = self.next()
        index = max(0, min(int(value * len(pool)), len(pool) - 1))
        return pool[index], cursor


def seeded_int(seed: int, low: int, high: int) -> int:
    """First integer of the stream for ``seed``, in ``[low, high]``."""
    return SeedCursor.from_seed(seed).next_int(low, high)[0]


def seeded_float(seed: int, low: float, high: float) -> float:
    """First float of the stream for ``seed``, in ``[low, high)``."""
    return SeedCursor.from_seed(seed).next_float(low, high)[0]
