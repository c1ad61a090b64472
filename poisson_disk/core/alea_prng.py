"""
Seedable uniform random source for the sampler.

Implements Johannes Baagøe's Alea generator so that a string or numeric
seed always replays the same sequence of draws, independent of Python's
``random`` module state.
"""

from typing import Iterable, Union

Seed = Union[str, int, float, Iterable]

_TWO_POW_32 = 0x100000000
_TWO_POW_NEG_32 = 2.3283064365386963e-10


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class _Mash:
    """String hash used to derive the initial generator state."""

    def __init__(self):
        self.n = 0xEFC8249D

    def __call__(self, data) -> float:
        for char in str(data):
            self.n += ord(char)
            h = 0.02519603282416938 * self.n
            self.n = _uint32(h)
            h -= self.n
            h *= self.n
            self.n = _uint32(h)
            h -= self.n
            self.n += h * _TWO_POW_32
        return _uint32(self.n) * _TWO_POW_NEG_32


class AleaPRNG:
    """
    Alea pseudo-random generator producing floats in [0, 1).

    Any object exposing ``random()`` can stand in for it when constructing a
    :class:`~poisson_disk.core.sampler.PoissonDisk`.
    """

    def __init__(self, seed: Seed = "default"):
        self.seed = seed
        # Number of draws taken so far, handy when comparing runs
        self.call_count = 0

        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            parts = list(seed)
        else:
            parts = [seed]

        mash = _Mash()
        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        for part in parts:
            self.s0 = self._fold(self.s0 - mash(part))
            self.s1 = self._fold(self.s1 - mash(part))
            self.s2 = self._fold(self.s2 - mash(part))

    @staticmethod
    def _fold(value: float) -> float:
        return value + 1 if value < 0 else value

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * _TWO_POW_NEG_32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def __repr__(self) -> str:
        return f"AleaPRNG(seed={self.seed!r}, calls={self.call_count})"
