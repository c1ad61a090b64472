"""
Random number generation utilities.

Holds the process-wide default random source used when a sampler is built
without an explicit ``rng``. Tests and reproducible runs should pass their
own :class:`AleaPRNG` instead of relying on this shared instance.
"""

from ..core.alea_prng import AleaPRNG, Seed

# Global PRNG instance
_prng = None


def set_random_seed(seed: Seed) -> AleaPRNG:
    """
    Reseed the default Alea PRNG.

    Args:
        seed: Seed string or number to use

    Returns:
        The new default AleaPRNG instance
    """
    global _prng
    _prng = AleaPRNG(seed)
    return _prng


def get_prng() -> AleaPRNG:
    """
    Get the current default Alea PRNG instance.

    Returns:
        AleaPRNG instance
    """
    global _prng
    if _prng is None:
        _prng = AleaPRNG("default")
    return _prng
