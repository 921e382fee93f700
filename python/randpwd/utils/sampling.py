"""
Random index sampling and shuffling.

Every function takes an explicit ``random.Random`` instance instead of using
the module-level generator, so callers control seeding and each worker
thread can own its generator.
"""

import random
from typing import Any, List, MutableSequence, Optional


def default_rng(seed: Optional[Any] = None) -> random.Random:
    """
    Create the root random source for a generation run.

    Args:
        seed: Seed for a reproducible ``random.Random``; None uses the
            operating system's entropy source

    Returns:
        Random number generator
    """
    if seed is None:
        return random.SystemRandom()
    return random.Random(seed)


def spawn_rng(parent: random.Random) -> random.Random:
    """
    Create the generator for one worker task.

    The OS entropy source holds no state and is safe to share between
    threads, so it is returned as is. Seeded generators spawn a child seeded
    from ``parent``.
    """
    if isinstance(parent, random.SystemRandom):
        return parent
    return random.Random(parent.getrandbits(64))


def sample_indices(k: int, cardinality: int, rng: random.Random) -> List[int]:
    """
    Draw ``k`` independent uniform indices from ``[0, cardinality)``.

    Args:
        k: Number of indices to draw
        cardinality: Size of the set being indexed
        rng: Random number generator

    Returns:
        List of ``k`` indices
    """
    if k < 0:
        raise ValueError(f"Sample size cannot be negative: {k}")
    if cardinality <= 0:
        raise ValueError("Cannot sample from an empty character set")

    return [rng.randrange(cardinality) for _ in range(k)]


def shuffle_chars(chars: MutableSequence[str], rng: random.Random) -> None:
    """Permute ``chars`` in place (Fisher-Yates)."""
    rng.shuffle(chars)
