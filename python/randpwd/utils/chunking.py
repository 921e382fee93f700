"""
Split arbitrarily large counts into bounded chunks of work.
"""

from typing import Iterator, List

from ..exceptions import InvalidInputError

# Upper bound on a single chunk. Raising it lowers the number of tasks and the
# memory spent on bookkeeping at the cost of coarser parallelism.
UNIT = 127


def _check(n: int, unit: int) -> None:
    if n < 0:
        raise InvalidInputError(f"Cannot split a negative count: {n}")
    if unit < 1:
        raise InvalidInputError(f"Chunk unit must be positive, got {unit}")


def iter_chunks(n: int, unit: int = UNIT) -> Iterator[int]:
    """
    Lazily yield the chunks of ``n``.

    Yields ``unit`` as long as at least ``unit`` remains, then the remainder,
    which may be 0. At least one chunk is always produced.
    """
    _check(n, unit)
    full, rest = divmod(n, unit)
    # Count down as a Python int; the quotient may exceed any C size type
    while full:
        yield unit
        full -= 1
    yield rest


def split_count(n: int, unit: int = UNIT) -> List[int]:
    """
    Decompose a count into chunks no larger than ``unit``.

    Args:
        n: Non-negative count of any size
        unit: Maximum chunk size

    Returns:
        List of chunks summing to ``n``; every chunk but the last equals ``unit``

    Raises:
        InvalidInputError: If ``n`` is negative or ``unit`` is not positive
    """
    return list(iter_chunks(n, unit))


def total_chunks(n: int, unit: int = UNIT) -> int:
    """Number of chunks ``split_count`` would produce for ``n``."""
    _check(n, unit)
    return n // unit + 1
