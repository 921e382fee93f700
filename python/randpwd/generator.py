"""
Random password generation with exact symbol and digit counts.
"""

import logging
import random
import time
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, List, Optional, Sequence, Tuple

from .exceptions import InvalidInputError
from .utils.charsets import build_categories
from .utils.chunking import UNIT, iter_chunks, total_chunks
from .utils.sampling import default_rng, sample_indices, shuffle_chars, spawn_rng
from .utils.validation import check_counts, to_count

logger = logging.getLogger(__name__)


def _render_chunk(size: int, charset: Sequence[str], rng: random.Random) -> str:
    """Sample one chunk of characters from ``charset``."""
    return "".join(charset[idx] for idx in sample_indices(size, len(charset), rng))


def _submit_category(count: int, charset: Sequence[str], rng: random.Random,
                     executor: Executor, unit: int) -> List["Future[str]"]:
    """Queue one task per chunk of ``count``, in chunk order."""
    # Seeds are drawn here, in submission order, so a seeded run does not
    # depend on how the pool schedules the tasks
    return [executor.submit(_render_chunk, size, charset, spawn_rng(rng))
            for size in iter_chunks(count, unit)]


def _join(futures: List["Future[str]"]) -> str:
    return "".join(future.result() for future in futures)


def assemble_category(count: int, charset: Sequence[str], rng: random.Random,
                      executor: Executor, unit: int = UNIT) -> str:
    """
    Build the substring of one character category.

    Args:
        count: Number of characters to draw
        charset: Characters of the category
        rng: Root random source; each chunk gets a generator spawned from it
        executor: Pool running the chunk tasks
        unit: Maximum chunk size

    Returns:
        String of ``count`` characters from ``charset``
    """
    return _join(_submit_category(count, charset, rng, executor, unit))


def assemble(categories: Sequence[Tuple[int, Sequence[str]]], rng: random.Random,
             executor: Executor, unit: int = UNIT) -> str:
    """
    Build and concatenate the substrings of several categories.

    All chunks of all categories are queued before any result is collected,
    so categories are assembled concurrently. Output keeps category order,
    and chunk order within a category.

    Args:
        categories: Sequence of (count, charset) pairs
        rng: Root random source
        executor: Pool running the chunk tasks
        unit: Maximum chunk size

    Returns:
        Concatenated, unshuffled password
    """
    pending = [_submit_category(count, charset, rng, executor, unit)
               for count, charset in categories]
    return "".join(_join(futures) for futures in pending)


class RandomPassword:
    """Random password with an exact number of symbols and digits."""

    DEFAULT_UNIT = UNIT

    def __init__(self,
                 length: Any,
                 symbol_count: Any,
                 number_count: Any,
                 *,
                 unit: int = DEFAULT_UNIT,
                 max_workers: Optional[int] = None,
                 seed: Optional[Any] = None):
        """
        Validate and store a password request.

        Counts may be ints of any size or decimal strings, so lengths beyond
        the machine word size can be requested.

        Args:
            length: Total password length
            symbol_count: Exact number of symbol characters
            number_count: Exact number of digit characters
            unit: Maximum number of characters sampled by a single task
            max_workers: Thread pool size (None lets the pool decide)
            seed: Seed for reproducible output; None draws from the OS

        Raises:
            InvalidInputError: If a count is negative or not an integer, or
                an option is out of range
            InsufficientLengthError: If length < symbol_count + number_count
        """
        self.length, self.symbol_count, self.number_count = check_counts(
            length, symbol_count, number_count
        )

        self.unit = to_count(unit, "unit")
        if self.unit < 1:
            raise InvalidInputError("unit: Chunk unit must be at least 1")

        if max_workers is not None:
            max_workers = to_count(max_workers, "max_workers")
            if max_workers < 1:
                raise InvalidInputError("max_workers: Worker count must be at least 1")
        self.max_workers = max_workers

        self._rng = default_rng(seed)
        self._content = ""

    @property
    def letter_count(self) -> int:
        """Number of letters filling the rest of the password."""
        return self.length - self.symbol_count - self.number_count

    @property
    def content(self) -> str:
        """Most recently generated password, empty before the first call."""
        return self._content

    def generate(self) -> str:
        """
        Generate a new password.

        Returns:
            Generated password string, also kept in ``content``
        """
        data = build_categories()
        categories = (
            (self.letter_count, data.letters),
            (self.symbol_count, data.symbols),
            (self.number_count, data.digits),
        )

        tasks = sum(total_chunks(count, self.unit) for count, _ in categories)
        logger.debug(f"Generating {self.length}-character password in {tasks} chunk tasks")
        started = time.perf_counter()

        with ThreadPoolExecutor(max_workers=self.max_workers,
                                thread_name_prefix="randpwd") as executor:
            chars = list(assemble(categories, self._rng, executor, self.unit))

        shuffle_chars(chars, self._rng)
        self._content = "".join(chars)

        logger.debug(f"Password generated in {time.perf_counter() - started:.3f}s")
        return self._content

    def show(self) -> str:
        """Generate a new password (alias of ``generate``)."""
        return self.generate()

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(length={self.length}, "
                f"symbol_count={self.symbol_count}, number_count={self.number_count})")


def generate_password(length: Any,
                      symbol_count: Any = 0,
                      number_count: Any = 0,
                      **options: Any) -> str:
    """
    Convenience function to generate a password.

    Args:
        length: Total password length
        symbol_count: Exact number of symbol characters
        number_count: Exact number of digit characters
        **options: Keyword options of ``RandomPassword`` (unit, max_workers, seed)

    Returns:
        Generated password string
    """
    return RandomPassword(length, symbol_count, number_count, **options).generate()
