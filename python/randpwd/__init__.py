"""
randpwd - random passwords with exact symbol and digit counts.

Counts are Python ints of any size; generation is split into bounded chunks
sampled on a thread pool, then shuffled.
"""

from .exceptions import InsufficientLengthError, InvalidInputError, RandPwdException
from .generator import RandomPassword, generate_password
from .utils.chunking import UNIT

__all__ = [
    'RandomPassword',
    'generate_password',
    'RandPwdException',
    'InvalidInputError',
    'InsufficientLengthError',
    'UNIT',
]
