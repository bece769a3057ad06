"""
rcli.generator
Secure password generator using Python's secrets module.
"""

import logging
from dataclasses import dataclass
from secrets import SystemRandom
from typing import FrozenSet, List

from .charsets import CharacterClass, assemble
from .errors import (
    EmptyLength,
    EncodingError,
    InvalidCopies,
    LengthBelowClassCount,
    LengthTooLong,
    NoClassSelected,
)

logger = logging.getLogger(__name__)

MAX_LENGTH = 128
DEFAULT_LENGTH = 16

_sysrand = SystemRandom()


@dataclass(frozen=True)
class CompositionConfig:
    length: int
    include: FrozenSet[CharacterClass]

    @classmethod
    def from_flags(
        cls,
        length: int = DEFAULT_LENGTH,
        upper: bool = True,
        lower: bool = True,
        number: bool = True,
        symbol: bool = True,
    ) -> "CompositionConfig":
        flags = {
            CharacterClass.UPPER: upper,
            CharacterClass.LOWER: lower,
            CharacterClass.DIGIT: number,
            CharacterClass.SYMBOL: symbol,
        }
        return cls(length=length, include=frozenset(c for c, on in flags.items() if on))


def validate_config(config: CompositionConfig) -> None:
    """Raise a ConfigError if `config` cannot produce a valid password."""
    if config.length <= 0:
        raise EmptyLength(config.length)
    if config.length > MAX_LENGTH:
        raise LengthTooLong(config.length, MAX_LENGTH)
    if not config.include:
        raise NoClassSelected()
    if config.length < len(config.include):
        raise LengthBelowClassCount(config.length, len(config.include))


def generate(config: CompositionConfig, rng=None, catalog=None) -> str:
    """
    Generate a cryptographically secure password.

    `rng` may be any object with `choice` and `shuffle` (e.g. random.Random
    for reproducible tests); it defaults to the OS random source. `catalog`
    overrides the class pools and is passed through to assemble().
    """
    rng = rng or _sysrand
    validate_config(config)

    charset = assemble(config.include, rng=rng, catalog=catalog)

    password_chars = list(charset.required)
    remaining = config.length - len(password_chars)
    for _ in range(remaining):
        password_chars.append(rng.choice(charset.pool))

    rng.shuffle(password_chars)

    password = "".join(password_chars)
    try:
        password.encode("ascii")
    except UnicodeEncodeError as e:
        raise EncodingError(f"Failed to convert password to text: {e}") from e

    logger.debug("generated password of length %d from a %d-character pool", len(password), len(charset.pool))
    return password


def generate_many(config: CompositionConfig, copies: int = 1, rng=None) -> List[str]:
    """Generate `copies` independent passwords for the same config."""
    if copies < 1:
        raise InvalidCopies(copies)
    return [generate(config, rng=rng) for _ in range(copies)]
