"""
rcli.charsets

The four character classes a password can be composed from, and the
assembler that turns a selection of classes into a sampling pool plus one
guaranteed representative per class.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from secrets import SystemRandom
from typing import AbstractSet, List, Mapping, Optional

from .errors import EmptyPool

logger = logging.getLogger(__name__)

# Ambiguous glyphs (I, O, l, 0) are left out on purpose.
UPPER = "ABCDEFGHJKLMNPQRSTUVWXYZ"
LOWER = "abcdefghijkmnopqrstuvwxyz"
DIGITS = "123456789"
SYMBOLS = "!@#$%^&*_"


class CharacterClass(Enum):
    """Closed set of character classes. Definition order is assembly order."""

    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    SYMBOL = "symbol"

    @property
    def pool(self) -> str:
        return CATALOG[self]


CATALOG: Mapping[CharacterClass, str] = {
    CharacterClass.UPPER: UPPER,
    CharacterClass.LOWER: LOWER,
    CharacterClass.DIGIT: DIGITS,
    CharacterClass.SYMBOL: SYMBOLS,
}

_sysrand = SystemRandom()


@dataclass(frozen=True)
class AssembledCharset:
    pool: str
    required: List[str]


def classify(ch: str) -> Optional[CharacterClass]:
    """Return the class whose pool contains `ch`, or None."""
    for cls in CharacterClass:
        if ch in CATALOG[cls]:
            return cls
    return None


def assemble(
    include: AbstractSet[CharacterClass],
    rng=None,
    catalog: Optional[Mapping[CharacterClass, str]] = None,
) -> AssembledCharset:
    """
    Build the combined pool for the included classes and draw one required
    character from each of them.

    Classes are visited in CharacterClass order regardless of how `include`
    is ordered, so `required` lines up with that order.
    """
    rng = rng or _sysrand
    catalog = catalog if catalog is not None else CATALOG

    pool_parts: List[str] = []
    required: List[str] = []
    for cls in CharacterClass:
        if cls not in include:
            continue
        chars = catalog.get(cls, "")
        if not chars:
            raise EmptyPool(cls.value)
        pool_parts.append(chars)
        required.append(rng.choice(chars))

    pool = "".join(pool_parts)
    logger.debug("assembled pool of %d characters from %d classes", len(pool), len(required))
    return AssembledCharset(pool=pool, required=required)
