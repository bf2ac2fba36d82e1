"""Passcraft -- password and PIN generation utilities.

Core functions for building character alphabets, composing passwords
(optionally seeded with custom words), and estimating their strength.
"""

import enum
import logging
import math
import secrets
import string
from dataclasses import dataclass, field
from typing import NamedTuple, Protocol, Sequence

log = logging.getLogger(__name__)


class EmptyAlphabetError(ValueError):
    """Raised when the configuration leaves no characters to draw from."""


# ── Configuration ──────────────────────────────────────────────────────────


class Mode(enum.Enum):
    PASSWORD = "password"
    PIN = "pin"


class CharClass(enum.Enum):
    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    SYMBOL = "symbol"


ALL_CLASSES = frozenset(CharClass)


@dataclass(frozen=True)
class GenerationConfig:
    mode: Mode = Mode.PASSWORD
    length: int = 16
    classes: frozenset = ALL_CLASSES
    avoid_ambiguous: bool = False
    # Snapshot of the caller's word list; order matters only for display.
    custom_words: tuple = field(default_factory=tuple)


DEFAULT_CONFIG = GenerationConfig()


# ── Alphabet ───────────────────────────────────────────────────────────────

# Full and ambiguity-reduced variants per class.  I/l/1 and O/0 are the
# glyphs that get confused; "i" and "o" go with their uppercase pair.
_CHARSETS = {
    CharClass.UPPER: (string.ascii_uppercase, "ABCDEFGHJKMNPQRSTUVWXYZ"),
    CharClass.LOWER: (string.ascii_lowercase, "abcdefghjkmnpqrstuvwxyz"),
    CharClass.DIGIT: (string.digits, "23456789"),
    CharClass.SYMBOL: (string.punctuation, string.punctuation),
}

_CLASS_ORDER = (CharClass.UPPER, CharClass.LOWER, CharClass.DIGIT, CharClass.SYMBOL)


class Alphabet(NamedTuple):
    chars: str
    size: int


def build_alphabet(config: GenerationConfig) -> Alphabet:
    """Return the characters eligible for random selection under *config*.

    PIN mode always uses digits.  In password mode the enabled classes are
    concatenated in a fixed order; the result is empty when none is enabled.
    """
    variant = 1 if config.avoid_ambiguous else 0

    if config.mode is Mode.PIN:
        chars = _CHARSETS[CharClass.DIGIT][variant]
        return Alphabet(chars, len(chars))

    parts = [_CHARSETS[c][variant] for c in _CLASS_ORDER if c in config.classes]
    size = sum(len(p) for p in parts)
    return Alphabet("".join(parts), size)


# ── Random source ──────────────────────────────────────────────────────────


class RandomSource(Protocol):
    def next_uint32(self) -> int:
        ...


class SecureRandom:
    """Random source backed by :mod:`secrets`."""

    def next_uint32(self) -> int:
        return secrets.randbits(32)


_UINT32_RANGE = 2 ** 32


def randbelow(rng: RandomSource, n: int) -> int:
    """Return a uniform integer in ``[0, n)`` drawn from *rng*.

    Values from the top of the 32-bit range that would bias the modulo are
    rejected and redrawn.
    """
    if n < 1:
        raise ValueError("Upper bound must be at least 1")
    limit = _UINT32_RANGE - _UINT32_RANGE % n
    while True:
        value = rng.next_uint32()
        if value < limit:
            return value % n


def _shuffled(items: Sequence[str], rng: RandomSource) -> list[str]:
    out = list(items)
    # Fisher-Yates
    for i in range(len(out) - 1, 0, -1):
        j = randbelow(rng, i + 1)
        out[i], out[j] = out[j], out[i]
    return out


# ── Password composition ───────────────────────────────────────────────────

WORD_SEPARATOR = "-"


@dataclass(frozen=True)
class GeneratedPassword:
    text: str
    length: int


def compose(
    config: GenerationConfig,
    alphabet: Alphabet,
    rng: RandomSource | None = None,
) -> str:
    """Compose a string of exactly ``config.length`` characters.

    In password mode the custom words (if any) are shuffled, joined with
    ``-`` and placed at the start; the rest is filled with characters drawn
    uniformly from *alphabet*.
    """
    if config.length < 1:
        raise ValueError("Password length must be at least 1")
    if alphabet.size == 0:
        raise EmptyAlphabetError("Select at least one character type")

    if rng is None:
        rng = SecureRandom()
    length = config.length

    core = ""
    if config.mode is Mode.PASSWORD and config.custom_words:
        core = WORD_SEPARATOR.join(_shuffled(config.custom_words, rng))

    remaining = max(0, length - len(core))
    if len(core) > length:
        core = core[:length]
        remaining = 0

    filler = "".join(
        alphabet.chars[randbelow(rng, alphabet.size)] for _ in range(remaining)
    )
    return (core + filler)[:length]


def generate(
    config: GenerationConfig = DEFAULT_CONFIG,
    rng: RandomSource | None = None,
) -> GeneratedPassword:
    """Generate a password (or PIN) for *config*.

    Raises :class:`EmptyAlphabetError` when no character class applies and
    :class:`ValueError` for a length below 1.
    """
    alphabet = build_alphabet(config)
    log.debug(
        "Generating %s: length=%d alphabet=%d custom_words=%d",
        config.mode.value, config.length, alphabet.size, len(config.custom_words),
    )
    text = compose(config, alphabet, rng)
    return GeneratedPassword(text=text, length=len(text))


# ── Strength assessment ────────────────────────────────────────────────────


class Rating(enum.Enum):
    WEAK = "Weak"
    FAIR = "Fair"
    GOOD = "Good"
    STRONG = "Strong"


# Lower bound (inclusive) in bits for each rating, strongest first.
_THRESHOLDS = (
    (80, Rating.STRONG),
    (60, Rating.GOOD),
    (28, Rating.FAIR),
)


@dataclass(frozen=True)
class StrengthAssessment:
    entropy_bits: float
    rating: Rating


def assess(password: str, alphabet_size: int) -> StrengthAssessment:
    """Estimate the strength of *password* drawn from *alphabet_size* chars.

    Entropy is ``len(password) * log2(alphabet_size)``, and zero for an
    empty password or an alphabet of at most one character.
    """
    if not password or alphabet_size <= 1:
        entropy = 0.0
    else:
        entropy = len(password) * math.log2(alphabet_size)

    for bound, rating in _THRESHOLDS:
        if entropy >= bound:
            return StrengthAssessment(entropy, rating)
    return StrengthAssessment(entropy, Rating.WEAK)


# ── Custom words ───────────────────────────────────────────────────────────


def add_custom_word(words: Sequence[str], word: str) -> tuple:
    """Return *words* with *word* appended, ignoring blanks and duplicates."""
    word = word.strip()
    if not word or word in words:
        return tuple(words)
    return (*words, word)


def remove_custom_word(words: Sequence[str], index: int) -> tuple:
    """Return *words* without the entry at *index*."""
    if not 0 <= index < len(words):
        raise IndexError(f"No custom word at index {index}")
    return tuple(w for i, w in enumerate(words) if i != index)
