"""
Encodes ordered lists of non-negative integers into short, reversible,
non-sequential strings, and decodes them back.

Identifiers are deterministic: anyone holding the same alphabet and minimum
length can decode them. No lookup table or stored state is involved.
"""
import logging
from functools import lru_cache
from typing import Callable, Iterable, List, Optional

from .config import DEFAULT_ALPHABET, DEFAULT_MIN_LENGTH, Config
from .exceptions import ConfigurationError, EncodingError
from .models import SqidsOptions
from .mymath import to_id, to_number
from .obfuscation import shuffle

logger = logging.getLogger(__name__)

RejectPredicate = Callable[[str], bool]


class Sqids:
    """
    Identifier codec whose public state is read-only after construction. Safe to
    share between threads without locking. The underscored fields are not
    guarded against assignment; treat them as private.

    ``reject`` is an optional predicate over candidate identifiers. When it
    returns True the encoder re-generates the identifier with the next rotation
    offset, giving up after ``len(alphabet) + 1`` attempts.
    """

    __slots__ = ("_alphabet", "_alphabet_set", "_min_length", "_reject")

    def __init__(
        self,
        alphabet: str = DEFAULT_ALPHABET,
        min_length: int = DEFAULT_MIN_LENGTH,
        reject: Optional[RejectPredicate] = None,
    ):
        options = SqidsOptions.parse(alphabet=alphabet, min_length=min_length)
        if reject is not None and not callable(reject):
            raise ConfigurationError("Reject predicate must be callable")

        self._alphabet = shuffle(options.alphabet)
        self._alphabet_set = frozenset(self._alphabet)
        self._min_length = options.min_length
        self._reject = reject

        logger.debug(f"Sqids configured: alphabet_length={len(self._alphabet)}, min_length={self._min_length}")

    @staticmethod
    def builder() -> "SqidsBuilder":
        return SqidsBuilder()

    @property
    def alphabet(self) -> str:
        """The canonical (shuffled) alphabet."""
        return self._alphabet

    @property
    def min_length(self) -> int:
        return self._min_length

    def __repr__(self) -> str:
        return f"Sqids(alphabet_length={len(self._alphabet)}, min_length={self._min_length})"

    # --- ENCODING ---

    def encode(self, numbers: Iterable[int]) -> str:
        """Encodes numbers into one identifier. An empty input gives an empty string."""
        numbers = list(numbers)
        if not numbers:
            return ""

        for num in numbers:
            if isinstance(num, bool) or not isinstance(num, int) or num < 0:
                raise EncodingError("Encoding supports non-negative integers only")

        return self._encode_numbers(numbers)

    def _encode_numbers(self, numbers: List[int]) -> str:
        max_increment = len(self._alphabet)
        increment = 0
        while increment <= max_increment:
            candidate = self._build_id(numbers, increment)
            if self._reject is None or not self._reject(candidate):
                return candidate
            logger.warning(f"Candidate identifier rejected, retrying (attempt {increment + 1})")
            increment += 1

        logger.error(f"Gave up re-generating identifier after {increment} attempts")
        raise EncodingError("Reached max attempts to re-generate the ID")

    def _build_id(self, numbers: List[int], increment: int) -> str:
        alphabet = self._alphabet
        length = len(alphabet)

        offset = len(numbers)
        for i, num in enumerate(numbers):
            offset += ord(alphabet[num % length]) + i
        offset = (offset % length + increment) % length

        rotated = alphabet[offset:] + alphabet[:offset]
        prefix = rotated[0]
        alphabet = rotated[::-1]

        parts = [prefix]
        last = len(numbers) - 1
        for i, num in enumerate(numbers):
            # First character is reserved as the separator for this step
            parts.append(to_id(num, alphabet[1:]))
            if i < last:
                parts.append(alphabet[0])
                alphabet = shuffle(alphabet)

        id_ = "".join(parts)

        if len(id_) < self._min_length:
            padding = [alphabet[0]]
            missing = self._min_length - len(id_) - 1
            while missing > 0:
                alphabet = shuffle(alphabet)
                chunk = alphabet[:missing]
                padding.append(chunk)
                missing -= len(chunk)
            id_ += "".join(padding)

        return id_

    # --- DECODING ---

    def decode(self, id_: str) -> List[int]:
        """
        Decodes an identifier back into its numbers. Never raises: an empty
        identifier, or one with characters outside the alphabet, gives [].
        """
        ret: List[int] = []
        if not id_:
            return ret

        if any(c not in self._alphabet_set for c in id_):
            return ret

        offset = self._alphabet.index(id_[0])
        alphabet = (self._alphabet[offset:] + self._alphabet[:offset])[::-1]

        index = 1
        while True:
            separator = alphabet[0]
            separator_index = id_.find(separator, index)
            if separator_index == -1:
                separator_index = len(id_)
            elif separator_index == index:
                # Empty group: everything after is padding
                break

            ret.append(to_number(id_[index:separator_index], alphabet[1:]))

            index = separator_index + 1
            if index >= len(id_):
                break
            alphabet = shuffle(alphabet)

        return ret


class SqidsBuilder:
    """Chainable construction of a Sqids codec."""

    def __init__(self):
        self._alphabet = DEFAULT_ALPHABET
        self._min_length = DEFAULT_MIN_LENGTH
        self._reject: Optional[RejectPredicate] = None

    def alphabet(self, alphabet: Optional[str]) -> "SqidsBuilder":
        if alphabet is not None:
            self._alphabet = alphabet
        return self

    def min_length(self, min_length: int) -> "SqidsBuilder":
        self._min_length = min_length
        return self

    def reject(self, predicate: Optional[RejectPredicate]) -> "SqidsBuilder":
        self._reject = predicate
        return self

    def build(self) -> Sqids:
        return Sqids(alphabet=self._alphabet, min_length=self._min_length, reject=self._reject)


# --- SHARED INSTANCE & HELPERS ---

@lru_cache()
def get_sqids() -> Sqids:
    """
    Returns a cached, process-wide Sqids built from the environment configuration.
    Call get_sqids.cache_clear() after changing Config to rebuild it.
    """
    Config.validate()
    return Sqids(alphabet=Config.ALPHABET, min_length=Config.min_length())


def encode_id(n: int, sqids: Optional[Sqids] = None) -> str:
    """Encodes a single integer ID into a short, non-sequential string."""
    return (sqids or get_sqids()).encode([n])


def decode_id(s: str, sqids: Optional[Sqids] = None) -> Optional[int]:
    """Decodes a short string back into an integer ID, or None unless it holds exactly one."""
    decoded = (sqids or get_sqids()).decode(s)
    if len(decoded) == 1:
        return decoded[0]
    return None
