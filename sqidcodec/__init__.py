"""Short, reversible identifiers for lists of non-negative integers."""
from .config import DEFAULT_ALPHABET, DEFAULT_MIN_LENGTH, MIN_ALPHABET_LENGTH, MIN_LENGTH_LIMIT
from .encoding import Sqids, SqidsBuilder, decode_id, encode_id, get_sqids
from .exceptions import ConfigurationError, EncodingError, SqidsError
from .models import SqidsOptions

__all__ = [
    "DEFAULT_ALPHABET",
    "DEFAULT_MIN_LENGTH",
    "MIN_ALPHABET_LENGTH",
    "MIN_LENGTH_LIMIT",
    "Sqids",
    "SqidsBuilder",
    "SqidsOptions",
    "SqidsError",
    "ConfigurationError",
    "EncodingError",
    "get_sqids",
    "encode_id",
    "decode_id",
]
