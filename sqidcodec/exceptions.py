"""
Exceptions raised by the identifier codec.

Configuration problems surface while building a Sqids instance, encoding problems
while encoding. Decoding never raises.
"""


class SqidsError(Exception):
    """Base class for every error raised by sqidcodec."""


class ConfigurationError(SqidsError, ValueError):
    """Invalid alphabet or minimum length at construction time."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class EncodingError(SqidsError, ValueError):
    """Numbers could not be encoded into an identifier."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail
