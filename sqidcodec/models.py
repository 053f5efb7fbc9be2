from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .config import DEFAULT_ALPHABET, DEFAULT_MIN_LENGTH, MIN_ALPHABET_LENGTH, MIN_LENGTH_LIMIT
from .exceptions import ConfigurationError


class SqidsOptions(BaseModel):
    """Validated construction options for a Sqids codec."""
    model_config = ConfigDict(strict=True, frozen=True)

    alphabet: str = DEFAULT_ALPHABET
    min_length: int = Field(DEFAULT_MIN_LENGTH)

    @field_validator('alphabet')
    @classmethod
    def validate_alphabet(cls, value: str) -> str:
        # Single-byte characters only
        if not value.isascii():
            raise ValueError("Alphabet cannot contain multibyte characters")

        if len(value) < MIN_ALPHABET_LENGTH:
            raise ValueError(f"Alphabet length must be at least {MIN_ALPHABET_LENGTH}")

        if len(set(value)) != len(value):
            raise ValueError("Alphabet must contain unique characters")

        return value

    @field_validator('min_length')
    @classmethod
    def validate_min_length(cls, value: int) -> int:
        if not 0 <= value <= MIN_LENGTH_LIMIT:
            raise ValueError(f"Minimum length has to be between 0 and {MIN_LENGTH_LIMIT}")
        return value

    @classmethod
    def parse(cls, alphabet: str = DEFAULT_ALPHABET, min_length: int = DEFAULT_MIN_LENGTH) -> "SqidsOptions":
        """Builds options or raises ConfigurationError with the first failure."""
        try:
            return cls(alphabet=alphabet, min_length=min_length)
        except ValidationError as e:
            raise ConfigurationError(_first_error_message(e)) from e


def _first_error_message(error: ValidationError) -> str:
    first = error.errors()[0]
    if first["type"] == "value_error":
        return str(first["ctx"]["error"])
    field = ".".join(str(part) for part in first["loc"])
    return f"Invalid {field}: {first['msg']}"
