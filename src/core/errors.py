"""
Generation Errors
==================
Every failure the generator surfaces to its caller. They all derive from
ValueError so callers that only care about "bad input" can catch that.
"""


class JsonGenerationError(ValueError):
    """Base class for every error raised while generating a value."""


class InvalidDateFormatError(JsonGenerationError):
    def __init__(self, fmt: str):
        self.format = fmt
        super().__init__(f"Invalid date format: {fmt}")


class InvalidCountryCodeError(JsonGenerationError):
    def __init__(self, country_code: str):
        self.country_code = country_code
        super().__init__(f"Invalid country code: {country_code}")


class PatternGenerationError(JsonGenerationError):
    """Raised when no string matching a pattern could be produced."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"Cannot generate a value for pattern {pattern!r}: {reason}")


class SchemaPreconditionError(JsonGenerationError):
    """A schema node lacks something generation cannot do without."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")
