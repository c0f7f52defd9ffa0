"""
Schema-Driven JSON Generator
=============================
Turns a `PropertySchema` tree into a concrete JSON value for fixtures and
mock payloads.

Dispatch by node type:
  - integer → bounded random integer (or the default)
  - string  → format / phone / pattern / enum / random, then length fix-up
  - object  → one generated value per declared property
  - array   → one generated value per item schema, in order
  - boolean → a random bit
  - date    → today, the default, or a random date in the given format
  - other   → the default, else None

The property path threaded through recursion only feeds log lines and error
messages; it never changes what gets generated.
"""

import logging
import random
import secrets
from typing import Any, Dict, List, Optional, Sequence, Union

from core import config
from core.constants import (
    ALPHA_NUM,
    COUNTRIES_CODE_PHONE,
    DEFAULT_STRING_LENGTH,
    EMAIL_DOMAIN,
    EMAIL_USERNAME_LENGTH,
    MAX_SAFE_INTEGER,
    PAD_CHAR,
)
from core.errors import InvalidCountryCodeError, SchemaPreconditionError
from core.schema import PropertySchema
from utils.date_generator import generate_date, today_iso
from utils.pattern_sampler import sample_matching

logger = logging.getLogger(config.LOGGER_NAME)

SchemaLike = Union[PropertySchema, Dict[str, Any]]


def format_path(property_path: Sequence[str]) -> str:
    """Renders ["user", "tags", "items", "0"] as "$.user.tags.items.0"."""
    return ".".join(["$", *property_path])


class JsonGenerator:
    """
    Stateless generator; one instance can serve any number of calls.

    `rng` drives choices and ranges and may be seeded for repeatable draws.
    Random identifiers and booleans always come from `secrets`.
    """

    def __init__(self, rng: Optional[random.Random] = None, max_pattern_attempts: Optional[int] = None):
        self.rng = rng or random.Random()
        self.max_pattern_attempts = max_pattern_attempts or config.MAX_PATTERN_ATTEMPTS

    def generate_json_from_schema(self, schema: SchemaLike, property_path: Sequence[str] = ()) -> Any:
        if isinstance(schema, dict):
            schema = PropertySchema.from_dict(schema)

        property_path = list(property_path)
        node_type = schema.type
        logger.debug(f"Generating {node_type} at {format_path(property_path)}")

        if node_type == "integer":
            if schema.use_default and schema.default:
                return schema.default
            return self.generate_integer(schema.minimum, schema.maximum, property_path)

        elif node_type == "string":
            return self.generate_string(
                fmt=schema.format,
                pattern=schema.pattern,
                enum_values=schema.enum,
                use_default=schema.use_default,
                default_value=schema.default,
                length=schema.length,
                min_length=schema.min_length,
                max_length=schema.max_length,
                country_code=schema.country_code,
            )

        elif node_type == "object":
            if schema.properties is None:
                raise SchemaPreconditionError(format_path(property_path), "object schema has no 'properties'")
            return self._generate_object_data(schema.properties, property_path)

        elif node_type == "array":
            if schema.items is None:
                raise SchemaPreconditionError(format_path(property_path), "array schema has no 'items'")
            return self._generate_array_data(schema.items, property_path)

        elif node_type == "boolean":
            return self.generate_boolean()

        elif node_type == "date":
            if schema.use_default:
                return schema.default if schema.default is not None else today_iso()
            return generate_date(schema.format, rng=self.rng)

        logger.debug(f"Unknown type {node_type!r} at {format_path(property_path)}, using default")
        return schema.default

    # ── Composites ──

    def _generate_object_data(self, properties: Dict[str, PropertySchema], property_path: List[str]) -> Dict[str, Any]:
        generated = {}
        for name, child in properties.items():
            generated[name] = self.generate_json_from_schema(child, property_path + [name])
        return generated

    def _generate_array_data(self, items: List[PropertySchema], property_path: List[str]) -> List[Any]:
        return [
            self.generate_json_from_schema(item, property_path + ["items", str(i)])
            for i, item in enumerate(items)
        ]

    # ── Primitives ──

    def generate_integer(self, minimum: Optional[int] = None, maximum: Optional[int] = None,
                         property_path: Sequence[str] = ()) -> int:
        low = minimum if minimum is not None else 0
        high = maximum if maximum is not None else MAX_SAFE_INTEGER
        if low > high:
            raise SchemaPreconditionError(
                format_path(property_path), f"minimum {low} is greater than maximum {high}"
            )
        return self.rng.randint(low, high)

    def generate_boolean(self) -> bool:
        return bool(secrets.token_bytes(1)[0] & 1)

    def generate_random_value(self, length: int) -> str:
        """Random alphanumeric string: one secure byte per character."""
        return "".join(ALPHA_NUM[b % len(ALPHA_NUM)] for b in secrets.token_bytes(length))

    def generate_random_email(self, domain: str = EMAIL_DOMAIN) -> str:
        return f"{self.generate_random_value(EMAIL_USERNAME_LENGTH)}{domain}"

    def generate_phone_number(self, country_code: str) -> str:
        phone_pattern = COUNTRIES_CODE_PHONE.get(country_code)
        if not phone_pattern:
            raise InvalidCountryCodeError(country_code)
        return sample_matching(phone_pattern, max_attempts=self.max_pattern_attempts)

    def generate_random_value_from_format(self, fmt: str, country_code: Optional[str] = None) -> str:
        if fmt == "email":
            return self.generate_random_email()
        if fmt == "phone":
            return self.generate_phone_number(country_code or config.DEFAULT_COUNTRY_CODE)
        return ""

    # ── Strings ──

    def generate_string(
        self,
        fmt: Optional[str] = None,
        pattern: Optional[str] = None,
        enum_values: Optional[List[Any]] = None,
        use_default: bool = False,
        default_value: Any = None,
        length: Optional[int] = None,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        country_code: Optional[str] = None,
    ) -> Any:
        """
        Produces a string honoring the first constraint that applies:

          1. a format (unless a default is requested or a country is given)
          2. a phone number for `country_code`
          3. a regular expression
          4. an enumeration
          5. the default, or a random alphanumeric string of `length` (10)

        The result is then padded with '*' up to `min_length`, or else cut
        down to `max_length`. Non-string enum members and defaults are
        returned untouched.
        """
        if fmt and not use_default and not country_code:
            generated = self.generate_random_value_from_format(fmt)
        elif country_code and fmt == "phone":
            generated = self.generate_random_value_from_format(fmt, country_code)
        elif pattern:
            generated = sample_matching(pattern, max_attempts=self.max_pattern_attempts)
        elif isinstance(enum_values, list) and enum_values:
            generated = self.rng.choice(enum_values)
        else:
            if use_default and default_value:
                generated = default_value
            else:
                generated = self.generate_random_value(length if length is not None else DEFAULT_STRING_LENGTH)

        if not isinstance(generated, str):
            return generated

        if min_length and len(generated) < min_length:
            return generated.ljust(min_length, PAD_CHAR)[:min_length]
        if max_length and len(generated) > max_length:
            return generated[:max_length]
        return generated


# Module-level convenience, mirroring the single entry point most callers need
_default_generator = JsonGenerator()


def generate_json_from_schema(schema: SchemaLike) -> Any:
    return _default_generator.generate_json_from_schema(schema)
