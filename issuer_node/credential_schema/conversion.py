"""Validate credential attributes against schema attributes and convert values.

Credential attribute values always arrive as strings. Each one is coerced to
the type its schema attribute declares; only `string`, `integer` and `boolean`
attributes are supported.
"""

import re
from typing import Any, Iterable, List

from .error import (
    AttributeNotFoundError,
    ConversionError,
    CountMismatchError,
    ParseError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from .models.attribute import Attribute
from .models.credential_attribute import CredentialAttribute

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

TRUE_LITERALS = ("1", "t", "T", "TRUE", "true", "True")
FALSE_LITERALS = ("0", "f", "F", "FALSE", "false", "False")

# attributes a caller never supplies, filled in by the issuer (credential subject id)
RESERVED_ATTRIBUTE_COUNT = 1

INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


def parse_int(value: str) -> int:
    """Parse a base-10 integer literal with an optional sign into a 64 bit int.

    Raises:
        ValueError: If the literal is malformed or out of range

    """
    if not INTEGER_LITERAL.fullmatch(value):
        raise ValueError(f"invalid integer literal: {value!r}")
    parsed = int(value)
    if not INT64_MIN <= parsed <= INT64_MAX:
        raise ValueError(f"integer out of range: {value!r}")
    return parsed


def parse_bool(value: str) -> bool:
    """Parse a boolean literal.

    Raises:
        ValueError: If the literal is not one of the accepted spellings

    """
    if value in TRUE_LITERALS:
        return True
    if value in FALSE_LITERALS:
        return False
    raise ValueError(f"invalid boolean literal: {value!r}")


def convert_value(attribute: Attribute, name: str, value: Any) -> Any:
    """Convert a credential attribute value to the type of its schema attribute."""
    if attribute.type == "string":
        if not isinstance(value, str):
            raise TypeMismatchError(name)
        return value

    if attribute.type == "integer":
        if not isinstance(value, str):
            raise TypeMismatchError(name)
        try:
            return parse_int(value)
        except ValueError as err:
            raise ParseError(name, "an integer") from err

    if attribute.type == "boolean":
        if not isinstance(value, str):
            raise TypeMismatchError(name)
        try:
            return parse_bool(value)
        except ValueError as err:
            raise ParseError(name, "a boolean") from err

    raise UnsupportedTypeError(name)


def validate_and_convert(
    descriptors: Iterable[Attribute], attributes: List[CredentialAttribute]
) -> List[CredentialAttribute]:
    """Validate credential attributes against schema attributes.

    Every credential attribute must match a distinct schema attribute, and all
    schema attributes except the reserved one must be matched. Values are
    replaced in place with their converted form.

    Args:
        descriptors: The schema attributes, left untouched
        attributes: The credential attributes, in caller order

    Returns:
        The same `attributes` list, with converted values

    Raises:
        ConversionError: If the attributes do not match the schema

    """
    pending = {}
    for descriptor in descriptors:
        if descriptor.id in pending:
            raise ConversionError(
                f"duplicated schema attribute: {descriptor.id}", name=descriptor.id
            )
        pending[descriptor.id] = descriptor

    for attribute in attributes:
        descriptor = pending.pop(attribute.name, None)
        if descriptor is None:
            raise AttributeNotFoundError(attribute.name)
        attribute.value = convert_value(descriptor, attribute.name, attribute.value)

    if len(pending) != RESERVED_ATTRIBUTE_COUNT:
        raise CountMismatchError(len(pending))

    return attributes
