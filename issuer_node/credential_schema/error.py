"""Credential schema errors."""

from ..core.error import BaseError


class SchemaError(BaseError):
    """Base class for credential schema errors."""


class SchemaLoadError(SchemaError):
    """The schema document could not be retrieved or is not a valid JSON schema."""


class SchemaStructureError(SchemaError):
    """A required field of the schema document is missing or malformed."""

    def __init__(self, path: str, *args, **kwargs):
        """Initialize a SchemaStructureError for the given dotted path."""
        super().__init__(f"missing {path} field", *args, **kwargs)
        self.path = path


class DecodingError(SchemaError):
    """A schema attribute definition could not be decoded."""

    def __init__(self, key: str, *args, **kwargs):
        """Initialize a DecodingError for the attribute under `key`."""
        super().__init__(f"parsing attribute <{key}>", *args, **kwargs)
        self.key = key


class ProcessSchemaError(SchemaError):
    """Something went wrong while processing a loaded schema."""

    def __init__(self, *args, **kwargs):
        """Initialize a ProcessSchemaError."""
        super().__init__(*(args or ("cannot process schema",)), **kwargs)


class ConversionError(SchemaError):
    """Credential attributes do not match the schema attributes."""

    def __init__(self, message: str, *args, name: str = None, **kwargs):
        """Initialize a ConversionError, optionally naming the attribute."""
        super().__init__(message, *args, **kwargs)
        self.name = name


class AttributeNotFoundError(ConversionError):
    """A credential attribute has no matching schema attribute."""

    def __init__(self, name: str):
        """Initialize an AttributeNotFoundError."""
        super().__init__(
            f"error converting the attribute: {name}. attribute not found in schema",
            name=name,
        )


class TypeMismatchError(ConversionError):
    """A credential attribute value has the wrong shape for its schema type."""

    def __init__(self, name: str):
        """Initialize a TypeMismatchError."""
        super().__init__(f"error converting the attribute: {name}", name=name)


class ParseError(ConversionError):
    """A credential attribute value cannot be parsed as its schema type."""

    def __init__(self, name: str, type_name: str):
        """Initialize a ParseError."""
        super().__init__(
            f"error converting the attribute: {name}. Must be {type_name}", name=name
        )


class UnsupportedTypeError(ConversionError):
    """The schema declares a type that cannot be converted."""

    def __init__(self, name: str):
        """Initialize an UnsupportedTypeError."""
        super().__init__(
            f"error converting the attribute: {name}. type not supported", name=name
        )


class CountMismatchError(ConversionError):
    """The credential attributes do not cover the schema attributes."""

    def __init__(self, remaining: int):
        """Initialize a CountMismatchError with the unmatched descriptor count."""
        super().__init__("the number of attributes is not valid")
        self.remaining = remaining
