"""Credential JSON schema inspection."""

import json
import logging
from collections import abc
from typing import Any, List, Mapping

from jsonschema import exceptions as jsonschema_exceptions
from jsonschema.validators import validator_for
from marshmallow import ValidationError

from .conversion import validate_and_convert
from .error import (
    DecodingError,
    ProcessSchemaError,
    SchemaLoadError,
    SchemaStructureError,
)
from .loader import BaseSchemaLoader
from .models.attribute import Attribute, Attributes, AttributeSchema
from .models.credential_attribute import CredentialAttribute
from .schema_hash import SchemaHash, create_schema_hash

LOGGER = logging.getLogger(__name__)


def _lookup(
    document: Mapping[str, Any], *path: str, leaf: type = abc.Mapping
) -> Any:
    """Walk nested mappings, failing on the first missing or mistyped level."""
    node = document
    for depth, key in enumerate(path, start=1):
        node = node.get(key) if isinstance(node, abc.Mapping) else None
        expected = leaf if depth == len(path) else abc.Mapping
        if not isinstance(node, expected):
            raise SchemaStructureError(".".join(path[:depth]))
    return node


def extract_attributes(document: Mapping[str, Any]) -> Attributes:
    """Return the attributes in properties.credentialSubject.properties.

    The returned order carries no meaning.
    """
    properties = _lookup(document, "properties", "credentialSubject", "properties")
    schema = AttributeSchema()
    attrs = Attributes()
    for attr_id, prop in properties.items():
        if not isinstance(prop, abc.Mapping):
            raise DecodingError(attr_id)
        try:
            attr = schema.load({**prop, "id": attr_id})
        except ValidationError as err:
            raise DecodingError(attr_id) from err
        attrs.append(attr)
    return attrs


class JSONSchema:
    """A loaded credential JSON schema and the inspections done over it."""

    def __init__(self, content: Mapping[str, Any]):
        """Initialize a JSONSchema from a decoded document."""
        self._content = content

    @property
    def content(self) -> Mapping[str, Any]:
        """Accessor for the decoded document."""
        return self._content

    @classmethod
    def load(cls, loader: BaseSchemaLoader) -> "JSONSchema":
        """Load a schema document, checking it is a valid JSON schema.

        :raises SchemaLoadError: if the document cannot be retrieved, decoded
            or is not a valid JSON schema
        """
        raw = loader.load()
        try:
            content = json.loads(raw)
        except ValueError as err:
            raise SchemaLoadError("Schema document is not valid JSON") from err
        if not isinstance(content, dict):
            raise SchemaLoadError("Schema document must be a JSON object")
        if not isinstance(content.get("$schema", ""), str):
            raise SchemaLoadError("Schema document $schema must be a string")

        validator_cls = validator_for(content)
        try:
            validator_cls.check_schema(content)
        except jsonschema_exceptions.SchemaError as err:
            raise SchemaLoadError(f"Invalid JSON schema: {err.message}") from err

        LOGGER.debug(
            "Loaded schema %s using %s", content.get("$id"), validator_cls.__name__
        )
        return cls(content)

    def attribute_names(self) -> Attributes:
        """Return the attributes in properties.credentialSubject.properties."""
        return extract_attributes(self._content)

    def json_ld_context(self) -> str:
        """Return the value of $metadata.uris.jsonLdContext."""
        return _lookup(
            self._content, "$metadata", "uris", "jsonLdContext", leaf=str
        )

    def schema_hash(self, schema_type: str) -> SchemaHash:
        """Calculate the hash of a schema type defined by the JSON-LD context."""
        schema_id = self.json_ld_context() + "#" + schema_type
        return create_schema_hash(schema_id.encode())

    def validate_and_convert(
        self, credential_attributes: List[CredentialAttribute]
    ) -> List[CredentialAttribute]:
        """Validate credential attributes against the schema, converting types.

        :raises ProcessSchemaError: if the schema attributes cannot be extracted
        :raises ConversionError: if the credential attributes do not match
        """
        try:
            schema_attributes: List[Attribute] = self.attribute_names()
        except (SchemaStructureError, DecodingError) as err:
            raise ProcessSchemaError() from err
        return validate_and_convert(schema_attributes, credential_attributes)
