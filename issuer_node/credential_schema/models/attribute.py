"""Schema attribute descriptor model."""

from typing import List

from marshmallow import EXCLUDE, fields

from ...messaging.models.base import BaseModel, BaseModelSchema


class Attribute(BaseModel):
    """A credential attribute as declared by a JSON schema."""

    class Meta:
        """Attribute metadata."""

        schema_class = "AttributeSchema"

    def __init__(
        self,
        *,
        id: str = None,
        title: str = None,
        type: str = None,
        format: str = None,
    ):
        """Initialize an Attribute.

        Args:
            id: The attribute name, the key under credentialSubject.properties
            title: Human readable title
            type: JSON schema type of the attribute value
            format: JSON schema format, informative only
        """
        self.id = id
        self.title = title
        self.type = type
        self.format = format

    def __str__(self) -> str:
        """Label the attribute as `title(id)`, or `id` when untitled."""
        if self.title:
            return f"{self.title}({self.id})"
        return self.id


class AttributeSchema(BaseModelSchema):
    """Attribute schema."""

    class Meta:
        """AttributeSchema metadata."""

        model_class = Attribute
        unknown = EXCLUDE

    id = fields.Str(metadata={"description": "Attribute name", "example": "birthday"})
    title = fields.Str(
        allow_none=True,
        metadata={"description": "Attribute title", "example": "Date of birth"},
    )
    type = fields.Str(
        allow_none=True,
        metadata={"description": "JSON schema type", "example": "integer"},
    )
    format = fields.Str(
        allow_none=True,
        metadata={"description": "JSON schema format", "example": "date"},
    )


class Attributes(list):
    """A list of schema attributes."""

    def schema_attrs(self) -> List[str]:
        """Return the attribute labels stored along with an imported schema."""
        return [str(attr) for attr in self]

    def by_id(self) -> dict:
        """Index the attributes by id."""
        return {attr.id: attr for attr in self}
