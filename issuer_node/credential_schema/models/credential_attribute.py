"""Credential attribute model."""

from typing import Any

from marshmallow import EXCLUDE, fields

from ...messaging.models.base import BaseModel, BaseModelSchema


class CredentialAttribute(BaseModel):
    """A name/value pair supplied to populate a credential."""

    class Meta:
        """CredentialAttribute metadata."""

        schema_class = "CredentialAttributeSchema"

    def __init__(self, *, name: str = None, value: Any = None):
        """Initialize a CredentialAttribute."""
        self.name = name
        self.value = value


class CredentialAttributeSchema(BaseModelSchema):
    """CredentialAttribute schema."""

    class Meta:
        """CredentialAttributeSchema metadata."""

        model_class = CredentialAttribute
        unknown = EXCLUDE

    name = fields.Str(
        required=True,
        metadata={"description": "Attribute name", "example": "birthday"},
    )
    value = fields.Raw(
        required=True,
        metadata={"description": "Attribute value", "example": "19960424"},
    )
