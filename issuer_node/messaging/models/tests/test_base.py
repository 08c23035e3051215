from unittest import TestCase

import pytest
from marshmallow import EXCLUDE, ValidationError, fields, validates_schema

from ..base import BaseModel, BaseModelError, BaseModelSchema


class ModelImpl(BaseModel):
    class Meta:
        schema_class = "SchemaImpl"

    def __init__(self, *, attr=None, note=None):
        self.attr = attr
        self.note = note


class SchemaImpl(BaseModelSchema):
    class Meta:
        model_class = ModelImpl
        unknown = EXCLUDE

    attr = fields.String(required=True)
    note = fields.String(allow_none=True)

    @validates_schema
    def validate_fields(self, data, **kwargs):
        if data["attr"] != "succeeds":
            raise ValidationError("attr must succeed")


class ModelWithoutSchema(BaseModel):
    pass


class ModelWithMissingSchema(BaseModel):
    class Meta:
        schema_class = "NoSuchSchema"


class TestBase(TestCase):
    def test_deserialize(self):
        model = ModelImpl.deserialize({"attr": "succeeds", "other": 1})
        assert isinstance(model, ModelImpl)
        assert model.attr == "succeeds"
        assert model.note is None

    def test_deserialize_x(self):
        with pytest.raises(BaseModelError):
            ModelImpl.deserialize({"attr": "fails"})
        with pytest.raises(BaseModelError):
            ModelImpl.deserialize({})
        with pytest.raises(BaseModelError):
            ModelImpl.deserialize(["attr"])

    def test_serialize_skips_none(self):
        assert ModelImpl(attr="succeeds").serialize() == {"attr": "succeeds"}
        assert ModelImpl(attr="succeeds", note="n").serialize() == {
            "attr": "succeeds",
            "note": "n",
        }

    def test_abstract(self):
        with pytest.raises(TypeError):
            ModelWithoutSchema()
        with pytest.raises(TypeError):
            BaseModelSchema()
        with pytest.raises(TypeError):
            ModelWithMissingSchema.deserialize({})
