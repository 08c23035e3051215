from unittest import TestCase

import pytest

from ...messaging.models.base import BaseModelError
from ..models.attribute import Attribute, Attributes
from ..models.credential_attribute import CredentialAttribute


class TestAttribute(TestCase):
    def test_deserialize(self):
        attr = Attribute.deserialize(
            {"id": "birthday", "title": "Birthday", "type": "integer", "extra": 1}
        )
        assert (attr.id, attr.title, attr.type, attr.format) == (
            "birthday",
            "Birthday",
            "integer",
            None,
        )
        assert str(attr) == "Birthday(birthday)"
        assert attr.serialize() == {
            "id": "birthday",
            "title": "Birthday",
            "type": "integer",
        }

    def test_deserialize_x(self):
        with pytest.raises(BaseModelError):
            Attribute.deserialize({"id": "birthday", "type": 1})

    def test_attributes(self):
        attrs = Attributes(
            [Attribute(id="id", type="string"), Attribute(id="age", title="Age")]
        )
        assert attrs.schema_attrs() == ["id", "Age(age)"]
        assert set(attrs.by_id()) == {"id", "age"}
        assert Attributes().schema_attrs() == []


class TestCredentialAttribute(TestCase):
    def test_round_trip(self):
        attr = CredentialAttribute.deserialize({"name": "active", "value": "true"})
        assert attr.name == "active"
        assert attr.value == "true"

        attr.value = False
        assert attr.serialize() == {"name": "active", "value": False}

    def test_deserialize_x(self):
        with pytest.raises(BaseModelError):
            CredentialAttribute.deserialize({"name": "active"})
        with pytest.raises(BaseModelError):
            CredentialAttribute.deserialize({"value": "true"})
