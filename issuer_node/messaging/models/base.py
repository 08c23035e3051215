"""Base classes for Models and Schemas."""

import logging
import sys
from abc import ABC
from typing import Type, TypeVar

from marshmallow import Schema, ValidationError, post_dump, post_load

from ...core.error import BaseError

LOGGER = logging.getLogger(__name__)


class BaseModelError(BaseError):
    """Base exception class for base model errors."""


ModelType = TypeVar("ModelType", bound="BaseModel")


class BaseModel(ABC):
    """Base model that provides convenience methods."""

    class Meta:
        """BaseModel meta data."""

        # a BaseModelSchema subclass, or its name in the model's module
        schema_class = None

    def __init__(self):
        """
        Initialize BaseModel.

        Raises:
            TypeError: If schema_class is not set on Meta

        """
        if not self.Meta.schema_class:
            raise TypeError(
                "Can't instantiate abstract class {} with no schema_class".format(
                    self.__class__.__name__
                )
            )

    @classmethod
    def _get_schema_class(cls) -> Type["BaseModelSchema"]:
        schema_cls = cls.Meta.schema_class
        if isinstance(schema_cls, str):
            schema_cls = getattr(sys.modules[cls.__module__], schema_cls, None)
        if isinstance(schema_cls, type) and issubclass(schema_cls, BaseModelSchema):
            return schema_cls

        raise TypeError(f"Cannot resolve schema class for {cls.__name__}")

    @classmethod
    def deserialize(cls: Type[ModelType], obj: dict) -> ModelType:
        """
        Convert from JSON representation to a model instance.

        Args:
            obj: The dict to load into a model instance

        Returns:
            A model instance for this data

        """
        try:
            return cls._get_schema_class()().load(obj)
        except ValidationError as err:
            LOGGER.debug("%s validation error: %s", cls.__name__, err)
            raise BaseModelError(f"{cls.__name__} schema validation failed") from err

    def serialize(self) -> dict:
        """Create a JSON-compatible dict representation of the model instance."""
        return self._get_schema_class()().dump(self)


class BaseModelSchema(Schema):
    """BaseModel schema."""

    class Meta:
        """BaseModelSchema metadata."""

        model_class = None

    def __init__(self, *args, **kwargs):
        """
        Initialize BaseModelSchema.

        Raises:
            TypeError: If model_class is not set on Meta

        """
        super().__init__(*args, **kwargs)
        if not self.Meta.model_class:
            raise TypeError(
                "Can't instantiate abstract class {} with no model_class".format(
                    self.__class__.__name__
                )
            )

    @post_load
    def make_model(self, data: dict, **kwargs):
        """Return model instance after loading."""
        return self.Meta.model_class(**data)

    @post_dump
    def remove_skipped_values(self, data: dict, **kwargs) -> dict:
        """Drop fields with no value."""
        return {key: value for key, value in data.items() if value is not None}
