"""Configuration base classes."""

from abc import abstractmethod
from typing import Any, Mapping, Optional

from ..core.error import BaseError


class ConfigError(BaseError):
    """A base exception for all configuration errors."""


class BaseSettings(Mapping[str, Any]):
    """Base settings class."""

    @abstractmethod
    def get_value(self, *var_names, default: Optional[Any] = None) -> Any:
        """Fetch a setting.

        Args:
            var_names: A list of variable name alternatives
            default: The default value to return if none are defined

        Returns:
            The setting value, if defined, otherwise the default value

        """

    def get_str(self, *var_names, default: Optional[str] = None) -> Optional[str]:
        """Fetch a setting as a string value."""
        value = self.get_value(*var_names, default=default)
        return None if value is None else str(value)

    def get_list(self, *var_names, default: Optional[list] = None) -> Optional[list]:
        """Fetch a setting as a list, wrapping a single value."""
        value = self.get_value(*var_names, default=default)
        if value is None or isinstance(value, list):
            return value
        if isinstance(value, tuple):
            return list(value)
        return [value]

    def __getitem__(self, index: str):
        """Fetch a defined setting by name."""
        missing = object()
        result = self.get_value(index, default=missing)
        if result is missing:
            raise KeyError(f"Undefined setting: {index}")
        return result
