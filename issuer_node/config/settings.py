"""Settings implementation."""

from typing import Mapping

from .base import BaseSettings


class Settings(BaseSettings):
    """Settings collected from the command line, keyed by dotted name."""

    def __init__(self, values: Mapping[str, object] = None):
        """Initialize a Settings object from an optional dictionary."""
        self._values = dict(values or {})

    def get_value(self, *var_names, default=None):
        """Fetch the first defined setting among `var_names`."""
        for name in var_names:
            if name in self._values:
                return self._values[name]
        return default

    def __iter__(self):
        """Iterate settings keys."""
        return iter(self._values)

    def __len__(self):
        """Count the defined settings."""
        return len(self._values)
