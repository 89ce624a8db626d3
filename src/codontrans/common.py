"""
Collection of shared utility classes and methods
"""
from collections.abc import Mapping

_MISSING = object()


class AttrDict(dict):
    """
    AttrDict adds accessing stored keys as attributes to dict

    Nested mappings are returned wrapped as AttrDict as well, so
    ``cfg.translate.unknown`` works on merged config data.
    """
    def __getattr__(self, attr):
        try:
            val = self[attr]
        except KeyError:
            raise AttributeError(f'{self} has no attribute {attr}') from None
        if isinstance(val, dict):
            return AttrDict(val)
        return val

    def __setattr__(self, attr, value):
        raise NotImplementedError("AttrDict is read-only via attributes")

    def lookup(self, key: str, default=_MISSING):
        """Resolve dotted ``key`` through nested mappings

        Raises:
          KeyError: if a part of ``key`` is missing and no default was given
        """
        value = self
        for part in key.split("."):
            if not isinstance(value, Mapping) or part not in value:
                if default is _MISSING:
                    raise KeyError(key)
                return default
            value = value[part]
        if isinstance(value, dict) and not isinstance(value, AttrDict):
            return AttrDict(value)
        return value
