"""Generic construction of records from decoded gateway payloads."""

from collections.abc import Mapping
from dataclasses import fields
from typing import Any


class Construction:
    """
    Mixin that builds dataclass records from string-keyed maps.

    Keys matching a declared field populate that field, unknown keys are
    ignored and missing keys keep the field's default. Lists are mapped
    element-wise. Records that carry nested structured fields override
    `construct` to remap those fields after the generic step.
    """

    @classmethod
    def construct(cls, data: Any) -> Any:
        """
        Convert a map, or a list of maps, into records of this type.

        Args:
            data: A mapping, a list of mappings, or an existing record

        Returns:
            A record, a list of records, or `data` itself when it is
            already a record or has no recognizable shape
        """
        if isinstance(data, cls):
            return data
        if isinstance(data, Mapping):
            return cls._from_mapping(data)
        if isinstance(data, (list, tuple)):
            return [cls.construct(item) for item in data]
        return data

    @classmethod
    def _from_mapping(cls, data: Mapping) -> Any:
        known = {f.name for f in fields(cls) if f.init}
        values = {key: value for key, value in data.items() if key in known}
        return cls(**values)
