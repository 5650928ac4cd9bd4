"""Base class for all aggregates."""

import abc


class Aggregate(abc.ABC):
    """Generic base class for all aggregates.

    Aggregates are loaded whole from a store, mutated through their own methods
    and written back whole. The version is the one the aggregate was loaded at;
    stores compare it against what they hold before accepting a write.
    """

    def __init__(self, aggregate_id: str, version: int = 0) -> None:
        if version < 0:
            raise ValueError("version must be >= 0")
        self.aggregate_id: str = aggregate_id
        self._version: int = version

    @property
    def version(self) -> int:
        """The version of the aggregate as last loaded or stored."""
        return self._version
