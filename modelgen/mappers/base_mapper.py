"""
Abstract base mapper.

Every mapper implements ``map_record`` (single record) and ``map_many``
(batch).  Records and models are plain mappings; the record's position in
the batch is passed along because ``id`` may fall back to it.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

SourceT = TypeVar("SourceT")
TargetT = TypeVar("TargetT")


class BaseMapper(ABC, Generic[SourceT, TargetT]):
    """Contract that every model mapper must fulfil."""

    @abstractmethod
    def map_record(self, source: SourceT, index: int = 0) -> TargetT:
        """
        Transform a single source record into a target model.

        Args:
            source: The source record.
            index:  Position of the record in its batch.
        """
        ...

    def map_many(self, sources: Any) -> list[TargetT]:
        """
        Transform a batch of source records, preserving order.

        Non-list input yields an empty list.
        """
        if not isinstance(sources, (list, tuple)):
            return []
        return [self.map_record(s, i) for i, s in enumerate(sources)]
