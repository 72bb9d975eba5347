"""Cluster domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Cluster:
    """A group of stations merged into one marker for a single query.

    Members are station handles (positions in the loaded dataset).
    """

    members: tuple[int, ...]
    centroid: tuple[float, float]

    @property
    def count(self) -> int:
        return len(self.members)
