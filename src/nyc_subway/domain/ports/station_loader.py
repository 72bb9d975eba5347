"""Station loader port."""

from typing import Protocol

from nyc_subway.domain.models.station import Station


class StationLoader(Protocol):
    """Port for reading the static station dataset."""

    def load(self) -> list[Station]:
        """Load every station in dataset order."""
        ...
