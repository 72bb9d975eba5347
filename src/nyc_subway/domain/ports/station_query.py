"""Station query port."""

from typing import Protocol

from nyc_subway.domain.models.output_record import OutputRecord


class StationQuery(Protocol):
    """Port for answering viewport queries."""

    def query(self, viewport: str, zoom: int) -> list[OutputRecord]:
        """Return station and cluster records for a viewport at a zoom level."""
        ...
