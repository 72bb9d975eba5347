"""Output record domain model."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

RecordKind = Literal["station", "cluster"]


class OutputRecord(BaseModel):
    """A point to render on the map, either a single station or a cluster marker."""

    model_config = ConfigDict(frozen=True)

    kind: RecordKind
    longitude: float
    latitude: float
    title: str
    description: str
    properties: dict[str, Any] = Field(default_factory=dict)
