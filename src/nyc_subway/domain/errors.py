"""Errors raised while answering station queries."""


class StationQueryError(Exception):
    """Base class for errors that fail a single viewport query."""


class MalformedInputError(StationQueryError, ValueError):
    """The viewport descriptor could not be parsed."""

    def __init__(self, component: str, reason: str) -> None:
        self.component = component
        self.reason = reason
        super().__init__(f"invalid {component}: {reason}")


class InvalidParameterError(StationQueryError, ValueError):
    """A zoom level or clustering parameter is outside its domain."""

    def __init__(self, parameter: str, value: object, reason: str) -> None:
        self.parameter = parameter
        self.value = value
        super().__init__(f"invalid {parameter}={value!r}: {reason}")


class MissingMetadataError(StationQueryError):
    """A station lacks a property needed to render it."""

    def __init__(self, station_handle: int, field_name: str) -> None:
        self.station_handle = station_handle
        self.field_name = field_name
        super().__init__(f"station #{station_handle} has no '{field_name}' property")


class StationDataError(Exception):
    """The static station dataset could not be loaded."""
