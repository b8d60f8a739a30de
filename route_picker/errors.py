"""Error types raised by route_picker. All derive from RoutePickerError."""

from typing import Optional


class RoutePickerError(Exception):
    """Base class for route_picker errors."""


class InvalidInput(RoutePickerError, ValueError):
    """Bad caller input: non-positive or non-finite distance, empty bearing set, unknown mode."""


class NotFound(RoutePickerError, LookupError):
    """Nothing to return: empty node map, or no path between two nodes."""


class NoRouteFound(RoutePickerError):
    """Routing engine answered but gave no usable route geometry."""


class DecodeError(RoutePickerError, ValueError):
    """Malformed polyline payload."""


class UpstreamFailure(RoutePickerError):
    """External provider returned a non-success status or the request failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CandidateBatchError(RoutePickerError):
    """A candidate batch failed. The underlying error is chained as __cause__."""

    def __init__(self, message: str, bearing: Optional[float] = None):
        super().__init__(message)
        self.bearing = bearing
