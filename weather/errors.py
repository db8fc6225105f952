"""Errors raised while turning a station feed into metrics"""


class ObservationError(Exception):
    """Base class for observation pipeline failures"""


class UpstreamInvalidError(ObservationError):
    """The feed marked the station observation as invalid"""

    def __init__(self, message: str, station: str = None):
        super().__init__(message)
        self.message = message
        self.station = station


class UpstreamUnreachableError(ObservationError):
    """The feed could not be fetched"""


class MalformedFeedError(ObservationError):
    """The feed body is not well-formed XML"""


class MissingFieldError(ObservationError):
    """A mandatory element is missing from the decoded feed"""

    def __init__(self, path: str):
        super().__init__(f"Missing expected field: {path}")
        self.path = path


class NonNumericValueError(ObservationError):
    """A metric value did not parse as a number"""

    def __init__(self, metric_name: str, raw_value):
        super().__init__(f"Non-numeric value for {metric_name}: {raw_value!r}")
        self.metric_name = metric_name
        self.raw_value = raw_value
