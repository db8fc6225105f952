"""Station validity handling for decoded observation documents"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional
from weather.compact import resolve_path
from weather.errors import MissingFieldError, UpstreamInvalidError

STATION_PATH = "observations.station"
ATTRIBUTES_PATH = STATION_PATH + "._attributes"
ERROR_TEXT_PATH = STATION_PATH + ".err._text"
TIME_TEXT_PATH = STATION_PATH + ".time._text"


@dataclass
class StationStatus:
    """Header information for one station in the feed"""
    valid: bool
    station_id: Optional[str] = None
    error: Optional[str] = None
    observed_at: Optional[datetime] = None


def read_station_status(document: Dict[str, Any]) -> StationStatus:
    """Read the validity flag and station header from a decoded feed.

    Raises MissingFieldError when the station attributes, or the error text
    of an invalid station, are absent.
    """
    attributes = resolve_path(document, ATTRIBUTES_PATH)
    if not isinstance(attributes, dict):
        raise MissingFieldError(ATTRIBUTES_PATH)

    valid = attributes.get("valid") == "1"
    status = StationStatus(valid=valid, station_id=attributes.get("id"))

    if not valid:
        error = resolve_path(document, ERROR_TEXT_PATH)
        if error is None:
            raise MissingFieldError(ERROR_TEXT_PATH)
        status.error = error if isinstance(error, str) else "".join(error)
        return status

    status.observed_at = _parse_time(resolve_path(document, TIME_TEXT_PATH))
    return status


def ensure_valid(document: Dict[str, Any], station: str = None) -> StationStatus:
    """Return the station status, raising UpstreamInvalidError if the feed marks it invalid"""
    status = read_station_status(document)
    if not status.valid:
        raise UpstreamInvalidError(status.error, station=station)
    return status


def _parse_time(value: Any) -> Optional[datetime]:
    if not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None
