"""Metric data models"""
from dataclasses import dataclass, field
from typing import Dict, Tuple
from enum import Enum


class MetricType(Enum):
    """Prometheus metric types"""
    COUNTER = "counter"
    GAUGE = "gauge"


class NumericFormat(Enum):
    """How a raw feed value is coerced to a number"""
    FLOAT = "float"
    INT = "int"


@dataclass(frozen=True)
class MetricDefinition:
    """Where to find a metric in a decoded observation document"""
    name: str
    help_text: str
    metric_type: MetricType
    path: str
    numeric_format: NumericFormat = NumericFormat.FLOAT


@dataclass
class MetricValue:
    """Represents a single metric value"""
    name: str
    value: float
    help_text: str
    metric_type: MetricType = MetricType.GAUGE
    labels: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Ensure labels is never None
        if self.labels is None:
            self.labels = {}

    @classmethod
    def from_definition(cls, definition: MetricDefinition, value: float) -> "MetricValue":
        return cls(
            name=definition.name,
            value=value,
            help_text=definition.help_text,
            metric_type=definition.metric_type,
        )


METRIC_DEFINITIONS: Tuple[MetricDefinition, ...] = (
    MetricDefinition(
        name="temperature",
        help_text="Temperature (degrees C)",
        metric_type=MetricType.GAUGE,
        path="observations.station.T._text",
        numeric_format=NumericFormat.FLOAT,
    ),
    MetricDefinition(
        name="wind_speed",
        help_text="Wind speed (m/s)",
        metric_type=MetricType.GAUGE,
        path="observations.station.F._text",
        numeric_format=NumericFormat.FLOAT,
    ),
    MetricDefinition(
        name="wind_speed_max",
        help_text="Max wind speed (m/s)",
        metric_type=MetricType.GAUGE,
        path="observations.station.FX._text",
        numeric_format=NumericFormat.FLOAT,
    ),
    MetricDefinition(
        name="wind_speed_gust",
        help_text="Wind speed gust (m/s)",
        metric_type=MetricType.GAUGE,
        path="observations.station.FG._text",
        numeric_format=NumericFormat.FLOAT,
    ),
)
