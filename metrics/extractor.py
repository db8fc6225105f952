"""Extract metric values from a decoded observation document"""
import math
import re
from typing import Any, Dict, Iterable, List, Optional, Union
from metrics.models import METRIC_DEFINITIONS, MetricDefinition, MetricValue, NumericFormat
from logging_config import get_logger
from weather.compact import resolve_path
from weather.errors import NonNumericValueError


logger = get_logger(__name__)

# Leading-prefix parsing, as JavaScript's parseFloat/parseInt do it
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"[+-]?\d+")

NON_NUMERIC_POLICIES = ("passthrough", "drop", "error")


def coerce_number(raw: Any, numeric_format: NumericFormat) -> Union[float, int]:
    """Coerce a raw feed value to a number, yielding NaN when nothing parses"""
    if not isinstance(raw, str):
        return math.nan

    text = raw.lstrip()
    if numeric_format == NumericFormat.INT:
        match = _INT_PREFIX.match(text)
        return int(match.group(0)) if match else math.nan

    match = _FLOAT_PREFIX.match(text)
    return float(match.group(0)) if match else math.nan


def is_number(value: Union[float, int]) -> bool:
    return not (isinstance(value, float) and math.isnan(value))


class MetricExtractor:
    """Turns a decoded document into MetricValue records, in definition order"""

    def __init__(self, definitions: Iterable[MetricDefinition] = METRIC_DEFINITIONS, non_numeric_policy: str = "passthrough"):
        if non_numeric_policy not in NON_NUMERIC_POLICIES:
            raise ValueError(f"Unsupported non-numeric policy: {non_numeric_policy}")
        self.definitions = tuple(definitions)
        self.non_numeric_policy = non_numeric_policy

    def extract(self, document: Dict[str, Any], labels: Optional[Dict[str, str]] = None) -> List[MetricValue]:
        """Extract all resolvable metrics from the document"""
        metrics = []
        for definition in self.definitions:
            metric = self.extract_one(definition, document)
            if metric is None:
                continue
            if labels:
                metric.labels = dict(labels)
            metrics.append(metric)
        return metrics

    def extract_one(self, definition: MetricDefinition, document: Dict[str, Any]) -> Optional[MetricValue]:
        raw = resolve_path(document, definition.path)
        if raw is None:
            logger.debug("Metric path not present", metric=definition.name, path=definition.path)
            return None

        value = coerce_number(raw, definition.numeric_format)
        if not is_number(value):
            if self.non_numeric_policy == "error":
                raise NonNumericValueError(definition.name, raw)
            if self.non_numeric_policy == "drop":
                logger.warning(
                    "Dropping non-numeric metric value",
                    metric=definition.name,
                    raw_value=str(raw),
                    event_type="non_numeric_value"
                )
                return None

        return MetricValue.from_definition(definition, value)
