"""Prometheus exposition format rendering"""
import math
from decimal import Decimal
from typing import Dict, Iterable, Optional, Union
from ..models import MetricValue


BLOCK_SEPARATOR = "\n\n"


def format_labels(labels: Optional[Dict[str, str]]) -> str:
    """Render a label set as {k="v",...}, or nothing when empty"""
    if not labels:
        return ""
    label_pairs = [f'{k}="{v}"' for k, v in labels.items()]
    return "{" + ",".join(label_pairs) + "}"


def format_value(value: Union[float, int]) -> str:
    """Render a sample value as its shortest decimal form.

    Integral floats drop the trailing ".0" so 3.0 renders as "3".
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")

    mantissa, exponent = text.split("e")
    exponent = int(exponent)
    return f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


def metric_to_prometheus(metric: MetricValue, labels: Optional[Dict[str, str]] = None) -> str:
    """Render one metric as a HELP/TYPE/sample block"""
    if labels is None:
        labels = metric.labels
    lines = [
        f"# HELP {metric.name} {metric.help_text}",
        f"# TYPE {metric.name} {metric.metric_type.value}",
        f"{metric.name}{format_labels(labels)} {format_value(metric.value)}",
    ]
    return "\n".join(lines)


class PrometheusExporter:
    """Export metrics in Prometheus format"""

    def export_metrics(self, metrics: Iterable[MetricValue]) -> str:
        """Render metrics as blank-line separated blocks, in the given order"""
        return BLOCK_SEPARATOR.join(metric_to_prometheus(metric) for metric in metrics)
