"""Tests for Prometheus exposition rendering"""
import math
import pytest

from metrics.exporters.prometheus import PrometheusExporter, format_labels, format_value, metric_to_prometheus
from metrics.extractor import MetricExtractor
from metrics.models import MetricType, MetricValue
from weather.compact import xml_to_compact


class TestFormatting:
    """Test label and value formatting"""

    def test_empty_labels(self):
        assert format_labels({}) == ""
        assert format_labels(None) == ""

    def test_labels_keep_order(self):
        assert format_labels({"station": "1475", "name": "Reykjavík"}) == '{station="1475",name="Reykjavík"}'

    @pytest.mark.parametrize("value,expected", [
        (5.2, "5.2"),
        (3.0, "3"),
        (-0.0, "0"),
        (68, "68"),
        (-4.25, "-4.25"),
        (0.00005, "0.00005"),
        (1e-7, "1e-7"),
        (1e21, "1e+21"),
        (123456789.5, "123456789.5"),
        (math.nan, "NaN"),
        (math.inf, "+Inf"),
        (-math.inf, "-Inf"),
    ])
    def test_format_value(self, value, expected):
        assert format_value(value) == expected


class TestMetricToPrometheus:
    """Test single metric rendering"""

    def setup_method(self):
        """Setup test fixtures"""
        self.metric = MetricValue(
            name="temperature",
            value=5.2,
            help_text="Temperature (degrees C)",
            metric_type=MetricType.GAUGE,
        )

    def test_block_without_labels(self):
        """Test an empty label set renders no braces"""
        assert metric_to_prometheus(self.metric) == (
            "# HELP temperature Temperature (degrees C)\n"
            "# TYPE temperature gauge\n"
            "temperature 5.2"
        )

    def test_block_with_labels(self):
        rendered = metric_to_prometheus(self.metric, {"station": "1475"})

        assert rendered.splitlines()[-1] == 'temperature{station="1475"} 5.2'

    def test_metric_labels_used_by_default(self):
        self.metric.labels = {"station": "1"}

        assert metric_to_prometheus(self.metric).endswith('temperature{station="1"} 5.2')

    def test_counter_type(self):
        metric = MetricValue(name="x_total", value=1, help_text="X", metric_type=MetricType.COUNTER)

        assert "# TYPE x_total counter" in metric_to_prometheus(metric)

    def test_nan_value(self):
        metric = MetricValue(name="wind_speed", value=math.nan, help_text="Wind speed (m/s)")

        assert metric_to_prometheus(metric).endswith("wind_speed NaN")


class TestPrometheusExporter:
    """Test full exposition output"""

    def setup_method(self):
        """Setup test fixtures"""
        self.exporter = PrometheusExporter()
        self.extractor = MetricExtractor()

    def test_reference_scenario(self, valid_feed, expected_exposition):
        """Test the rendered text for a complete valid feed"""
        metrics = self.extractor.extract(xml_to_compact(valid_feed))

        assert self.exporter.export_metrics(metrics) == expected_exposition

    def test_missing_gust_block(self, feed_builder):
        """Test a missing metric drops its whole block"""
        metrics = self.extractor.extract(xml_to_compact(feed_builder(F="3.0", FX="7.1", T="5.2")))

        content = self.exporter.export_metrics(metrics)

        assert "wind_speed_gust" not in content
        assert content.count("# HELP") == 3
        assert content.endswith("wind_speed_max 7.1")

    def test_no_metrics(self):
        assert self.exporter.export_metrics([]) == ""

    def test_rendering_is_deterministic(self, valid_feed):
        """Test repeated rendering is byte-identical"""
        outputs = {
            self.exporter.export_metrics(self.extractor.extract(xml_to_compact(valid_feed)))
            for _ in range(5)
        }

        assert len(outputs) == 1
