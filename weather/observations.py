"""Station observation scraping: fetch, decode, validate, extract, render"""
import time
from typing import Iterable, List
from config import Config
from metrics.extractor import MetricExtractor
from metrics.exporters.prometheus import PrometheusExporter
from metrics.models import METRIC_DEFINITIONS, MetricDefinition, MetricValue
from logging_config import get_logger, log_observation_scrape
from weather.compact import xml_to_compact
from weather.feed import fetch_observation_xml
from weather.station import ensure_valid


logger = get_logger(__name__)


class ObservationExporter:
    """Produces Prometheus text for a single station per call"""

    def __init__(self, config: Config, definitions: Iterable[MetricDefinition] = METRIC_DEFINITIONS):
        self.config = config
        self.extractor = MetricExtractor(definitions, non_numeric_policy=config.non_numeric_policy)
        self.exporter = PrometheusExporter()

    async def collect(self, station: str) -> List[MetricValue]:
        """Fetch a station's feed and return its metrics.

        Raises UpstreamInvalidError when the feed marks the station invalid.
        Fetch, decode and structure errors propagate unchanged.
        """
        xml_text = await fetch_observation_xml(station, self.config)
        document = xml_to_compact(xml_text)
        status = ensure_valid(document, station=station)

        logger.debug(
            "Station observation is valid",
            station=station,
            station_id=status.station_id,
            observed_at=status.observed_at.isoformat() if status.observed_at else None,
            event_type="station_valid"
        )

        labels = {}
        if self.config.station_label:
            labels["station"] = status.station_id or station

        return self.extractor.extract(document, labels)

    async def scrape(self, station: str) -> str:
        """Collect and render a station's metrics as exposition text"""
        start_time = time.time()
        metrics = await self.collect(station)
        content = self.exporter.export_metrics(metrics)
        log_observation_scrape(logger, station, len(metrics), time.time() - start_time)
        return content
