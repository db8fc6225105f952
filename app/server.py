"""FastAPI server setup and routes"""
import time
from fastapi import FastAPI, Response
from config import Config
from weather.errors import UpstreamInvalidError
from weather.observations import ObservationExporter
from logging_config import get_logger
from middleware.security import SecurityHeadersMiddleware, RequestLoggingMiddleware


logger = get_logger(__name__)


class ObservationServer:
    """FastAPI server exposing station observations as Prometheus metrics"""

    def __init__(self, config: Config):
        self.config = config
        self.app = FastAPI(
            title="Weather Observations Exporter",
            version=config.service_version,
            docs_url=None,  # Disable docs for security
            redoc_url=None,  # Disable redoc for security
            openapi_url=None  # Disable OpenAPI schema for security
        )
        self.observations = ObservationExporter(config)
        self.start_time = time.time()

        self._setup_middleware()
        self._setup_routes()
        self._setup_events()

    def _setup_middleware(self):
        """Setup middleware"""
        # Add middleware in reverse order (last added is executed first)
        if self.config.enable_request_logging:
            self.app.add_middleware(RequestLoggingMiddleware)

        self.app.add_middleware(SecurityHeadersMiddleware)

    def _setup_routes(self):
        """Setup FastAPI routes"""

        @self.app.get('/api/observations/{station}', response_class=Response)
        async def get_observations(station: str):
            """Serve a station's latest observation in Prometheus format"""
            try:
                content = await self.observations.scrape(station)
            except UpstreamInvalidError as e:
                logger.warning(
                    "Upstream reported invalid observation",
                    station=station,
                    error=e.message,
                    event_type="upstream_invalid"
                )
                return Response(e.message, status_code=500, media_type='text/plain')

            return Response(content, media_type='text/plain')

        @self.app.get('/health')
        def health_check():
            """Health check endpoint"""
            return {
                "status": "healthy",
                "service": self.config.service_name,
                "version": self.config.service_version,
                "uptime_seconds": round(time.time() - self.start_time, 1)
            }

    def _setup_events(self):
        """Setup FastAPI startup/shutdown events"""

        @self.app.on_event("startup")
        async def startup_event():
            self.start_time = time.time()
            logger.info(
                "Application startup initiated",
                service_name=self.config.service_name,
                service_version=self.config.service_version,
                upstream_base_url=self.config.upstream_base_url,
                event_type="server_startup"
            )

        @self.app.on_event("shutdown")
        async def shutdown_event():
            logger.info("Shutting down observations exporter", event_type="server_shutdown")

    def get_app(self) -> FastAPI:
        """Get the FastAPI application"""
        return self.app
