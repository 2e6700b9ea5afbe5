"""Shared logging setup for the blog loader's entry points."""

import logging

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


class HealthCheckFilter(logging.Filter):
    """Filter out health check requests from uvicorn access logs."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Return False to suppress health check log entries."""
        return '/health' not in record.getMessage()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging and suppress health checks in uvicorn access logs.

    Loader progress is logged at INFO; per-blog and per-post detail at DEBUG.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT
    )
    access_logger = logging.getLogger('uvicorn.access')
    if not any(isinstance(f, HealthCheckFilter) for f in access_logger.filters):
        access_logger.addFilter(HealthCheckFilter())
