"""Health-check payload for the API."""

from deposit_calculator import __version__
from deposit_calculator.schemas.health import HealthResponse


def get_health() -> HealthResponse:
    """Report that the service is up and which version is running."""
    return HealthResponse(status="ok", version=__version__)
