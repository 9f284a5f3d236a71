"""
Health check response model.
Liveness payload returned by the health endpoint.
"""
from datetime import datetime, timezone

from pydantic import BaseModel

SERVICE_NAME = "commu-api"
STATUS_UP = "UP"


def utc_timestamp(now: datetime = None) -> str:
    """ISO-8601 UTC instant with a trailing Z, fractional seconds only when non-zero"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    service: str

    @classmethod
    def up(cls, service: str = SERVICE_NAME) -> "HealthResponse":
        return cls(status=STATUS_UP, timestamp=utc_timestamp(), service=service)
