from typing import Literal

from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    """Service liveness with the state of the data store."""

    version: str
    status: Literal["ok", "degraded"]
    timestamp: str
    database: Literal["connected", "unavailable"]
