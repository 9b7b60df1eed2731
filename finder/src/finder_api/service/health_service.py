"""Health payload for the finder API."""

from __future__ import annotations

from finder_api.config.settings import environment_label
from finder_api.models.health_status import HealthStatus


class HealthService:
    async def get_health(self) -> HealthStatus:
        return HealthStatus(status="healthy", environment=environment_label())
