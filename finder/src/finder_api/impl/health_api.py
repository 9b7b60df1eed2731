from __future__ import annotations

from finder_api.apis.health_api_base import BaseHealthApi
from finder_api.models.health_status import HealthStatus
from finder_api.service.health_service import HealthService

_service = HealthService()


class HealthApiImpl(BaseHealthApi):
    async def get_health(self) -> HealthStatus:
        return await _service.get_health()
