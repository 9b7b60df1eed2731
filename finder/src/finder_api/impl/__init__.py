from .search_api import SearchApiImpl  # noqa: F401
from .resolve_api import ResolveApiImpl  # noqa: F401
from .health_api import HealthApiImpl  # noqa: F401
