from __future__ import annotations

from finder_api.apis.search_api_base import BaseSearchApi
from finder_api.http.errors import bad_request, internal_error
from finder_api.models.search_request import SearchRequest
from finder_api.models.search_response import SearchResponse
from finder_api.service.errors import UpstreamError
from finder_api.service.facade import get_finder_service_facade
from finder_api.service.matcher import SearchCriterion


class SearchApiImpl(BaseSearchApi):
    async def search_access_packages(self, search_request: SearchRequest | None) -> SearchResponse:
        if search_request is None or not search_request.search_type or not search_request.search_value:
            raise bad_request("Missing searchType or searchValue")
        criterion = SearchCriterion(
            search_type=search_request.search_type,
            search_value=search_request.search_value,
        )
        try:
            outcome = await get_finder_service_facade().matcher.search(criterion)
        except UpstreamError as exc:
            raise internal_error(exc.message, details=exc.details) from exc
        return SearchResponse(
            results=outcome.records,
            search_type=criterion.search_type,
            search_value=criterion.search_value,
            partial_failures=outcome.partial_failures,
        )
