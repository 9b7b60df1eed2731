# coding: utf-8

from typing import ClassVar, Dict, List, Tuple  # noqa: F401

from typing import Optional
from finder_api.models.search_request import SearchRequest
from finder_api.models.search_response import SearchResponse


class BaseSearchApi:
    subclasses: ClassVar[Tuple] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        BaseSearchApi.subclasses = BaseSearchApi.subclasses + (cls,)
    async def search_access_packages(
        self,
        search_request: Optional[SearchRequest],
    ) -> SearchResponse:
        ...
