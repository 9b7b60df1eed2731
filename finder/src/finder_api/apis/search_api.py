# coding: utf-8

from typing import Dict, List  # noqa: F401
import importlib
import pkgutil

from finder_api.apis.search_api_base import BaseSearchApi
import finder_api.impl

from fastapi import (  # noqa: F401
    APIRouter,
    Body,
    HTTPException,
    Request,
    status,
)

from typing import Optional
from finder_api.http.disconnect import cancel_on_disconnect
from finder_api.models.error import Error
from finder_api.models.search_request import SearchRequest
from finder_api.models.search_response import SearchResponse


router = APIRouter()

ns_pkg = finder_api.impl
for _, name, _ in pkgutil.iter_modules(ns_pkg.__path__, ns_pkg.__name__ + "."):
    importlib.import_module(name)


@router.post(
    "/api/search",
    responses={
        200: {"model": SearchResponse, "description": "OK"},
        400: {"model": Error, "description": "Missing searchType or searchValue"},
        500: {"model": Error, "description": "Directory service failure"},
    },
    tags=["Search"],
    summary="Find access packages that reference a resource",
    response_model_by_alias=True,
)
async def search_access_packages(
    request: Request,
    search_request: Optional[SearchRequest] = Body(None, description=""),
) -> SearchResponse:
    if not BaseSearchApi.subclasses:
        raise HTTPException(status_code=500, detail="Not implemented")
    return await cancel_on_disconnect(
        request,
        BaseSearchApi.subclasses[0]().search_access_packages(search_request),
    )
