# coding: utf-8

from typing import Dict, List  # noqa: F401
import importlib
import pkgutil

from finder_api.apis.resolve_api_base import BaseResolveApi
import finder_api.impl

from fastapi import (  # noqa: F401
    APIRouter,
    Body,
    HTTPException,
    status,
)

from typing import Optional, Union
from finder_api.models.application_candidates import ApplicationCandidates
from finder_api.models.application_ref import ApplicationRef
from finder_api.models.error import Error
from finder_api.models.group_ref import GroupRef
from finder_api.models.resolve_application_request import ResolveApplicationRequest
from finder_api.models.resolve_group_request import ResolveGroupRequest


router = APIRouter()

ns_pkg = finder_api.impl
for _, name, _ in pkgutil.iter_modules(ns_pkg.__path__, ns_pkg.__name__ + "."):
    importlib.import_module(name)


@router.post(
    "/api/resolveGroup",
    responses={
        200: {"model": GroupRef, "description": "OK"},
        400: {"model": Error, "description": "Missing groupName"},
        404: {"model": Error, "description": "Group not found"},
        409: {"model": Error, "description": "Several groups share the display name"},
        500: {"model": Error, "description": "Directory service failure"},
    },
    tags=["Resolve"],
    summary="Resolve a group display name to its object id",
    response_model_by_alias=True,
)
async def resolve_group(
    resolve_group_request: Optional[ResolveGroupRequest] = Body(None, description=""),
) -> GroupRef:
    if not BaseResolveApi.subclasses:
        raise HTTPException(status_code=500, detail="Not implemented")
    return await BaseResolveApi.subclasses[0]().resolve_group(resolve_group_request)


@router.post(
    "/api/resolveApplication",
    responses={
        400: {"model": Error, "description": "Missing applicationName"},
        404: {"model": Error, "description": "Application not found"},
        500: {"model": Error, "description": "Directory service failure"},
    },
    tags=["Resolve"],
    summary="Resolve a service principal display name prefix",
    response_model_by_alias=True,
)
async def resolve_application(
    resolve_application_request: Optional[ResolveApplicationRequest] = Body(None, description=""),
) -> Union[ApplicationRef, ApplicationCandidates]:
    if not BaseResolveApi.subclasses:
        raise HTTPException(status_code=500, detail="Not implemented")
    return await BaseResolveApi.subclasses[0]().resolve_application(resolve_application_request)
