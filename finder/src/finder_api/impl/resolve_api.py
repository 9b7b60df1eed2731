from __future__ import annotations

from finder_api.apis.resolve_api_base import BaseResolveApi
from finder_api.http.errors import bad_request, conflict, internal_error, not_found
from finder_api.models.application_candidates import ApplicationCandidates
from finder_api.models.application_ref import ApplicationRef
from finder_api.models.group_ref import GroupRef
from finder_api.models.resolve_application_request import ResolveApplicationRequest
from finder_api.models.resolve_group_request import ResolveGroupRequest
from finder_api.service.errors import AmbiguousGroupError, DirectoryObjectNotFoundError, UpstreamError
from finder_api.service.facade import get_finder_service_facade


class ResolveApiImpl(BaseResolveApi):
    async def resolve_group(self, resolve_group_request: ResolveGroupRequest | None) -> GroupRef:
        if resolve_group_request is None or not resolve_group_request.group_name:
            raise bad_request("Missing groupName")
        try:
            return await get_finder_service_facade().groups.resolve(resolve_group_request.group_name)
        except DirectoryObjectNotFoundError as exc:
            raise not_found(str(exc)) from exc
        except AmbiguousGroupError as exc:
            raise conflict(
                str(exc),
                details=[candidate.to_dict() for candidate in exc.candidates],
            ) from exc
        except UpstreamError as exc:
            raise internal_error(exc.message, details=exc.details) from exc

    async def resolve_application(
        self,
        resolve_application_request: ResolveApplicationRequest | None,
    ) -> ApplicationRef | ApplicationCandidates:
        if resolve_application_request is None or not resolve_application_request.application_name:
            raise bad_request("Missing applicationName")
        try:
            return await get_finder_service_facade().applications.resolve(
                resolve_application_request.application_name
            )
        except DirectoryObjectNotFoundError as exc:
            raise not_found(str(exc)) from exc
        except UpstreamError as exc:
            raise internal_error(exc.message, details=exc.details) from exc
