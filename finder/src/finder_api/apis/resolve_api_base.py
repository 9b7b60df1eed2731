# coding: utf-8

from typing import ClassVar, Dict, List, Tuple  # noqa: F401

from typing import Optional, Union
from finder_api.models.application_candidates import ApplicationCandidates
from finder_api.models.application_ref import ApplicationRef
from finder_api.models.group_ref import GroupRef
from finder_api.models.resolve_application_request import ResolveApplicationRequest
from finder_api.models.resolve_group_request import ResolveGroupRequest


class BaseResolveApi:
    subclasses: ClassVar[Tuple] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        BaseResolveApi.subclasses = BaseResolveApi.subclasses + (cls,)
    async def resolve_group(
        self,
        resolve_group_request: Optional[ResolveGroupRequest],
    ) -> GroupRef:
        ...


    async def resolve_application(
        self,
        resolve_application_request: Optional[ResolveApplicationRequest],
    ) -> Union[ApplicationRef, ApplicationCandidates]:
        ...
