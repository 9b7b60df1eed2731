import pytest

from finder_api.models.application_candidates import ApplicationCandidates
from finder_api.models.application_ref import ApplicationRef
from finder_api.service.errors import AmbiguousGroupError, DirectoryObjectNotFoundError, UpstreamError
from finder_api.service.graph_client import GraphUnauthorizedError
from finder_api.service.resolvers import ApplicationResolver, GroupResolver


@pytest.mark.asyncio
async def test_resolve_group_by_exact_name(directory, client_factory):
    directory.groups = [
        {"id": "g-alpha", "displayName": "Team Alpha"},
        {"id": "g-beta", "displayName": "Team Alpha Beta"},
    ]

    group = await GroupResolver(client_factory).resolve("Team Alpha")

    assert group.group_id == "g-alpha"
    assert group.display_name == "Team Alpha"
    assert directory.calls == [("list_groups_by_display_name", "Team Alpha")]


@pytest.mark.asyncio
async def test_resolve_group_not_found(directory, client_factory):
    with pytest.raises(DirectoryObjectNotFoundError):
        await GroupResolver(client_factory).resolve("Team Alpha")


@pytest.mark.asyncio
async def test_duplicate_group_names_pick_first_by_default(directory, client_factory):
    directory.groups = [
        {"id": "g-1", "displayName": "Team Alpha"},
        {"id": "g-2", "displayName": "Team Alpha"},
    ]

    group = await GroupResolver(client_factory, ambiguity="first").resolve("Team Alpha")

    assert group.group_id == "g-1"


@pytest.mark.asyncio
async def test_duplicate_group_names_can_be_rejected(directory, client_factory):
    directory.groups = [
        {"id": "g-1", "displayName": "Team Alpha"},
        {"id": "g-2", "displayName": "Team Alpha"},
    ]

    with pytest.raises(AmbiguousGroupError) as excinfo:
        await GroupResolver(client_factory, ambiguity="error").resolve("Team Alpha")

    assert [candidate.group_id for candidate in excinfo.value.candidates] == ["g-1", "g-2"]


@pytest.mark.asyncio
async def test_group_lookup_failure_is_upstream_error(directory, client_factory):
    directory.lookup_error = GraphUnauthorizedError("Insufficient privileges to complete the operation.")

    with pytest.raises(UpstreamError) as excinfo:
        await GroupResolver(client_factory).resolve("Team Alpha")

    assert excinfo.value.message == "Failed to resolve group"
    assert excinfo.value.details == "Insufficient privileges to complete the operation."


@pytest.mark.asyncio
async def test_resolve_single_application(directory, client_factory):
    directory.service_principals = [
        {"id": "sp-1", "displayName": "Contoso App", "appId": "app-1"},
        {"id": "sp-2", "displayName": "Fabrikam", "appId": "app-2"},
    ]

    result = await ApplicationResolver(client_factory).resolve("Contoso")

    assert isinstance(result, ApplicationRef)
    assert result.to_dict() == {"objectId": "sp-1", "displayName": "Contoso App", "appId": "app-1"}


@pytest.mark.asyncio
async def test_resolve_application_prefix_with_several_matches(directory, client_factory):
    directory.service_principals = [
        {"id": "sp-1", "displayName": "Contoso App", "appId": "app-1"},
        {"id": "sp-2", "displayName": "Contoso Portal", "appId": "app-2"},
    ]

    result = await ApplicationResolver(client_factory).resolve("Contoso")

    assert isinstance(result, ApplicationCandidates)
    assert result.multiple is True
    assert [app.object_id for app in result.applications] == ["sp-1", "sp-2"]


@pytest.mark.asyncio
async def test_resolve_application_not_found(directory, client_factory):
    directory.service_principals = [{"id": "sp-1", "displayName": "Fabrikam", "appId": "app-1"}]

    with pytest.raises(DirectoryObjectNotFoundError):
        await ApplicationResolver(client_factory).resolve("Contoso")


@pytest.mark.asyncio
async def test_application_without_display_name_passes_through(directory, client_factory):
    directory.service_principals = [{"id": "sp-1", "appId": "app-1"}]

    result = await ApplicationResolver(client_factory).resolve("")

    assert isinstance(result, ApplicationRef)
    assert result.to_dict() == {"objectId": "sp-1", "displayName": None, "appId": "app-1"}


@pytest.mark.asyncio
async def test_application_without_id_is_upstream_error(directory, client_factory):
    directory.service_principals = [{"displayName": "Contoso App", "appId": "app-1"}]

    with pytest.raises(UpstreamError) as excinfo:
        await ApplicationResolver(client_factory).resolve("Contoso")

    assert excinfo.value.message == "Failed to resolve application"
