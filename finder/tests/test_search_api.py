# coding: utf-8

from fastapi.testclient import TestClient

from conftest import role_scope, scope

from finder_api.service.graph_client import GraphRequestError


def test_search_access_packages(client: TestClient, directory):
    """Test case for search_access_packages

    Find access packages that reference a resource
    """
    directory.add_package("ap-a", "Package A", [role_scope(scope("AadGroup", "g1", "Sales Group"), "Member")])
    directory.add_package("ap-b", "Package B", [])

    response = client.post("/api/search", json={"searchType": "group", "searchValue": "g1"})

    assert response.status_code == 200
    assert response.json() == {
        "results": [
            {
                "accessPackageName": "Package A",
                "accessPackageId": "ap-a",
                "resourceName": "Sales Group",
                "resourceType": "AadGroup",
                "resourceId": "g1",
                "roleName": "Member",
            }
        ],
        "searchType": "group",
        "searchValue": "g1",
        "partialFailures": [],
    }


def test_search_with_empty_body_is_rejected(client: TestClient, client_factory, directory):
    response = client.post("/api/search", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "Missing searchType or searchValue"}
    assert client_factory.created == 0
    assert directory.calls == []


def test_search_without_body_is_rejected(client: TestClient, client_factory):
    response = client.post("/api/search")

    assert response.status_code == 400
    assert client_factory.created == 0


def test_search_with_missing_value_is_rejected(client: TestClient, client_factory):
    response = client.post("/api/search", json={"searchType": "group", "searchValue": ""})

    assert response.status_code == 400
    assert client_factory.created == 0


def test_search_with_wrongly_typed_field_is_rejected(client: TestClient, client_factory):
    response = client.post("/api/search", json={"searchType": "group", "searchValue": 42})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"
    assert client_factory.created == 0


def test_search_with_unknown_type_returns_no_results(client: TestClient, directory):
    directory.add_package("ap-a", "Package A", [role_scope(scope("AadGroup", "g1"), "Member")])

    response = client.post("/api/search", json={"searchType": "device", "searchValue": "g1"})

    assert response.status_code == 200
    assert response.json()["results"] == []
    assert response.json()["searchType"] == "device"


def test_search_catalog_failure_returns_500(client: TestClient, directory):
    directory.catalog_error = GraphRequestError("Service unavailable")

    response = client.post("/api/search", json={"searchType": "group", "searchValue": "g1"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to search access packages",
        "details": "Service unavailable",
    }


def test_search_partial_failure_still_succeeds(client: TestClient, directory):
    directory.add_package("ap-a", "Package A", [role_scope(scope("AadApplication", "app-1", "Portal"), "User")])
    directory.add_package("ap-b", "Package B", [role_scope(scope("AadApplication", "app-1", "Portal"), "Admin")])
    directory.details["ap-b"] = GraphRequestError("Gateway timeout")

    response = client.post("/api/search", json={"searchType": "application", "searchValue": "app-1"})

    assert response.status_code == 200
    body = response.json()
    assert [record["accessPackageId"] for record in body["results"]] == ["ap-a"]
    assert body["partialFailures"] == [{"accessPackageId": "ap-b", "details": "Gateway timeout"}]
