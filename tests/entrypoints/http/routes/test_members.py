"""
Test suite for the /v1/members routes.

Routes are exercised through TestClient with use cases injected via
dependency overrides, either as mocks or wired to the in-memory repository:
- Query parameters are parsed, validated and mapped to domain requests
- Domain errors surface as structured JSON with the right status code
- Responses carry members plus pagination metadata
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from member_search.adapters.in_memory_member_repository import InMemoryMemberRepository
from member_search.domain.errors import QueryExecutionError
from member_search.domain.member import Member, MemberSearchCondition, Team
from member_search.domain.paging import Page, Paging, SortDirection, SortOrder
from member_search.entrypoints.http.dependencies import (
    get_delete_older_members_use_case,
    get_get_member_by_id_use_case,
    get_rename_younger_members_use_case,
    get_search_member_page_use_case,
    get_search_member_teams_use_case,
    get_shift_member_ages_use_case,
)
from member_search.entrypoints.http.exception_handlers import register_exception_handlers
from member_search.entrypoints.http.routes.members import router
from member_search.use_cases.bulk_member_updates import (
    BulkUpdateResponse,
    DeleteOlderMembers,
    RenameYoungerMembers,
    ShiftMemberAges,
)
from member_search.use_cases.get_member_by_id import GetMemberById
from member_search.use_cases.search_member_page import (
    SearchMemberPage,
    SearchMemberPageRequest,
    SearchMemberPageResponse,
)
from member_search.use_cases.search_member_teams import SearchMemberTeams


@pytest.fixture
def repository() -> InMemoryMemberRepository:
    team_a = Team(id=1, name="teamA")
    team_b = Team(id=2, name="teamB")
    return InMemoryMemberRepository(
        [
            Member(id=1, username="member1", age=10, team=team_a),
            Member(id=2, username="member2", age=20, team=team_a),
            Member(id=3, username="member3", age=30, team=team_b),
            Member(id=4, username="member4", age=40, team=team_b),
            Member(id=5, username=None, age=50),
        ]
    )


@pytest.fixture
def app(repository: InMemoryMemberRepository) -> FastAPI:
    """Test app with the members router, wired to the in-memory repository."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")

    overrides = {
        get_search_member_page_use_case: lambda: SearchMemberPage(repository),
        get_search_member_teams_use_case: lambda: SearchMemberTeams(repository),
        get_get_member_by_id_use_case: lambda: GetMemberById(repository),
        get_rename_younger_members_use_case: lambda: RenameYoungerMembers(repository),
        get_shift_member_ages_use_case: lambda: ShiftMemberAges(repository),
        get_delete_older_members_use_case: lambda: DeleteOlderMembers(repository),
    }
    test_app.dependency_overrides.update(overrides)
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


def _usernames(response_json: dict) -> list[str | None]:
    return [m["username"] for m in response_json["members"]]


# ==============================================================================
# GET /v1/members - Happy Path
# ==============================================================================


def test_get_members_without_filters(client: TestClient) -> None:
    """All members are returned with pagination metadata."""
    response = client.get("/v1/members")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 5
    assert data["offset"] == 0
    assert data["limit"] == 20
    assert data["has_next"] is False
    assert data["members"][0] == {
        "id": 1,
        "username": "member1",
        "age": 10,
        "team_id": 1,
        "team_name": "teamA",
    }
    assert data["members"][4]["team_id"] is None


def test_get_members_with_all_filters(client: TestClient) -> None:
    response = client.get(
        "/v1/members",
        params={"username": "member1", "team_name": "teamA", "age_goe": 10, "age_loe": 20},
    )

    assert response.status_code == 200
    assert _usernames(response.json()) == ["member1"]
    assert response.json()["total"] == 1


def test_get_members_blank_filters_are_ignored(client: TestClient) -> None:
    response = client.get("/v1/members", params={"username": "", "team_name": " "})

    assert response.status_code == 200
    assert response.json()["total"] == 5


def test_get_members_paginates(client: TestClient) -> None:
    response = client.get("/v1/members", params={"age_goe": 20, "offset": 0, "limit": 2})

    data = response.json()
    assert _usernames(data) == ["member2", "member3"]
    assert data["total"] == 4
    assert data["has_next"] is True


def test_get_members_sorts(client: TestClient) -> None:
    response = client.get("/v1/members", params={"team_name": "teamB", "sort": "age:desc"})

    assert _usernames(response.json()) == ["member4", "member3"]


def test_get_members_sort_puts_nulls_last(client: TestClient) -> None:
    response = client.get("/v1/members", params={"sort": "username:desc"})

    assert _usernames(response.json())[-1] is None


def test_get_members_maps_query_to_domain_request() -> None:
    """Query parameters reach the use case as a domain request."""
    mock_use_case = Mock()
    mock_use_case.execute.return_value = SearchMemberPageResponse(
        page=Page(content=[], total=0, offset=5, limit=10)
    )
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_search_member_page_use_case] = lambda: mock_use_case

    TestClient(test_app).get(
        "/v1/members",
        params={"team_name": "teamA", "offset": 5, "limit": 10, "sort": "age:desc,username"},
    )

    mock_use_case.execute.assert_called_once_with(
        SearchMemberPageRequest(
            condition=MemberSearchCondition(team_name="teamA"),
            paging=Paging(
                offset=5,
                limit=10,
                sort=(SortOrder("age", SortDirection.DESC), SortOrder("username")),
            ),
        )
    )


# ==============================================================================
# GET /v1/members - Validation
# ==============================================================================


@pytest.mark.parametrize(
    "params",
    [
        {"age_goe": "abc"},
        {"age_goe": -1},
        {"offset": -1},
        {"limit": 0},
        {"limit": 500},
        {"sort": "age:sideways"},
    ],
)
def test_get_members_rejects_invalid_query(client: TestClient, params: dict) -> None:
    response = client.get("/v1/members", params=params)

    assert response.status_code == 422


def test_get_members_rejects_inverted_age_range(client: TestClient) -> None:
    response = client.get("/v1/members", params={"age_goe": 40, "age_loe": 10})

    assert response.status_code == 422
    assert response.json() == {
        "detail": "age_goe cannot be greater than age_loe",
        "code": "VALIDATION_ERROR",
    }


def test_get_members_rejects_unknown_sort_field(client: TestClient) -> None:
    response = client.get("/v1/members", params={"sort": "password"})

    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert data["errors"][0]["code"] == "INVALID_SORT_FIELD"


def test_get_members_hides_storage_failures(app: FastAPI, client: TestClient) -> None:
    mock_use_case = Mock()
    mock_use_case.execute.side_effect = QueryExecutionError("Member query failed")
    app.dependency_overrides[get_search_member_page_use_case] = lambda: mock_use_case

    response = client.get("/v1/members")

    assert response.status_code == 500
    assert response.json() == {
        "detail": "An unexpected error occurred",
        "code": "INTERNAL_ERROR",
    }


# ==============================================================================
# GET /v1/members/search
# ==============================================================================


def test_search_member_teams(client: TestClient) -> None:
    response = client.get("/v1/members/search", params={"team_name": "teamB"})

    assert response.status_code == 200
    assert response.json() == {
        "members": [
            {"member_id": 3, "username": "member3", "age": 30, "team_id": 2, "team_name": "teamB"},
            {"member_id": 4, "username": "member4", "age": 40, "team_id": 2, "team_name": "teamB"},
        ]
    }


def test_search_member_teams_is_not_paged(client: TestClient) -> None:
    response = client.get("/v1/members/search")

    assert len(response.json()["members"]) == 5


# ==============================================================================
# GET /v1/members/{member_id}
# ==============================================================================


def test_get_member_by_id(client: TestClient) -> None:
    response = client.get("/v1/members/3")

    assert response.status_code == 200
    assert response.json() == {
        "id": 3,
        "username": "member3",
        "age": 30,
        "team_id": 2,
        "team_name": "teamB",
    }


def test_get_member_by_id_not_found(client: TestClient) -> None:
    response = client.get("/v1/members/42")

    assert response.status_code == 404
    assert response.json() == {
        "detail": "Member with identifier '42' not found",
        "code": "NOT_FOUND",
    }


def test_get_member_by_id_rejects_non_integer(client: TestClient) -> None:
    response = client.get("/v1/members/abc")

    assert response.status_code == 422


def test_get_member_by_id_rejects_zero(client: TestClient) -> None:
    response = client.get("/v1/members/0")

    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "INVALID_ID"


# ==============================================================================
# POST /v1/members/bulk/*
# ==============================================================================


def test_bulk_rename(client: TestClient, repository: InMemoryMemberRepository) -> None:
    response = client.post("/v1/members/bulk/rename", json={"age_lt": 25, "username": "junior"})

    assert response.status_code == 200
    assert response.json() == {"affected": 2}
    assert [m.username for m in repository.find_by_username("junior")] == ["junior", "junior"]


def test_bulk_rename_rejects_blank_username(client: TestClient) -> None:
    response = client.post("/v1/members/bulk/rename", json={"age_lt": 25, "username": "  "})

    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "BLANK_VALUE"


def test_bulk_shift_age(client: TestClient, repository: InMemoryMemberRepository) -> None:
    response = client.post("/v1/members/bulk/shift-age", json={"delta": 1})

    assert response.json() == {"affected": 5}
    assert [m.age for m in repository.find_all()] == [11, 21, 31, 41, 51]


def test_bulk_shift_age_rejects_zero(client: TestClient) -> None:
    response = client.post("/v1/members/bulk/shift-age", json={"delta": 0})

    assert response.status_code == 422


def test_bulk_delete(client: TestClient, repository: InMemoryMemberRepository) -> None:
    response = client.post("/v1/members/bulk/delete", json={"age_gt": 35})

    assert response.json() == {"affected": 2}
    assert [m.id for m in repository.find_all()] == [1, 2, 3]


def test_bulk_delete_rejects_missing_body_field(client: TestClient) -> None:
    response = client.post("/v1/members/bulk/delete", json={})

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_bulk_route_returns_use_case_result(app: FastAPI, client: TestClient) -> None:
    mock_use_case = Mock()
    mock_use_case.execute.return_value = BulkUpdateResponse(affected=7)
    app.dependency_overrides[get_delete_older_members_use_case] = lambda: mock_use_case

    response = client.post("/v1/members/bulk/delete", json={"age_gt": 1})

    assert response.json() == {"affected": 7}
