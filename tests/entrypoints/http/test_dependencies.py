"""
Unit tests for FastAPI dependency injection functions.

Verifies the per-request wiring: get_db() yields a session from get_session(),
and every use case factory builds a fresh repository bound to that session.
"""

from __future__ import annotations

from types import GeneratorType
from unittest.mock import MagicMock, Mock, patch

import pytest

from member_search.adapters.postgres_member_repository import PostgresMemberRepository
from member_search.entrypoints.http.dependencies import (
    get_db,
    get_delete_older_members_use_case,
    get_get_member_by_id_use_case,
    get_rename_younger_members_use_case,
    get_search_member_page_use_case,
    get_search_member_teams_use_case,
    get_shift_member_ages_use_case,
    get_team_age_stats_use_case,
)
from member_search.use_cases.bulk_member_updates import (
    DeleteOlderMembers,
    RenameYoungerMembers,
    ShiftMemberAges,
)
from member_search.use_cases.get_member_by_id import GetMemberById
from member_search.use_cases.get_team_age_stats import GetTeamAgeStats
from member_search.use_cases.search_member_page import SearchMemberPage
from member_search.use_cases.search_member_teams import SearchMemberTeams

FACTORIES = [
    (get_search_member_page_use_case, SearchMemberPage),
    (get_search_member_teams_use_case, SearchMemberTeams),
    (get_get_member_by_id_use_case, GetMemberById),
    (get_team_age_stats_use_case, GetTeamAgeStats),
    (get_rename_younger_members_use_case, RenameYoungerMembers),
    (get_shift_member_ages_use_case, ShiftMemberAges),
    (get_delete_older_members_use_case, DeleteOlderMembers),
]


# ==============================================================================
# get_db() - Database Session Provider
# ==============================================================================


def test_get_db_yields_session_from_get_session() -> None:
    """get_db() yields a session from the get_session context manager."""
    mock_session = Mock()
    mock_context_manager = MagicMock()
    mock_context_manager.__enter__.return_value = mock_session
    mock_context_manager.__exit__.return_value = None

    with patch("member_search.entrypoints.http.dependencies.get_session") as mock_get_session:
        mock_get_session.return_value = mock_context_manager

        generator = get_db()
        session = next(generator)

        mock_get_session.assert_called_once()
        assert session is mock_session

        with pytest.raises(StopIteration):
            next(generator)

        mock_context_manager.__exit__.assert_called_once()


def test_get_db_is_generator() -> None:
    """get_db() is a generator function (required for FastAPI dependency)."""
    with patch("member_search.entrypoints.http.dependencies.get_session"):
        assert isinstance(get_db(), GeneratorType)


def test_get_db_exits_context_on_exception() -> None:
    """The session context is exited even when the request fails."""
    mock_context_manager = MagicMock()
    mock_context_manager.__enter__.return_value = Mock()
    mock_context_manager.__exit__.return_value = None

    with patch("member_search.entrypoints.http.dependencies.get_session") as mock_get_session:
        mock_get_session.return_value = mock_context_manager

        generator = get_db()
        next(generator)

        with pytest.raises(RuntimeError):
            generator.throw(RuntimeError("Simulated error during request"))

        mock_context_manager.__exit__.assert_called_once()


# ==============================================================================
# Use case factories
# ==============================================================================


@pytest.mark.parametrize(("factory", "use_case_type"), FACTORIES)
def test_factory_wires_session_into_repository(factory, use_case_type) -> None:
    """Session → PostgresMemberRepository → use case."""
    mock_session = Mock()

    use_case = factory(db=mock_session)

    assert isinstance(use_case, use_case_type)
    repository = use_case._member_repository
    assert isinstance(repository, PostgresMemberRepository)
    assert repository._session is mock_session


@pytest.mark.parametrize(("factory", "use_case_type"), FACTORIES)
def test_factory_creates_fresh_instances(factory, use_case_type) -> None:
    """Each request gets its own use case and repository."""
    use_case_1 = factory(db=Mock())
    use_case_2 = factory(db=Mock())

    assert use_case_1 is not use_case_2
    assert use_case_1._member_repository is not use_case_2._member_repository


def test_dependencies_are_not_cached() -> None:
    """Dependencies are not cached with @lru_cache (per-request instances)."""
    assert not hasattr(get_db, "__wrapped__")
    for factory, _ in FACTORIES:
        assert not hasattr(factory, "__wrapped__")
