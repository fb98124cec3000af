"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Only stateless singletons should use lru_cache.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from member_search.adapters.postgres_member_repository import PostgresMemberRepository
from member_search.infra.db.session import get_session
from member_search.use_cases.bulk_member_updates import (
    DeleteOlderMembers,
    RenameYoungerMembers,
    ShiftMemberAges,
)
from member_search.use_cases.get_member_by_id import GetMemberById
from member_search.use_cases.get_team_age_stats import GetTeamAgeStats
from member_search.use_cases.search_member_page import SearchMemberPage
from member_search.use_cases.search_member_teams import SearchMemberTeams


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    FastAPI will:
    1. Call this function when a request starts
    2. Inject the session into the route
    3. Commit/rollback and close the session when the request ends

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_search_member_page_use_case(db: Session = Depends(get_db)) -> SearchMemberPage:
    """
    Factory function that returns a configured SearchMemberPage use case.

    Called per-request, so each request gets a fresh repository bound to
    its own session.

    Args:
        db: Database session (injected by FastAPI via Depends(get_db))

    Returns:
        SearchMemberPage: Configured use case instance
    """
    repository = PostgresMemberRepository(session=db)
    return SearchMemberPage(member_repository=repository)


def get_search_member_teams_use_case(db: Session = Depends(get_db)) -> SearchMemberTeams:
    repository = PostgresMemberRepository(session=db)
    return SearchMemberTeams(member_repository=repository)


def get_get_member_by_id_use_case(db: Session = Depends(get_db)) -> GetMemberById:
    repository = PostgresMemberRepository(session=db)
    return GetMemberById(member_repository=repository)


def get_team_age_stats_use_case(db: Session = Depends(get_db)) -> GetTeamAgeStats:
    repository = PostgresMemberRepository(session=db)
    return GetTeamAgeStats(member_repository=repository)


def get_rename_younger_members_use_case(
    db: Session = Depends(get_db),
) -> RenameYoungerMembers:
    repository = PostgresMemberRepository(session=db)
    return RenameYoungerMembers(member_repository=repository)


def get_shift_member_ages_use_case(db: Session = Depends(get_db)) -> ShiftMemberAges:
    repository = PostgresMemberRepository(session=db)
    return ShiftMemberAges(member_repository=repository)


def get_delete_older_members_use_case(db: Session = Depends(get_db)) -> DeleteOlderMembers:
    repository = PostgresMemberRepository(session=db)
    return DeleteOlderMembers(member_repository=repository)
