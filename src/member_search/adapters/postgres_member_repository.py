"""PostgreSQL implementation of MemberRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, contains_eager

from member_search.domain.errors import QueryExecutionError
from member_search.domain.member import (
    Member,
    MemberSearchCondition,
    MemberTeam,
    Team,
    TeamAgeStats,
    has_text,
)
from member_search.domain.paging import Page, Paging, SortOrder, build_page
from member_search.infra.db.models.member import MemberRow, TeamRow
from member_search.ports.member_repository import MemberRepository

if TYPE_CHECKING:
    from sqlalchemy.engine import Result
    from sqlalchemy.sql import ColumnElement, Executable, Select

logger = logging.getLogger(__name__)

_SORT_COLUMNS: dict[str, Any] = {
    "id": MemberRow.id,
    "username": MemberRow.username,
    "age": MemberRow.age,
    "team_name": TeamRow.name,
}


class PostgresMemberRepository(MemberRepository):
    """
    PostgreSQL implementation of MemberRepository.

    - Uses SQLAlchemy ORM for database access
    - Members are LEFT OUTER JOINed to teams, so members without a team still match
    - Search predicates become SQL WHERE clauses; absent fields add none
    - Converts MemberRow/TeamRow (infrastructure) to Member/Team (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def get_by_id(self, member_id: int) -> Member | None:
        query = self._member_query().where(MemberRow.id == member_id)
        row = self._execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def find_all(self) -> list[Member]:
        query = self._member_query().order_by(MemberRow.id)
        return [self._to_domain(row) for row in self._execute(query).scalars().all()]

    def find_by_username(self, username: str) -> list[Member]:
        query = (
            self._member_query()
            .where(MemberRow.username == username)
            .order_by(MemberRow.id)
        )
        return [self._to_domain(row) for row in self._execute(query).scalars().all()]

    def search(self, condition: MemberSearchCondition) -> list[MemberTeam]:
        query = (
            select(
                MemberRow.id.label("member_id"),
                MemberRow.username,
                MemberRow.age,
                TeamRow.id.label("team_id"),
                TeamRow.name.label("team_name"),
            )
            .select_from(MemberRow)
            .outerjoin(MemberRow.team)
            .where(*self._predicates(condition))
            .order_by(MemberRow.id)
        )

        return [
            MemberTeam(
                member_id=row.member_id,
                username=row.username,
                age=row.age,
                team_id=row.team_id,
                team_name=row.team_name,
            )
            for row in self._execute(query).all()
        ]

    def search_page(self, condition: MemberSearchCondition, paging: Paging) -> Page[Member]:
        """
        Search members with paging and an optimized count.

        Executes up to two queries:
        1. SELECT members LEFT JOIN teams with OFFSET/LIMIT for the content
        2. SELECT COUNT(members.id) with the same predicates, only when the
           content does not already reveal the total

        Args:
            condition: Search condition (AND semantics) - must be pre-validated
            paging: Pagination parameters - must be pre-validated

        Returns:
            Page with members and total
        """
        query = (
            self._member_query()
            .where(*self._predicates(condition))
            .order_by(*self._order_by(paging.sort))
            .offset(paging.offset)
            .limit(paging.limit)
        )
        rows = self._execute(query).scalars().all()
        members = [self._to_domain(row) for row in rows]

        count_executed = False

        def count() -> int:
            nonlocal count_executed
            count_executed = True
            return self._execute(self._count_query(condition)).scalar() or 0

        page = build_page(members, paging, count)

        logger.debug(
            "Member page fetched",
            extra={
                "offset": paging.offset,
                "limit": paging.limit,
                "returned": len(members),
                "total": page.total,
                "count_query_executed": count_executed,
            },
        )
        return page

    def search_page_simple(
        self, condition: MemberSearchCondition, paging: Paging
    ) -> Page[Member]:
        """
        Search members with paging, always counting the filtered set.

        The count wraps the unpaginated content query in a subquery, so it
        carries the same join and predicates as the content.
        """
        base = (
            select(MemberRow)
            .outerjoin(MemberRow.team)
            .where(*self._predicates(condition))
        )

        count_query = select(func.count()).select_from(base.subquery())
        total = self._execute(count_query).scalar() or 0

        query = (
            self._member_query()
            .where(*self._predicates(condition))
            .order_by(*self._order_by(paging.sort))
            .offset(paging.offset)
            .limit(paging.limit)
        )
        rows = self._execute(query).scalars().all()

        return Page(
            content=[self._to_domain(row) for row in rows],
            total=total,
            offset=paging.offset,
            limit=paging.limit,
        )

    def team_age_stats(self) -> list[TeamAgeStats]:
        query = (
            select(
                TeamRow.name.label("team_name"),
                func.count(MemberRow.id).label("member_count"),
                func.avg(MemberRow.age).label("average_age"),
            )
            .select_from(MemberRow)
            .join(MemberRow.team)
            .group_by(TeamRow.name)
            .order_by(TeamRow.name)
        )

        return [
            TeamAgeStats(
                team_name=row.team_name,
                member_count=row.member_count,
                average_age=float(row.average_age),
            )
            for row in self._execute(query).all()
        ]

    def bulk_rename_younger_than(self, age: int, username: str) -> int:
        statement = (
            update(MemberRow)
            .where(MemberRow.age < age)
            .values(username=username)
            .execution_options(synchronize_session=False)
        )
        return self._execute_bulk(statement, "rename_younger_than")

    def bulk_add_age(self, delta: int) -> int:
        statement = (
            update(MemberRow)
            .values(age=MemberRow.age + delta)
            .execution_options(synchronize_session=False)
        )
        return self._execute_bulk(statement, "add_age")

    def bulk_delete_older_than(self, age: int) -> int:
        statement = (
            delete(MemberRow)
            .where(MemberRow.age > age)
            .execution_options(synchronize_session=False)
        )
        return self._execute_bulk(statement, "delete_older_than")

    def _member_query(self) -> Select[tuple[MemberRow]]:
        """Members LEFT OUTER JOIN teams, with the team populated from the join."""
        return (
            select(MemberRow)
            .outerjoin(MemberRow.team)
            .options(contains_eager(MemberRow.team))
        )

    def _count_query(self, condition: MemberSearchCondition) -> Select[tuple[int]]:
        """
        Count only member ids.

        The join to teams is added only when a predicate reads a team column;
        a many-to-one outer join never changes the member count.
        """
        query = select(func.count(MemberRow.id)).select_from(MemberRow)
        if has_text(condition.team_name):
            query = query.outerjoin(MemberRow.team)
        return query.where(*self._predicates(condition))

    def _predicates(self, condition: MemberSearchCondition) -> list[ColumnElement[bool]]:
        candidates = [
            self._username_eq(condition.username),
            self._team_name_eq(condition.team_name),
            self._age_goe(condition.age_goe),
            self._age_loe(condition.age_loe),
        ]
        return [predicate for predicate in candidates if predicate is not None]

    @staticmethod
    def _username_eq(username: str | None) -> ColumnElement[bool] | None:
        return MemberRow.username == username if has_text(username) else None

    @staticmethod
    def _team_name_eq(team_name: str | None) -> ColumnElement[bool] | None:
        return TeamRow.name == team_name if has_text(team_name) else None

    @staticmethod
    def _age_goe(age_goe: int | None) -> ColumnElement[bool] | None:
        return MemberRow.age >= age_goe if age_goe is not None else None

    @staticmethod
    def _age_loe(age_loe: int | None) -> ColumnElement[bool] | None:
        return MemberRow.age <= age_loe if age_loe is not None else None

    @staticmethod
    def _order_by(sort: tuple[SortOrder, ...]) -> list[Any]:
        """Requested order with nulls last, then member id as a tie-breaker."""
        clauses = []
        for order in sort:
            column = _SORT_COLUMNS[order.field]
            clause = column.desc() if order.descending else column.asc()
            clauses.append(clause.nulls_last())

        if all(order.field != "id" for order in sort):
            clauses.append(MemberRow.id.asc())
        return clauses

    def _execute(self, statement: Executable) -> Result[Any]:
        try:
            return self._session.execute(statement)
        except SQLAlchemyError as exc:
            logger.error(
                "Member query failed",
                exc_info=exc,
                extra={"error_type": type(exc).__name__},
            )
            raise QueryExecutionError("Member query failed") from exc

    def _execute_bulk(self, statement: Executable, operation: str) -> int:
        result = self._execute(statement)
        # Bulk statements bypass the identity map; loaded members are stale now.
        self._session.expire_all()

        affected = result.rowcount
        logger.info(
            "Bulk member statement executed",
            extra={"operation": operation, "affected": affected},
        )
        return affected

    def _to_domain(self, row: MemberRow) -> Member:
        """
        Convert database model (MemberRow) to domain entity (Member).

        Args:
            row: SQLAlchemy MemberRow model, team already loaded

        Returns:
            Member domain entity
        """
        team = Team(id=row.team.id, name=row.team.name) if row.team else None
        return Member(id=row.id, username=row.username, age=row.age, team=team)
