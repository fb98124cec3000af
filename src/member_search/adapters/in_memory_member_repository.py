from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any

from member_search.domain.member import (
    Member,
    MemberSearchCondition,
    MemberTeam,
    TeamAgeStats,
    has_text,
)
from member_search.domain.paging import Page, Paging, SortOrder, build_page
from member_search.ports.member_repository import MemberRepository


class InMemoryMemberRepository(MemberRepository):
    """
    Canonical contract implementation for tests.

    - Keeps members ordered by id
    - Applies AND-semantics filtering, blank text fields ignored
    - Applies sort, then paging, AFTER filtering
    - Uses the same count-skip rule as the SQL adapter
    """

    def __init__(self, members: list[Member]) -> None:
        self._members = sorted(members, key=lambda m: m.id)
        self.count_calls = 0

    def get_by_id(self, member_id: int) -> Member | None:
        return next((m for m in self._members if m.id == member_id), None)

    def find_all(self) -> list[Member]:
        return list(self._members)

    def find_by_username(self, username: str) -> list[Member]:
        return [m for m in self._members if m.username == username]

    def search(self, condition: MemberSearchCondition) -> list[MemberTeam]:
        return [self._to_member_team(m) for m in self._filter(condition)]

    def search_page(self, condition: MemberSearchCondition, paging: Paging) -> Page[Member]:
        matches = self._sorted(self._filter(condition), paging.sort)
        content = matches[paging.offset : paging.offset + paging.limit]

        def count() -> int:
            self.count_calls += 1
            return len(matches)

        return build_page(content, paging, count)

    def search_page_simple(
        self, condition: MemberSearchCondition, paging: Paging
    ) -> Page[Member]:
        matches = self._sorted(self._filter(condition), paging.sort)
        self.count_calls += 1
        return Page(
            content=matches[paging.offset : paging.offset + paging.limit],
            total=len(matches),
            offset=paging.offset,
            limit=paging.limit,
        )

    def team_age_stats(self) -> list[TeamAgeStats]:
        ages_by_team: dict[str, list[int]] = {}
        for member in self._members:
            if member.team is not None:
                ages_by_team.setdefault(member.team.name, []).append(member.age)

        return [
            TeamAgeStats(
                team_name=name,
                member_count=len(ages),
                average_age=sum(ages) / len(ages),
            )
            for name, ages in sorted(ages_by_team.items())
        ]

    def bulk_rename_younger_than(self, age: int, username: str) -> int:
        return self._update(lambda m: m.age < age, lambda m: replace(m, username=username))

    def bulk_add_age(self, delta: int) -> int:
        return self._update(lambda m: True, lambda m: replace(m, age=m.age + delta))

    def bulk_delete_older_than(self, age: int) -> int:
        kept = [m for m in self._members if not m.age > age]
        deleted = len(self._members) - len(kept)
        self._members = kept
        return deleted

    def _update(
        self,
        matches: Callable[[Member], bool],
        change: Callable[[Member], Member],
    ) -> int:
        affected = 0
        updated = []
        for member in self._members:
            if matches(member):
                member = change(member)
                affected += 1
            updated.append(member)
        self._members = updated
        return affected

    def _filter(self, condition: MemberSearchCondition) -> list[Member]:
        return [m for m in self._members if self._matches(m, condition)]

    def _matches(self, member: Member, condition: MemberSearchCondition) -> bool:
        if has_text(condition.username) and member.username != condition.username:
            return False
        if has_text(condition.team_name) and member.team_name != condition.team_name:
            return False
        if condition.age_goe is not None and member.age < condition.age_goe:
            return False
        if condition.age_loe is not None and member.age > condition.age_loe:
            return False
        return True

    def _sorted(self, members: list[Member], sort: tuple[SortOrder, ...]) -> list[Member]:
        # Stable sorts applied from the least significant key; nulls go last either way.
        result = list(members)
        for order in reversed(sort):
            result.sort(key=self._sort_key(order), reverse=order.descending)
        return result

    @staticmethod
    def _sort_key(order: SortOrder) -> Callable[[Member], tuple[bool, Any]]:
        def key(member: Member) -> tuple[bool, Any]:
            value = getattr(member, order.field)
            # reverse=True flips the flag too, so it is inverted for descending keys
            is_null = value is None
            return (not is_null if order.descending else is_null, value)

        return key

    @staticmethod
    def _to_member_team(member: Member) -> MemberTeam:
        return MemberTeam(
            member_id=member.id,
            username=member.username,
            age=member.age,
            team_id=member.team.id if member.team else None,
            team_name=member.team_name,
        )
