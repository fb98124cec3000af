from __future__ import annotations

from dataclasses import dataclass

from member_search.domain.member import MemberSearchCondition, MemberTeam
from member_search.ports.member_repository import MemberRepository


@dataclass(frozen=True, slots=True)
class SearchMemberTeamsRequest:
    condition: MemberSearchCondition


@dataclass(frozen=True, slots=True)
class SearchMemberTeamsResponse:
    members: list[MemberTeam]


class SearchMemberTeams:
    """Unpaged search returning members flattened with their team."""

    def __init__(self, member_repository: MemberRepository) -> None:
        self._member_repository = member_repository

    def execute(self, request: SearchMemberTeamsRequest) -> SearchMemberTeamsResponse:
        request.condition.validate()

        members = self._member_repository.search(request.condition)

        return SearchMemberTeamsResponse(members=members)
