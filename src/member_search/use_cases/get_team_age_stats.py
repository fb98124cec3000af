from __future__ import annotations

from dataclasses import dataclass

from member_search.domain.member import TeamAgeStats
from member_search.ports.member_repository import MemberRepository


@dataclass(frozen=True, slots=True)
class GetTeamAgeStatsResponse:
    teams: list[TeamAgeStats]


class GetTeamAgeStats:
    """Member count and average age per team, ordered by team name."""

    def __init__(self, member_repository: MemberRepository) -> None:
        self._member_repository = member_repository

    def execute(self) -> GetTeamAgeStatsResponse:
        return GetTeamAgeStatsResponse(teams=self._member_repository.team_age_stats())
