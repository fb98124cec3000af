from __future__ import annotations

from member_search.entrypoints.http.dtos.teams import (
    TeamAgeStatsDTO,
    TeamAgeStatsResponseDTO,
)
from member_search.use_cases.get_team_age_stats import GetTeamAgeStatsResponse


class TeamStatsMapper:
    """Maps team aggregation results to REST DTOs."""

    @staticmethod
    def to_response(result: GetTeamAgeStatsResponse) -> TeamAgeStatsResponseDTO:
        return TeamAgeStatsResponseDTO(
            teams=[
                TeamAgeStatsDTO(
                    team_name=stats.team_name,
                    member_count=stats.member_count,
                    average_age=stats.average_age,
                )
                for stats in result.teams
            ]
        )
