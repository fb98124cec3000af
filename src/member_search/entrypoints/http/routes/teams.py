from fastapi import APIRouter, Depends

from member_search.entrypoints.http.dependencies import get_team_age_stats_use_case
from member_search.entrypoints.http.dtos.teams import TeamAgeStatsResponseDTO
from member_search.entrypoints.http.mappers.team_stats_mapper import TeamStatsMapper
from member_search.use_cases.get_team_age_stats import GetTeamAgeStats

router = APIRouter(tags=["Teams"])


@router.get(
    "/teams/age-stats",
    response_model=TeamAgeStatsResponseDTO,
    summary="Member count and average age per team",
    description="Teams without members are not listed. Ordered by team name.",
)
def get_team_age_stats(
    use_case: GetTeamAgeStats = Depends(get_team_age_stats_use_case),
) -> TeamAgeStatsResponseDTO:
    return TeamStatsMapper.to_response(use_case.execute())
