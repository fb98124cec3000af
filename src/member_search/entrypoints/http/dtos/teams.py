from pydantic import BaseModel


class TeamAgeStatsDTO(BaseModel):
    team_name: str
    member_count: int
    average_age: float


class TeamAgeStatsResponseDTO(BaseModel):
    teams: list[TeamAgeStatsDTO]
