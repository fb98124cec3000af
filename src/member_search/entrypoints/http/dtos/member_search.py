from pydantic import BaseModel, ConfigDict, Field


class MemberResponseDTO(BaseModel):
    id: int
    username: str | None
    age: int
    team_id: int | None
    team_name: str | None


class MemberTeamResponseDTO(BaseModel):
    member_id: int
    username: str | None
    age: int
    team_id: int | None
    team_name: str | None


class MemberConditionQueryDTO(BaseModel):
    """Query parameters filtering members. Every filter is optional."""

    username: str | None = Field(
        default=None,
        description="Filter by exact username (blank is ignored)",
        examples=["member1"],
        max_length=50,
    )
    team_name: str | None = Field(
        default=None,
        description="Filter by exact team name (blank is ignored)",
        examples=["teamA"],
        max_length=50,
    )
    age_goe: int | None = Field(
        default=None,
        description="Minimum age (inclusive)",
        examples=[10],
        ge=0,
    )
    age_loe: int | None = Field(
        default=None,
        description="Maximum age (inclusive)",
        examples=[20],
        ge=0,
    )


class MemberSearchQueryDTO(MemberConditionQueryDTO):
    """Query parameters for paginated member search."""

    offset: int = Field(
        default=0,
        description="Number of results to skip",
        examples=[0],
        ge=0,
    )
    limit: int = Field(
        default=20,
        description="Maximum number of results to return",
        examples=[20],
        ge=1,
        le=200,
    )
    sort: str | None = Field(
        default=None,
        description="Comma separated 'field[:asc|desc]' items. Fields: id, username, age, team_name",
        examples=["age:desc,username"],
        pattern=r"^[a-z_]+(:(asc|desc))?(,[a-z_]+(:(asc|desc))?)*$",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "member1",
                "team_name": "teamA",
                "age_goe": 10,
                "age_loe": 20,
                "offset": 0,
                "limit": 20,
                "sort": "age:desc",
            }
        }
    )


class MemberPageResponseDTO(BaseModel):
    members: list[MemberResponseDTO]
    total: int
    offset: int
    limit: int
    has_next: bool


class MemberTeamListResponseDTO(BaseModel):
    members: list[MemberTeamResponseDTO]
