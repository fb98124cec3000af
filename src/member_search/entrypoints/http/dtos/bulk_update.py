from pydantic import BaseModel, ConfigDict, Field


class RenameMembersRequestDTO(BaseModel):
    """Rename every member younger than age_lt."""

    age_lt: int = Field(description="Members strictly younger than this are renamed", ge=0)
    username: str = Field(description="New username", min_length=1, max_length=50)

    model_config = ConfigDict(
        json_schema_extra={"example": {"age_lt": 30, "username": "guest"}}
    )


class ShiftAgesRequestDTO(BaseModel):
    """Add delta to every member's age."""

    delta: int = Field(description="Years to add (negative to subtract)", examples=[1])


class DeleteMembersRequestDTO(BaseModel):
    """Delete every member older than age_gt."""

    age_gt: int = Field(description="Members strictly older than this are deleted", ge=0)

    model_config = ConfigDict(json_schema_extra={"example": {"age_gt": 18}})


class BulkUpdateResponseDTO(BaseModel):
    affected: int = Field(description="Number of rows changed by the statement")
