from __future__ import annotations

from dataclasses import dataclass

from member_search.domain.errors import ValidationError


class FilterValidationError(ValidationError):
    """Raised when search condition parameters are invalid."""

    pass


def has_text(value: str | None) -> bool:
    """True when value is present and contains a non-whitespace character."""
    return value is not None and value.strip() != ""


@dataclass(frozen=True)
class Team:
    id: int
    name: str


@dataclass(frozen=True)
class Member:
    id: int
    username: str | None
    age: int
    team: Team | None = None

    @property
    def team_name(self) -> str | None:
        return self.team.name if self.team else None


@dataclass(frozen=True)
class MemberTeam:
    """Flat projection of a member joined with its team."""

    member_id: int
    username: str | None
    age: int
    team_id: int | None
    team_name: str | None


@dataclass(frozen=True)
class TeamAgeStats:
    team_name: str
    member_count: int
    average_age: float


@dataclass(frozen=True, slots=True)
class MemberSearchCondition:
    """
    Optional search fields, combined with AND.

    A field left as None adds no filter. Text fields also add no filter when
    blank, so an empty query string behaves like an absent one.
    """

    username: str | None = None
    team_name: str | None = None
    age_goe: int | None = None
    age_loe: int | None = None

    def validate(self) -> None:
        """
        Validate search condition.

        Raises:
            FilterValidationError: If the condition is invalid
        """
        if self.age_goe is not None and self.age_goe < 0:
            raise FilterValidationError("age_goe must be >= 0")
        if self.age_loe is not None and self.age_loe < 0:
            raise FilterValidationError("age_loe must be >= 0")
        if (
            self.age_goe is not None
            and self.age_loe is not None
            and self.age_goe > self.age_loe
        ):
            raise FilterValidationError("age_goe cannot be greater than age_loe")
