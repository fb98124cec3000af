"""
Bulk update/delete use cases.

Each statement runs directly against the database and reports the number of
affected rows. Members loaded before the statement are stale afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from member_search.domain.errors import ValidationError
from member_search.ports.member_repository import MemberRepository


@dataclass(frozen=True, slots=True)
class BulkUpdateResponse:
    affected: int


@dataclass(frozen=True, slots=True)
class RenameYoungerMembersRequest:
    age_lt: int
    username: str


@dataclass(frozen=True, slots=True)
class ShiftMemberAgesRequest:
    delta: int


@dataclass(frozen=True, slots=True)
class DeleteOlderMembersRequest:
    age_gt: int


class RenameYoungerMembers:
    """Set the same username on every member younger than ``age_lt``."""

    def __init__(self, member_repository: MemberRepository) -> None:
        self._member_repository = member_repository

    def execute(self, request: RenameYoungerMembersRequest) -> BulkUpdateResponse:
        if not request.username.strip():
            raise ValidationError(
                errors=[
                    {
                        "field": "username",
                        "message": "Must not be blank",
                        "code": "BLANK_VALUE",
                    }
                ]
            )

        affected = self._member_repository.bulk_rename_younger_than(
            age=request.age_lt,
            username=request.username,
        )
        return BulkUpdateResponse(affected=affected)


class ShiftMemberAges:
    """Add ``delta`` (possibly negative) to every member's age."""

    def __init__(self, member_repository: MemberRepository) -> None:
        self._member_repository = member_repository

    def execute(self, request: ShiftMemberAgesRequest) -> BulkUpdateResponse:
        if request.delta == 0:
            raise ValidationError(
                errors=[
                    {
                        "field": "delta",
                        "message": "Must not be zero",
                        "code": "INVALID_VALUE",
                    }
                ]
            )

        affected = self._member_repository.bulk_add_age(delta=request.delta)
        return BulkUpdateResponse(affected=affected)


class DeleteOlderMembers:
    """Delete every member older than ``age_gt``."""

    def __init__(self, member_repository: MemberRepository) -> None:
        self._member_repository = member_repository

    def execute(self, request: DeleteOlderMembersRequest) -> BulkUpdateResponse:
        if request.age_gt < 0:
            raise ValidationError(
                errors=[
                    {
                        "field": "age_gt",
                        "message": "Must be >= 0",
                        "code": "INVALID_VALUE",
                    }
                ]
            )

        affected = self._member_repository.bulk_delete_older_than(age=request.age_gt)
        return BulkUpdateResponse(affected=affected)
