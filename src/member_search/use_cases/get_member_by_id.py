"""Get member by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from member_search.domain.errors import NotFoundError, ValidationError
from member_search.domain.member import Member
from member_search.ports.member_repository import MemberRepository


@dataclass(frozen=True, slots=True)
class GetMemberByIdRequest:
    """Request to get a member by ID."""

    member_id: int


@dataclass(frozen=True, slots=True)
class GetMemberByIdResponse:
    """Response containing the requested member."""

    member: Member


class GetMemberById:
    """
    Use case for retrieving a single member by ID.

    Responsibilities:
    - Validate member_id (must be a positive integer)
    - Delegate to repository for data access
    - Raise NotFoundError if member doesn't exist
    """

    def __init__(self, member_repository: MemberRepository) -> None:
        """
        Initialize use case with dependencies.

        Args:
            member_repository: Repository for member data access
        """
        self._member_repository = member_repository

    def execute(self, request: GetMemberByIdRequest) -> GetMemberByIdResponse:
        """
        Execute the get member by ID use case.

        Args:
            request: Request containing member_id

        Returns:
            GetMemberByIdResponse with the member

        Raises:
            ValidationError: If member_id is not positive
            NotFoundError: If member with given ID doesn't exist
        """
        if request.member_id <= 0:
            raise ValidationError(
                errors=[
                    {
                        "field": "member_id",
                        "message": "Must be a positive integer",
                        "code": "INVALID_ID",
                    }
                ]
            )

        member = self._member_repository.get_by_id(request.member_id)

        if member is None:
            raise NotFoundError(resource="Member", identifier=str(request.member_id))

        return GetMemberByIdResponse(member=member)
