from __future__ import annotations

from dataclasses import dataclass

from member_search.domain.member import Member, MemberSearchCondition
from member_search.domain.paging import Page, Paging
from member_search.ports.member_repository import MemberRepository


@dataclass(frozen=True, slots=True)
class SearchMemberPageRequest:
    condition: MemberSearchCondition
    paging: Paging


@dataclass(frozen=True, slots=True)
class SearchMemberPageResponse:
    page: Page[Member]


class SearchMemberPage:
    """
    Member search with optional filters and pagination.

    This use case validates the condition and paging, then delegates query
    building to the repository adapter. No filtering logic exists here.
    """

    def __init__(self, member_repository: MemberRepository) -> None:
        self._member_repository = member_repository

    def execute(self, request: SearchMemberPageRequest) -> SearchMemberPageResponse:
        """
        Execute paginated member search.

        Validates request parameters before delegating to repository.
        This is the single source of validation (contract programming).

        Args:
            request: Search parameters (condition and paging)

        Returns:
            Response containing the page of members and the filtered total

        Raises:
            InvalidPageRequest: If paging parameters are invalid
            FilterValidationError: If condition parameters are invalid
            QueryExecutionError: If the store fails
        """
        request.condition.validate()
        request.paging.validate()

        page = self._member_repository.search_page(
            condition=request.condition,
            paging=request.paging,
        )

        return SearchMemberPageResponse(page=page)
