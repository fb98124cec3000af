from __future__ import annotations

from member_search.domain.errors import ValidationError
from member_search.domain.member import Member, MemberSearchCondition, MemberTeam
from member_search.domain.paging import Paging, SortDirection, SortOrder
from member_search.entrypoints.http.dtos.member_search import (
    MemberConditionQueryDTO,
    MemberPageResponseDTO,
    MemberResponseDTO,
    MemberSearchQueryDTO,
    MemberTeamListResponseDTO,
    MemberTeamResponseDTO,
)
from member_search.use_cases.search_member_page import (
    SearchMemberPageRequest,
    SearchMemberPageResponse,
)
from member_search.use_cases.search_member_teams import (
    SearchMemberTeamsRequest,
    SearchMemberTeamsResponse,
)


class MemberSearchMapper:
    """Maps between REST DTOs and domain models for member search."""

    @staticmethod
    def to_domain_condition(dto: MemberConditionQueryDTO) -> MemberSearchCondition:
        """
        Converts query params to a domain search condition.

        Blank strings are passed through; the condition treats them as absent.

        Args:
            dto: The data transfer object containing filter query parameters

        Returns:
            MemberSearchCondition: Domain search condition
        """
        return MemberSearchCondition(
            username=dto.username,
            team_name=dto.team_name,
            age_goe=dto.age_goe,
            age_loe=dto.age_loe,
        )

    @staticmethod
    def to_domain_sort(raw: str | None) -> tuple[SortOrder, ...]:
        """
        Parses 'field[:asc|desc]' items separated by commas.

        Field names are checked by Paging.validate; only the syntax is checked here.

        Raises:
            ValidationError: If a direction is neither 'asc' nor 'desc'
        """
        if not raw:
            return ()

        orders = []
        for item in raw.split(","):
            field, _, direction = item.strip().partition(":")
            try:
                sort_direction = SortDirection(direction.lower() or SortDirection.ASC.value)
            except ValueError:
                raise ValidationError(
                    errors=[
                        {
                            "field": "sort",
                            "message": f"Invalid sort direction: {direction}",
                            "code": "INVALID_SORT_DIRECTION",
                        }
                    ]
                )
            orders.append(SortOrder(field=field, direction=sort_direction))
        return tuple(orders)

    @staticmethod
    def to_domain_paging(dto: MemberSearchQueryDTO) -> Paging:
        """
        Converts pagination params to domain paging object.

        Args:
            dto: The data transfer object containing search query parameters

        Returns:
            Paging: Domain paging object
        """
        return Paging(
            offset=dto.offset,
            limit=dto.limit,
            sort=MemberSearchMapper.to_domain_sort(dto.sort),
        )

    @staticmethod
    def to_domain_request(dto: MemberSearchQueryDTO) -> SearchMemberPageRequest:
        """Builds the complete paginated search request from the DTO."""
        return SearchMemberPageRequest(
            condition=MemberSearchMapper.to_domain_condition(dto),
            paging=MemberSearchMapper.to_domain_paging(dto),
        )

    @staticmethod
    def to_domain_teams_request(dto: MemberConditionQueryDTO) -> SearchMemberTeamsRequest:
        return SearchMemberTeamsRequest(condition=MemberSearchMapper.to_domain_condition(dto))

    @staticmethod
    def to_member_response(member: Member) -> MemberResponseDTO:
        return MemberResponseDTO(
            id=member.id,
            username=member.username,
            age=member.age,
            team_id=member.team.id if member.team else None,
            team_name=member.team_name,
        )

    @staticmethod
    def to_member_team_response(member_team: MemberTeam) -> MemberTeamResponseDTO:
        return MemberTeamResponseDTO(
            member_id=member_team.member_id,
            username=member_team.username,
            age=member_team.age,
            team_id=member_team.team_id,
            team_name=member_team.team_name,
        )

    @staticmethod
    def to_response(result: SearchMemberPageResponse) -> MemberPageResponseDTO:
        """
        Converts a domain page to REST response with pagination metadata.

        Args:
            result: Domain search result containing the page

        Returns:
            MemberPageResponseDTO: REST response with members and pagination metadata
        """
        page = result.page
        return MemberPageResponseDTO(
            members=[MemberSearchMapper.to_member_response(m) for m in page.content],
            total=page.total,
            offset=page.offset,
            limit=page.limit,
            has_next=page.has_next,
        )

    @staticmethod
    def to_teams_response(result: SearchMemberTeamsResponse) -> MemberTeamListResponseDTO:
        return MemberTeamListResponseDTO(
            members=[MemberSearchMapper.to_member_team_response(m) for m in result.members]
        )
