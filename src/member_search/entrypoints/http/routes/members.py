from fastapi import APIRouter, Depends

from member_search.entrypoints.http.dependencies import (
    get_delete_older_members_use_case,
    get_get_member_by_id_use_case,
    get_rename_younger_members_use_case,
    get_search_member_page_use_case,
    get_search_member_teams_use_case,
    get_shift_member_ages_use_case,
)
from member_search.entrypoints.http.dtos.bulk_update import (
    BulkUpdateResponseDTO,
    DeleteMembersRequestDTO,
    RenameMembersRequestDTO,
    ShiftAgesRequestDTO,
)
from member_search.entrypoints.http.dtos.member_search import (
    MemberConditionQueryDTO,
    MemberPageResponseDTO,
    MemberResponseDTO,
    MemberSearchQueryDTO,
    MemberTeamListResponseDTO,
)
from member_search.entrypoints.http.mappers.bulk_update_mapper import BulkUpdateMapper
from member_search.entrypoints.http.mappers.member_search_mapper import MemberSearchMapper
from member_search.use_cases.bulk_member_updates import (
    DeleteOlderMembers,
    RenameYoungerMembers,
    ShiftMemberAges,
)
from member_search.use_cases.get_member_by_id import GetMemberById, GetMemberByIdRequest
from member_search.use_cases.search_member_page import SearchMemberPage
from member_search.use_cases.search_member_teams import SearchMemberTeams

router = APIRouter(tags=["Members"])


@router.get(
    "/members",
    response_model=MemberPageResponseDTO,
    summary="Search members",
    description="""
    Search members with optional filters, sorting and pagination.

    ## Filters
    - All filters use AND semantics
    - username/team_name: exact match, blank values are ignored
    - age_goe/age_loe: inclusive bounds
    - Members without a team are included unless team_name is set

    ## Sorting
    - `sort=age:desc,username` (direction defaults to asc)
    - Fields: id, username, age, team_name. Nulls sort last.

    ## Pagination
    - Default limit: 20, max limit: 200
    - `total` is the size of the whole filtered set

    ## Example
    ```
    GET /v1/members?team_name=teamA&age_goe=10&limit=10
    ```
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "members": [
                            {
                                "id": 1,
                                "username": "member1",
                                "age": 10,
                                "team_id": 1,
                                "team_name": "teamA",
                            }
                        ],
                        "total": 4,
                        "offset": 0,
                        "limit": 1,
                        "has_next": True,
                    }
                }
            },
        },
        422: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "age_goe cannot be greater than age_loe",
                        "code": "VALIDATION_ERROR",
                    }
                }
            },
        },
    },
)
def get_members(
    query: MemberSearchQueryDTO = Depends(),
    use_case: SearchMemberPage = Depends(get_search_member_page_use_case),
) -> MemberPageResponseDTO:
    """Search members endpoint following parse → execute → map → return pattern."""
    request = MemberSearchMapper.to_domain_request(query)

    result = use_case.execute(request)

    return MemberSearchMapper.to_response(result)


@router.get(
    "/members/search",
    response_model=MemberTeamListResponseDTO,
    summary="Search members with their team (unpaged)",
)
def search_member_teams(
    query: MemberConditionQueryDTO = Depends(),
    use_case: SearchMemberTeams = Depends(get_search_member_teams_use_case),
) -> MemberTeamListResponseDTO:
    request = MemberSearchMapper.to_domain_teams_request(query)

    result = use_case.execute(request)

    return MemberSearchMapper.to_teams_response(result)


@router.get(
    "/members/{member_id}",
    response_model=MemberResponseDTO,
    summary="Get member by ID",
    responses={
        404: {
            "description": "Member not found",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Member with identifier '42' not found",
                        "code": "NOT_FOUND",
                    }
                }
            },
        },
    },
)
def get_member(
    member_id: int,
    use_case: GetMemberById = Depends(get_get_member_by_id_use_case),
) -> MemberResponseDTO:
    result = use_case.execute(GetMemberByIdRequest(member_id=member_id))

    return MemberSearchMapper.to_member_response(result.member)


@router.post(
    "/members/bulk/rename",
    response_model=BulkUpdateResponseDTO,
    summary="Rename every member younger than an age",
)
def rename_younger_members(
    payload: RenameMembersRequestDTO,
    use_case: RenameYoungerMembers = Depends(get_rename_younger_members_use_case),
) -> BulkUpdateResponseDTO:
    result = use_case.execute(BulkUpdateMapper.to_rename_request(payload))

    return BulkUpdateMapper.to_response(result)


@router.post(
    "/members/bulk/shift-age",
    response_model=BulkUpdateResponseDTO,
    summary="Add a number of years to every member's age",
)
def shift_member_ages(
    payload: ShiftAgesRequestDTO,
    use_case: ShiftMemberAges = Depends(get_shift_member_ages_use_case),
) -> BulkUpdateResponseDTO:
    result = use_case.execute(BulkUpdateMapper.to_shift_request(payload))

    return BulkUpdateMapper.to_response(result)


@router.post(
    "/members/bulk/delete",
    response_model=BulkUpdateResponseDTO,
    summary="Delete every member older than an age",
)
def delete_older_members(
    payload: DeleteMembersRequestDTO,
    use_case: DeleteOlderMembers = Depends(get_delete_older_members_use_case),
) -> BulkUpdateResponseDTO:
    result = use_case.execute(BulkUpdateMapper.to_delete_request(payload))

    return BulkUpdateMapper.to_response(result)
