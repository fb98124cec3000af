from __future__ import annotations

from member_search.entrypoints.http.dtos.bulk_update import (
    BulkUpdateResponseDTO,
    DeleteMembersRequestDTO,
    RenameMembersRequestDTO,
    ShiftAgesRequestDTO,
)
from member_search.use_cases.bulk_member_updates import (
    BulkUpdateResponse,
    DeleteOlderMembersRequest,
    RenameYoungerMembersRequest,
    ShiftMemberAgesRequest,
)


class BulkUpdateMapper:
    """Maps between REST DTOs and domain requests for bulk statements."""

    @staticmethod
    def to_rename_request(dto: RenameMembersRequestDTO) -> RenameYoungerMembersRequest:
        return RenameYoungerMembersRequest(age_lt=dto.age_lt, username=dto.username)

    @staticmethod
    def to_shift_request(dto: ShiftAgesRequestDTO) -> ShiftMemberAgesRequest:
        return ShiftMemberAgesRequest(delta=dto.delta)

    @staticmethod
    def to_delete_request(dto: DeleteMembersRequestDTO) -> DeleteOlderMembersRequest:
        return DeleteOlderMembersRequest(age_gt=dto.age_gt)

    @staticmethod
    def to_response(result: BulkUpdateResponse) -> BulkUpdateResponseDTO:
        return BulkUpdateResponseDTO(affected=result.affected)
