from member_search.infra.db.models.member import MemberRow, TeamRow

__all__ = ["MemberRow", "TeamRow"]
