from __future__ import annotations

from abc import ABC, abstractmethod

from member_search.domain.member import (
    Member,
    MemberSearchCondition,
    MemberTeam,
    TeamAgeStats,
)
from member_search.domain.paging import Page, Paging


class MemberRepository(ABC):
    """
    Port for member data access.

    Contract (Preconditions):
        - condition and paging parameters must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate

    Contract (Postconditions):
        - Search predicates are AND-combined; absent or blank fields add no filter
        - Members without a team are kept (left outer join semantics)
        - Storage failures surface as QueryExecutionError
    """

    @abstractmethod
    def get_by_id(self, member_id: int) -> Member | None: ...

    @abstractmethod
    def find_all(self) -> list[Member]: ...

    @abstractmethod
    def find_by_username(self, username: str) -> list[Member]: ...

    @abstractmethod
    def search(self, condition: MemberSearchCondition) -> list[MemberTeam]:
        """
        Unpaged projection search ordered by member id.

        Args:
            condition: Search condition (AND semantics) - pre-validated

        Returns:
            Matching members flattened with their team
        """
        ...

    @abstractmethod
    def search_page(self, condition: MemberSearchCondition, paging: Paging) -> Page[Member]:
        """
        Paginated search with an optimized count.

        The total comes from a separate id-only count query, which is skipped
        when the content already shows the page is the last one.

        Args:
            condition: Search condition (AND semantics) - pre-validated
            paging: Offset, limit and sort - pre-validated

        Returns:
            Page of members with the total size of the filtered set
        """
        ...

    @abstractmethod
    def search_page_simple(
        self, condition: MemberSearchCondition, paging: Paging
    ) -> Page[Member]:
        """Paginated search that always counts the full filtered set."""
        ...

    @abstractmethod
    def team_age_stats(self) -> list[TeamAgeStats]: ...

    @abstractmethod
    def bulk_rename_younger_than(self, age: int, username: str) -> int:
        """Set username on every member younger than age. Returns affected rows."""
        ...

    @abstractmethod
    def bulk_add_age(self, delta: int) -> int:
        """Add delta to every member's age. Returns affected rows."""
        ...

    @abstractmethod
    def bulk_delete_older_than(self, age: int) -> int:
        """Delete every member older than age. Returns affected rows."""
        ...
