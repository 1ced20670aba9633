"""Pagination window shared by every paginated listing."""

from dataclasses import dataclass

from labs.shared.consts import ALLOWED_PAGE_LIMITS, DEFAULT_PAGE, DEFAULT_PAGE_LIMIT


@dataclass(frozen=True)
class Pagination:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_LIMIT

    @classmethod
    def create(
        cls, page: int = DEFAULT_PAGE, limit: int = DEFAULT_PAGE_LIMIT
    ) -> "Pagination":
        """Build a window, coercing unsupported limits to the default one."""
        if page < 1:
            page = DEFAULT_PAGE
        if limit not in ALLOWED_PAGE_LIMITS:
            limit = DEFAULT_PAGE_LIMIT
        return cls(page=page, limit=limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
