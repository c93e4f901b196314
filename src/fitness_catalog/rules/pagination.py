"""Page window calculation for find-all operations."""

import math
from dataclasses import dataclass

from ..errors import ValidationError


@dataclass(frozen=True)
class PageWindow:
    """A page request resolved against the number of active rows."""

    page: int
    limit: int
    total: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def last_page(self) -> int:
        # ceil(0 / limit) is already 0
        return math.ceil(self.total / self.limit)

    def meta(self) -> dict:
        return {"total": self.total, "page": self.page, "last_page": self.last_page}


def paginate(page: int, limit: int, total: int) -> PageWindow:
    """Resolve a page request.

    Pages past the last page are allowed and simply select nothing.

    Raises:
        ValidationError: If page < 1 or limit < 1
    """
    if page < 1:
        raise ValidationError("Page must be at least 1", details={"page": page})
    if limit < 1:
        raise ValidationError("Limit must be greater than 0", details={"limit": limit})
    return PageWindow(page=page, limit=limit, total=total)
