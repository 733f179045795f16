# backend/services/pagination.py
import math
from typing import Any, List, Optional, Tuple

from config.settings import MAX_PAGE_LIMIT


def clamp(page: Optional[int], limit: Optional[int], default_limit: int = 20) -> Tuple[int, int]:
    """page >= 1 and 1 <= limit <= MAX_PAGE_LIMIT; out-of-range values are clamped, not rejected."""
    page = max(1, page if page is not None else 1)
    limit = min(MAX_PAGE_LIMIT, max(1, limit if limit is not None else default_limit))
    return page, limit


def paginate(query, page: Optional[int], limit: Optional[int], default_limit: int = 20) -> Tuple[List[Any], dict]:
    """Run a count and a windowed fetch over an already-ordered query."""
    page, limit = clamp(page, limit, default_limit)
    total = query.order_by(None).count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    meta = {
        "page": page,
        "limit": limit,
        "total": total,
        "pages": math.ceil(total / limit),
    }
    return items, meta
