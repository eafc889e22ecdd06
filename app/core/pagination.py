import math
from typing import Any, Dict, Optional

from app.core.query_builder import QuerySpec


def last_page(total: int, per_page: int) -> int:
    """Número de la última página; al menos 1 aunque no haya registros."""
    if per_page < 1:
        raise ValueError("per_page must be greater than 0")
    return max(1, math.ceil(total / per_page))


def build_meta(
    total: int, limit: Optional[int], page: Optional[int] = None
) -> Optional[Dict[str, Any]]:
    """Metadatos de paginación, o None en modo sin paginación."""
    if limit is None:
        return None
    if total < 0:
        raise ValueError("total must be >= 0")
    return {
        "total": total,
        "per_page": limit,
        "current_page": page or 1,
        "last_page": last_page(total, limit),
    }


def meta_for(spec: QuerySpec, total: int) -> Optional[Dict[str, Any]]:
    return build_meta(total, spec.limit, spec.page)
