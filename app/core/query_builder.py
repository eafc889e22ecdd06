"""Construcción de consultas de listado.

Traduce los parámetros crudos de la petición (page, limit, search, sort,
order) a un ``QuerySpec`` inmutable que la capa CRUD interpreta de forma
uniforme para ambos recursos.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional

from app.config.settings import settings
from app.core.exceptions import InvalidParameter

DEFAULT_SORT_FIELD = "id"

# Campos ordenables por recurso
SORTABLE_FIELDS: Dict[str, FrozenSet[str]] = {
    "niveis": frozenset(
        {"id", "nivel", "total_desenvolvedores", "created_at", "updated_at"}
    ),
    "desenvolvedores": frozenset(
        {
            "id",
            "nome",
            "sexo",
            "data_nascimento",
            "hobby",
            "nivel",
            "nivel_id",
            "created_at",
            "updated_at",
        }
    ),
}


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class QuerySpec:
    """Consulta normalizada; page/limit son None fuera del modo paginado."""

    resource: str
    sort_field: str = DEFAULT_SORT_FIELD
    sort_order: SortOrder = SortOrder.ASC
    search_term: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None
    offset: int = 0

    @property
    def paginated(self) -> bool:
        return self.limit is not None


def _is_present(value: Any) -> bool:
    return value is not None and str(value).strip() != ""


def _to_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def normalize_search(search: Any) -> Optional[str]:
    if search is None:
        return None
    term = str(search).strip()
    return term or None


def resolve_sort_field(resource: str, sort: Any) -> str:
    """Campo fuera de la lista permitida vuelve a ``id`` sin error."""
    if sort is None:
        return DEFAULT_SORT_FIELD
    field = str(sort).strip()
    if field in SORTABLE_FIELDS[resource]:
        return field
    return DEFAULT_SORT_FIELD


def resolve_sort_order(order: Any) -> SortOrder:
    if order is not None and str(order).strip().lower() == "desc":
        return SortOrder.DESC
    return SortOrder.ASC


def build_query_spec(
    resource: str,
    *,
    page: Any = None,
    limit: Any = None,
    search: Any = None,
    sort: Any = None,
    order: Any = None,
    default_limit: Optional[int] = None,
    max_limit: Optional[int] = None,
) -> QuerySpec:
    """Validar y normalizar parámetros de listado.

    Si no llega ninguno de page/limit/search se devuelve la colección
    completa (sin offset ni limit); sort y order se aplican igual.

    Raises:
        InvalidParameter: page no es entero >= 1 o limit no está en [1, max].
        KeyError: recurso sin entrada en ``SORTABLE_FIELDS``.
    """
    if resource not in SORTABLE_FIELDS:
        raise KeyError(f"Unknown resource: {resource}")

    if default_limit is None:
        default_limit = settings.default_page_size
    if max_limit is None:
        max_limit = settings.max_page_size

    search_term = normalize_search(search)
    sort_field = resolve_sort_field(resource, sort)
    sort_order = resolve_sort_order(order)

    if not (_is_present(page) or _is_present(limit) or search_term):
        return QuerySpec(
            resource=resource,
            sort_field=sort_field,
            sort_order=sort_order,
        )

    page_number = 1
    if _is_present(page):
        page_number = _to_int(page)
        if page_number is None or page_number < 1:
            raise InvalidParameter("page must be a number greater than 0")

    page_size = default_limit
    if _is_present(limit):
        page_size = _to_int(limit)
        if page_size is None or page_size < 1 or page_size > max_limit:
            raise InvalidParameter(f"limit must be a number between 1 and {max_limit}")

    return QuerySpec(
        resource=resource,
        sort_field=sort_field,
        sort_order=sort_order,
        search_term=search_term,
        page=page_number,
        limit=page_size,
        offset=(page_number - 1) * page_size,
    )
