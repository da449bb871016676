"""
Query-string helpers for list endpoints.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import parse_qsl, urlencode

from pydantic import ValidationError

from zoho_books.integrations.contracts.common import ListFilters
from zoho_books.integrations.errors import ErrorCause, ZohoBooksError

QueryParams = List[Tuple[str, str]]

# Emission order of the scalar filter keys.
FILTER_KEYS = ("page", "per_page", "sort_column", "sort_order", "search_text", "filter_by")


def coerce_filters(filters: Union[ListFilters, Mapping[str, Any], None]) -> Optional[ListFilters]:
    if filters is None or isinstance(filters, ListFilters):
        return filters
    try:
        return ListFilters.model_validate(dict(filters))
    except ValidationError as exc:
        raise ZohoBooksError(f"invalid list filters: {exc}", 0, cause=ErrorCause.CONSTRUCTION) from exc


def build_query_params(filters: Union[ListFilters, Mapping[str, Any], None]) -> QueryParams:
    """
    Serialize list filters into ordered query pairs.

    Scalar keys come first in ``FILTER_KEYS`` order, then each search criterion
    as ``search_criteria[i][search_text]`` / ``search_criteria[i][search_operator]``.
    Falsy values (None, "", 0) are omitted, so ``page=0`` is never sent.
    """
    parsed = coerce_filters(filters)
    if parsed is None:
        return []

    params: QueryParams = []
    for key in FILTER_KEYS:
        value = getattr(parsed, key)
        if not value:
            continue
        params.append((key, str(value)))

    for index, criterion in enumerate(parsed.search_criteria):
        params.append((f"search_criteria[{index}][search_text]", criterion.search_text))
        params.append((f"search_criteria[{index}][search_operator]", criterion.search_operator))
    return params


def object_to_query_string(obj: Mapping[str, Any]) -> str:
    """Encode a flat mapping, skipping ``None`` values."""
    return urlencode([(k, str(v)) for k, v in obj.items() if v is not None])


def query_string_to_object(query_string: str) -> Dict[str, str]:
    """Decode a query string into a dict; later duplicates win."""
    return dict(parse_qsl(query_string.lstrip("?"), keep_blank_values=True))
