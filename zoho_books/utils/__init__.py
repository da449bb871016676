from .formatting import (
    format_currency,
    format_date,
    generate_random_string,
    get_nested_property,
    is_empty,
    is_valid_email,
    is_valid_phone,
)
from .query import build_query_params, object_to_query_string, query_string_to_object

__all__ = [
    "build_query_params", "object_to_query_string", "query_string_to_object",
    "format_currency", "format_date", "generate_random_string", "get_nested_property",
    "is_empty", "is_valid_email", "is_valid_phone",
]
