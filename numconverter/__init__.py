from .converter import (
    DEFAULT_TO_BASES,
    MAX_VALUE,
    as_string_base,
    convert_to_base_10,
    format_number,
    group_digits,
    pad_digits,
    parse_target_base,
)
from .errors import (
    BaseConversionError,
    InputBaseError,
    NumConverterError,
    TargetBaseError,
)
from .resolver import BASE_ALIASES, ResolvedInput, get_bases, get_from_base

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TO_BASES", "MAX_VALUE",
    "as_string_base", "convert_to_base_10", "format_number",
    "group_digits", "pad_digits", "parse_target_base",
    "BaseConversionError", "InputBaseError", "NumConverterError", "TargetBaseError",
    "BASE_ALIASES", "ResolvedInput", "get_bases", "get_from_base",
]
