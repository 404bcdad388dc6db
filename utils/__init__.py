"""Shared utilities for the backend."""
from utils.case import dict_keys_to_camel, to_camel_key
from utils.timezone import as_utc, utc_now

__all__ = [
    "to_camel_key",
    "dict_keys_to_camel",
    "as_utc",
    "utc_now",
]
