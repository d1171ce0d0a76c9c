"""Map operations: synchronous helpers and concurrent transforms."""

from .async_maps import all_settled_map, partition_settled, transform_map_async
from .maps import filter_map, get_or_default, get_or_insert_with, transform_map

__all__ = [
    "transform_map",
    "filter_map",
    "get_or_default",
    "get_or_insert_with",
    "transform_map_async",
    "all_settled_map",
    "partition_settled",
]
