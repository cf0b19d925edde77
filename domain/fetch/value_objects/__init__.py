"""收取值对象模块"""

from domain.fetch.value_objects.fetch_options import FetchOptions, DEFAULT_OPERATION
from domain.fetch.value_objects.fetch_result import FetchResult

__all__ = ["FetchOptions", "FetchResult", "DEFAULT_OPERATION"]
