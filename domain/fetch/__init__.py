"""
邮件收取界限上下文

提供收取-分发-删除周期的领域模型，包括：
- FetchOptions, FetchResult 值对象
- DeletionPolicy 删除策略
- MessageDispatcher 消费者分发
"""

from domain.fetch.value_objects.fetch_options import FetchOptions, DEFAULT_OPERATION
from domain.fetch.value_objects.fetch_result import FetchResult
from domain.fetch.services.deletion_policy import DeletionPolicy
from domain.fetch.services.message_dispatcher import MessageDispatcher

__all__ = [
    "FetchOptions",
    "FetchResult",
    "DeletionPolicy",
    "MessageDispatcher",
    "DEFAULT_OPERATION",
]
