"""消费者解析"""

from infrastructure.consumers.consumer_resolver import ConsumerResolver

__all__ = ["ConsumerResolver"]
