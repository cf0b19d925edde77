"""收取领域服务"""

from domain.fetch.services.deletion_policy import DeletionPolicy
from domain.fetch.services.message_dispatcher import MessageDispatcher

__all__ = ["DeletionPolicy", "MessageDispatcher"]
