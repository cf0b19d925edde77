"""消费者分发服务"""

import logging
from typing import Any, Iterable, Optional


class MessageDispatcher:
    """
    把邮件（或实时会话连接）分发给消费者

    消费者是任意对象，能力即“拥有同名可调用属性”，不要求继承关系。
    对同一封邮件，操作按配置顺序依次调用，全部完成（或失败）后
    才评估删除策略。
    """

    def __init__(self, consumer: Any, logger: Optional[logging.Logger] = None):
        self._consumer = consumer
        self._logger = logger or logging.getLogger(__name__)

    @property
    def consumer(self) -> Any:
        return self._consumer

    @staticmethod
    def responds_to(consumer: Any, operation: str) -> bool:
        """检查消费者是否提供指定操作"""
        return callable(getattr(consumer, operation, None))

    def dispatch(self, operation_names: Iterable[str], payload: Any) -> None:
        """
        依次以 payload 为唯一参数调用每个操作

        不做预检查：消费者缺少某个操作时，属性查找抛出的
        AttributeError 直接向上传播。消费者自身抛出的异常同样传播。

        Args:
            operation_names: 操作名列表（按顺序调用）
            payload: RawMessage 或实时会话连接
        """
        for name in operation_names:
            operation = getattr(self._consumer, name)
            self._logger.debug(f"Dispatching {payload!r} to {name}")
            operation(payload)
