"""收取周期调度器接口"""

from abc import ABC, abstractmethod
from typing import Optional

from domain.fetch.value_objects.fetch_result import FetchResult


class MailPollingService(ABC):
    """
    收取周期调度器

    按固定间隔重复执行收取周期。周期之间严格串行；
    单个周期失败只记录，不重试，下一个间隔照常执行。
    """

    DEFAULT_INTERVAL: float = 60.0  # 秒

    @property
    @abstractmethod
    def is_running(self) -> bool:
        raise NotImplementedError

    @property
    @abstractmethod
    def interval(self) -> float:
        raise NotImplementedError

    @property
    @abstractmethod
    def last_result(self) -> Optional[FetchResult]:
        """最近一次成功周期的结果"""
        raise NotImplementedError

    @property
    @abstractmethod
    def last_error(self) -> Optional[Exception]:
        """最近一次周期的异常，成功后清空"""
        raise NotImplementedError

    @abstractmethod
    async def start(self) -> None:
        """启动调度，立即执行一次收取；重复调用无效"""
        raise NotImplementedError

    @abstractmethod
    async def stop(self) -> None:
        """停止调度；未运行时无效"""
        raise NotImplementedError

    @abstractmethod
    async def poll_once(self) -> Optional[FetchResult]:
        """
        执行一次收取周期

        Returns:
            FetchResult，失败时返回 None（异常记录在 last_error）
        """
        raise NotImplementedError
