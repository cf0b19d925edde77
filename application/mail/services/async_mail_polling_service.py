"""异步邮件轮询服务实现"""

import asyncio
import logging
import threading
from datetime import datetime, timezone
from typing import Optional

from application.fetch.services.mail_fetch_service import MailFetchService
from application.mail.services.mail_polling_service import MailPollingService
from domain.fetch.value_objects.fetch_options import FetchOptions
from domain.fetch.value_objects.fetch_result import FetchResult


class AsyncMailPollingService(MailPollingService):
    """
    异步邮件轮询服务实现

    使用 asyncio 周期性执行收取周期：
    - 启动后立即执行第一次收取
    - 收取周期是阻塞的，在线程中执行，避免阻塞事件循环
    - 同一时刻最多一个周期在运行
    - 某个周期失败只记录日志，下一个周期照常调度
    - 优雅停止
    """

    def __init__(
        self,
        fetch_service: MailFetchService,
        options: Optional[FetchOptions] = None,
        interval: float = MailPollingService.DEFAULT_INTERVAL,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化异步邮件轮询服务

        Args:
            fetch_service: 邮件收取服务
            options: 每个周期使用的收取选项，None 表示默认值
            interval: 轮询间隔（秒）
            logger: 可选的日志记录器
        """
        self._fetch_service = fetch_service
        self._options = options
        self._interval = interval
        self._logger = logger or logging.getLogger(__name__)

        self._task: Optional[asyncio.Task] = None
        self._running = False
        self._last_result: Optional[FetchResult] = None
        self._last_error: Optional[Exception] = None
        # 周期互斥，跨 stop()/start() 也不重叠
        self._cycle_lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        """检查轮询服务是否正在运行"""
        return self._running and self._task is not None

    @property
    def interval(self) -> float:
        """获取轮询间隔（秒）"""
        return self._interval

    @property
    def last_result(self) -> Optional[FetchResult]:
        """最近一次成功周期的结果"""
        return self._last_result

    @property
    def last_error(self) -> Optional[Exception]:
        """最近一次周期的错误，成功后清空"""
        return self._last_error

    async def start(self) -> None:
        """
        启动轮询服务

        启动后立即执行第一次收取，之后按配置的间隔周期性执行。
        """
        if self._running:
            self._logger.warning("Polling service already running")
            return

        self._running = True
        self._task = asyncio.create_task(self._polling_loop())
        self._logger.info(f"Mail polling service started (interval={self._interval}s)")

    async def stop(self) -> None:
        """
        停止轮询服务

        取消轮询任务；正在线程中执行的周期会运行到结束。
        """
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        self._logger.info("Mail polling service stopped")

    async def _polling_loop(self) -> None:
        """轮询主循环"""
        # 启动后立即执行第一次收取
        await self.poll_once()

        while self._running:
            await asyncio.sleep(self._interval)
            if self._running:  # 再次检查，防止 sleep 期间被停止
                await self.poll_once()

    async def poll_once(self) -> Optional[FetchResult]:
        """
        执行一次收取周期

        Returns:
            成功时返回 FetchResult，失败时返回 None（错误记录在 last_error）
        """
        poll_start = datetime.now(timezone.utc)
        self._logger.debug(f"Starting mail polling cycle at {poll_start}")

        try:
            result = await asyncio.to_thread(self._run_cycle)
        except Exception as e:
            self._last_error = e
            self._logger.error(f"Mail polling cycle failed: {e}")
            return None

        self._last_result = result
        self._last_error = None
        poll_duration = (datetime.now(timezone.utc) - poll_start).total_seconds()
        self._logger.info(
            f"Polling cycle complete: {result.dispatched} dispatched, "
            f"{result.deleted} deleted, {poll_duration:.2f}s"
        )
        return result

    def _run_cycle(self) -> FetchResult:
        """在工作线程中串行执行收取周期"""
        with self._cycle_lock:
            return self._fetch_service.fetch(self._options)
