"""收取邮件处理器"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from application.commands.fetch.fetch_mail import FetchMailCommand
from application.fetch.services.mail_fetch_service import MailFetchService
from domain.common.exceptions import DomainException


@dataclass
class FetchMailResult:
    """
    收取邮件结果

    Attributes:
        success: 是否成功
        message: 结果消息
        dispatched: 分发的邮件数
        deleted: 删除的邮件数
        live_session: 是否为实时会话模式
        error_code: 错误代码（失败时）
    """

    success: bool
    message: str = ""
    dispatched: int = 0
    deleted: int = 0
    live_session: bool = False
    error_code: Optional[str] = None


class FetchMailHandler:
    """
    收取邮件处理器

    业务流程：
    1. 命令转换为收取选项（参数校验）
    2. 在工作线程中执行阻塞的收取周期
    3. 领域异常转换为失败结果
    """

    def __init__(
        self,
        fetch_service: MailFetchService,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化处理器

        Args:
            fetch_service: 邮件收取服务
            logger: 可选的日志记录器
        """
        self._fetch_service = fetch_service
        self._logger = logger or logging.getLogger(__name__)

    async def handle(self, command: FetchMailCommand) -> FetchMailResult:
        """
        处理收取邮件命令

        Args:
            command: 收取邮件命令

        Returns:
            FetchMailResult 处理结果
        """
        try:
            options = command.to_options()
            result = await asyncio.to_thread(self._fetch_service.fetch, options)
        except DomainException as e:
            self._logger.warning(f"Fetch failed: {e.message}")
            return FetchMailResult(
                success=False,
                message=e.message,
                error_code=e.code,
            )

        if result.live_session:
            message = "Live session dispatched"
        else:
            message = f"Fetched {result.dispatched} message(s), deleted {result.deleted}"

        return FetchMailResult(
            success=True,
            message=message,
            dispatched=result.dispatched,
            deleted=result.deleted,
            live_session=result.live_session,
        )
