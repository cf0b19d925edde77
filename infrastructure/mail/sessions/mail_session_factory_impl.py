"""邮件会话工厂实现"""

import logging
from typing import Optional

from domain.fetch.value_objects.fetch_options import FetchOptions
from domain.mail.services.mail_session import MailSession
from domain.mail.services.mail_session_factory import MailSessionFactory
from domain.mailbox.value_objects.mail_server_config import MailServerConfig
from domain.mailbox.value_objects.mailbox_enums import AccessMode
from infrastructure.mail.sessions.imap_mail_session import ImapMailSession
from infrastructure.mail.sessions.pop3_mail_session import Pop3MailSession


class MailSessionFactoryImpl(MailSessionFactory):
    """按配置的协议创建 POP3 或 IMAP 会话"""

    def __init__(
        self,
        timeout: Optional[float] = 30.0,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            timeout: 传给会话的 socket 超时（秒）
            logger: 可选的日志记录器
        """
        self._timeout = timeout
        self._logger = logger

    def create(self, config: MailServerConfig, options: FetchOptions) -> MailSession:
        if config.access_mode == AccessMode.POP:
            return Pop3MailSession(
                config,
                finish=options.finish,
                timeout=self._timeout,
                logger=self._logger,
            )
        return ImapMailSession(config, timeout=self._timeout, logger=self._logger)
