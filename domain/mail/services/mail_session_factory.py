"""邮件会话工厂接口"""

from abc import ABC, abstractmethod

from domain.fetch.value_objects.fetch_options import FetchOptions
from domain.mail.services.mail_session import MailSession
from domain.mailbox.value_objects.mail_server_config import MailServerConfig


class MailSessionFactory(ABC):
    """
    邮件会话工厂接口

    按配置中的协议（POP / IMAP）创建尚未连接的会话。
    """

    @abstractmethod
    def create(self, config: MailServerConfig, options: FetchOptions) -> MailSession:
        """
        创建会话

        Args:
            config: 邮件服务器配置
            options: 本次收取选项（POP 会话读取 finish）

        Returns:
            未打开的 MailSession
        """
        raise NotImplementedError
