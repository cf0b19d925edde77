"""邮件会话接口"""

from abc import ABC, abstractmethod
from typing import Any, List

from domain.mail.value_objects.raw_message import RawMessage


class MailSession(ABC):
    """
    邮件会话接口

    一次收取周期内与邮件服务器的一个已认证连接。
    收取流程按统一顺序驱动会话：

        with session:
            for identifier in session.list_messages():
                message = session.retrieve(identifier)
                ...
                session.delete(identifier)
            session.complete()

    POP3 与 IMAP4 的差异（立即删除 vs 标记后 CLOSE 生效、
    是否发送 QUIT）封装在具体实现内部。

    作为上下文管理器使用时，进入时 open()，退出时无论成功失败都 close()。
    """

    supports_live_session: bool = False
    """是否支持把底层连接直接交给消费者（仅 IMAP）"""

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """连接是否已建立"""
        raise NotImplementedError

    @abstractmethod
    def open(self) -> None:
        """
        建立连接并认证

        Raises:
            MailConnectionException: 连接失败
            MailAuthenticationException: 认证失败
        """
        raise NotImplementedError

    @abstractmethod
    def list_messages(self) -> List[str]:
        """
        枚举当前待收取的邮件

        Returns:
            邮件标识列表（周期开始时的快照，按服务器顺序）

        Raises:
            MessageRetrievalException: 枚举失败
        """
        raise NotImplementedError

    @abstractmethod
    def retrieve(self, identifier: str) -> RawMessage:
        """
        收取单封邮件的原始字节

        Raises:
            MessageRetrievalException: 收取失败
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, identifier: str) -> None:
        """
        删除（或标记删除）单封邮件，立即对该邮件生效

        Raises:
            MessageRetrievalException: 删除命令失败
        """
        raise NotImplementedError

    @abstractmethod
    def complete(self) -> None:
        """枚举全部处理完成后调用，提交删除"""
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        """释放连接，可重复调用"""
        raise NotImplementedError

    @property
    def live_handle(self) -> Any:
        """
        底层协议连接对象（实时会话模式）

        Raises:
            NotImplementedError: 该协议不支持实时会话模式
        """
        raise NotImplementedError(
            f"{type(self).__name__} does not support live session dispatch"
        )

    def __enter__(self) -> "MailSession":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
