"""IMAP 邮件会话实现"""

import imaplib
import logging
from typing import List, Optional, Union

from domain.common.exceptions import (
    MailAuthenticationException,
    MailConnectionException,
    MessageRetrievalException,
)
from domain.mail.services.mail_session import MailSession
from domain.mail.value_objects.raw_message import RawMessage
from domain.mailbox.value_objects.mail_server_config import MailServerConfig
from infrastructure.mail.sessions.tls import create_ssl_context


class ImapMailSession(MailSession):
    """
    IMAP 邮件会话实现

    使用 Python 标准库 imaplib：
    - 以可写模式 SELECT 收件箱，SEARCH ALL 枚举邮件
    - FETCH (RFC822) 收取原始字节
    - STORE +FLAGS (\\Deleted) 立即标记单封邮件
    - 枚举结束后 CLOSE 文件夹，服务器在此删除已标记的邮件

    实时会话模式下，连接对象直接交给消费者，
    由消费者负责选择文件夹、枚举、收取与关闭。
    """

    INBOX = "INBOX"
    DEFAULT_TIMEOUT = 30  # 秒

    supports_live_session = True

    def __init__(
        self,
        config: MailServerConfig,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化 IMAP 会话

        Args:
            config: 邮件服务器配置
            timeout: socket 超时（秒），None 表示不限
            logger: 可选的日志记录器
        """
        self._config = config
        self._timeout = timeout
        self._logger = logger or logging.getLogger(__name__)
        self._imap: Optional[Union[imaplib.IMAP4, imaplib.IMAP4_SSL]] = None

    @property
    def is_open(self) -> bool:
        return self._imap is not None

    @property
    def live_handle(self) -> Union[imaplib.IMAP4, imaplib.IMAP4_SSL]:
        return self._require_open()

    def open(self) -> None:
        server = self._config.server
        port = self._config.effective_port

        try:
            self._logger.debug(f"Connecting to {self._config.connection_string}")
            if self._config.use_ssl:
                imap = imaplib.IMAP4_SSL(
                    host=server,
                    port=port,
                    ssl_context=create_ssl_context(self._config.verify_certificate),
                    timeout=self._timeout,
                )
            else:
                imap = imaplib.IMAP4(host=server, port=port, timeout=self._timeout)
        except (OSError, imaplib.IMAP4.error) as e:
            raise MailConnectionException(message=str(e), server=server, port=port) from e

        try:
            self._logger.debug(f"Authenticating as {self._config.username}")
            imap.login(self._config.username, self._config.password)
        except imaplib.IMAP4.error as e:
            self._logout(imap)
            raise MailAuthenticationException(
                message=str(e),
                server=server,
                port=port,
                username=self._config.username,
            ) from e
        except OSError as e:
            self._logout(imap)
            raise MailConnectionException(message=str(e), server=server, port=port) from e

        self._imap = imap
        self._logger.info(f"Successfully connected to {server}:{port} (IMAP)")

    def list_messages(self) -> List[str]:
        imap = self._require_open()
        self._check(imap.select, self.INBOX, command="SELECT")
        data = self._check(imap.search, None, "ALL", command="SEARCH")

        identifiers = [item.decode("ascii") for item in (data[0] or b"").split()]
        self._logger.info(f"Found {len(identifiers)} message(s) in {self.INBOX}")
        return identifiers

    def retrieve(self, identifier: str) -> RawMessage:
        imap = self._require_open()
        data = self._check(imap.fetch, identifier, "(RFC822)", command="FETCH", identifier=identifier)

        # data: [(b'1 (RFC822 {size}', b'<原始邮件>'), b')']
        for part in data:
            if isinstance(part, tuple) and len(part) >= 2 and isinstance(part[1], bytes):
                return RawMessage(identifier=identifier, content=part[1])

        raise MessageRetrievalException(message="FETCH returned no message body", identifier=identifier)

    def delete(self, identifier: str) -> None:
        imap = self._require_open()
        self._check(
            imap.store, identifier, "+FLAGS", "(\\Deleted)",
            command="STORE", identifier=identifier,
        )
        self._logger.debug(f"Flagged message {identifier} as deleted")

    def complete(self) -> None:
        """CLOSE 当前文件夹，提交已标记的删除"""
        imap = self._require_open()
        if imap.state == "SELECTED":
            self._check(imap.close, command="CLOSE")

    def close(self) -> None:
        if self._imap is None:
            return
        imap, self._imap = self._imap, None
        self._logout(imap)

    def _require_open(self) -> Union[imaplib.IMAP4, imaplib.IMAP4_SSL]:
        if self._imap is None:
            raise MessageRetrievalException(message="IMAP session is not open")
        return self._imap

    def _check(self, method, *args, command: str, identifier: Optional[str] = None):
        """执行 IMAP 命令，非 OK 状态或协议错误转为 MessageRetrievalException"""
        try:
            status, data = method(*args)
        except (imaplib.IMAP4.error, OSError) as e:
            raise MessageRetrievalException(
                message=f"{command} failed: {e}", identifier=identifier
            ) from e

        if status != "OK":
            raise MessageRetrievalException(
                message=f"{command} failed: {status} {data!r}", identifier=identifier
            )
        return data

    def _logout(self, imap: Union[imaplib.IMAP4, imaplib.IMAP4_SSL]) -> None:
        # 实时会话模式下消费者可能已经 LOGOUT
        if imap.state == "LOGOUT":
            return
        try:
            imap.logout()
        except (imaplib.IMAP4.error, OSError) as e:
            self._logger.debug(f"Error during logout: {e}")
