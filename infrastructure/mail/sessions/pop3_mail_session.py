"""POP3 邮件会话实现"""

import logging
import poplib
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


class Pop3MailSession(MailSession):
    """
    POP3 邮件会话实现

    使用 Python 标准库 poplib：
    - LIST 得到周期开始时的邮件快照
    - RETR 收取原始字节
    - DELE 立即标记单封邮件删除
    - finish 为 True 时周期结束发送 QUIT；否则只断开 socket。
      部分服务器（如 Gmail）在收到 QUIT 后会重置 POP 访问状态，
      针对这类服务器应保持 finish=False
    """

    DEFAULT_TIMEOUT = 30  # 秒

    def __init__(
        self,
        config: MailServerConfig,
        finish: bool = False,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化 POP3 会话

        Args:
            config: 邮件服务器配置
            finish: 周期结束后是否发送 QUIT
            timeout: socket 超时（秒），None 表示不限
            logger: 可选的日志记录器
        """
        self._config = config
        self._finish = finish
        self._timeout = timeout
        self._logger = logger or logging.getLogger(__name__)
        self._pop: Optional[Union[poplib.POP3, poplib.POP3_SSL]] = None

    @property
    def is_open(self) -> bool:
        return self._pop is not None

    @property
    def finish(self) -> bool:
        return self._finish

    def open(self) -> None:
        server = self._config.server
        port = self._config.effective_port

        try:
            self._logger.debug(f"Connecting to {self._config.connection_string}")
            if self._config.use_ssl:
                pop = poplib.POP3_SSL(
                    server,
                    port,
                    context=create_ssl_context(self._config.verify_certificate),
                    timeout=self._timeout,
                )
            else:
                pop = poplib.POP3(server, port, timeout=self._timeout)
        except (OSError, poplib.error_proto) as e:
            raise MailConnectionException(message=str(e), server=server, port=port) from e

        try:
            self._logger.debug(f"Authenticating as {self._config.username}")
            pop.user(self._config.username)
            pop.pass_(self._config.password)
        except poplib.error_proto as e:
            self._drop(pop)
            raise MailAuthenticationException(
                message=str(e),
                server=server,
                port=port,
                username=self._config.username,
            ) from e
        except OSError as e:
            self._drop(pop)
            raise MailConnectionException(message=str(e), server=server, port=port) from e

        self._pop = pop
        self._logger.info(f"Successfully connected to {server}:{port} (POP3)")

    def list_messages(self) -> List[str]:
        pop = self._require_open()
        try:
            _, listings, _ = pop.list()
        except (poplib.error_proto, OSError) as e:
            raise MessageRetrievalException(message=f"LIST failed: {e}") from e

        # 每行格式为 b"<编号> <字节数>"
        identifiers = [line.split()[0].decode("ascii") for line in listings if line.strip()]
        self._logger.info(f"Found {len(identifiers)} message(s) on {self._config.server}")
        return identifiers

    def retrieve(self, identifier: str) -> RawMessage:
        pop = self._require_open()
        try:
            _, lines, _ = pop.retr(int(identifier))
        except (poplib.error_proto, OSError) as e:
            raise MessageRetrievalException(message=f"RETR failed: {e}", identifier=identifier) from e
        return RawMessage(identifier=identifier, content=b"\r\n".join(lines) + b"\r\n")

    def delete(self, identifier: str) -> None:
        pop = self._require_open()
        try:
            pop.dele(int(identifier))
        except (poplib.error_proto, OSError) as e:
            raise MessageRetrievalException(message=f"DELE failed: {e}", identifier=identifier) from e
        self._logger.debug(f"Marked message {identifier} for deletion")

    def complete(self) -> None:
        """finish 为 True 时发送 QUIT，服务器在此提交 DELE"""
        if not self._finish:
            return

        pop = self._require_open()
        try:
            pop.quit()
        except (poplib.error_proto, OSError) as e:
            raise MessageRetrievalException(message=f"QUIT failed: {e}") from e
        finally:
            self._pop = None
        self._logger.debug(f"POP3 session to {self._config.server} finished")

    def close(self) -> None:
        """未发送 QUIT 时只关闭 socket"""
        if self._pop is None:
            return
        pop, self._pop = self._pop, None
        self._drop(pop)

    def _require_open(self) -> Union[poplib.POP3, poplib.POP3_SSL]:
        if self._pop is None:
            raise MessageRetrievalException(message="POP3 session is not open")
        return self._pop

    def _drop(self, pop: Union[poplib.POP3, poplib.POP3_SSL]) -> None:
        try:
            pop.close()
        except OSError as e:
            self._logger.debug(f"Error during close: {e}")
