"""邮件服务器配置值对象"""

from dataclasses import dataclass
from typing import Optional

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException
from domain.mailbox.value_objects.mailbox_enums import AccessMode, DEFAULT_ACCESS_MODE


# (协议, 是否 SSL) -> 标准端口
STANDARD_PORTS = {
    (AccessMode.POP, True): 995,
    (AccessMode.POP, False): 110,
    (AccessMode.IMAP, True): 993,
    (AccessMode.IMAP, False): 143,
}


@dataclass(frozen=True)
class MailServerConfig(BaseValueObject):
    """
    邮件服务器配置值对象

    封装一次收取所需的连接信息，由外部配置层创建，收取流程只读不写。

    Attributes:
        server: 邮件服务器地址
        username: 登录用户名
        password: 登录密码（明文）
        access_mode: 收取协议，默认 IMAP
        port: 服务器端口，None 表示使用协议标准端口
        use_ssl: 是否使用 SSL/TLS，默认 True
        verify_certificate: 是否校验服务器证书，默认 True
    """

    server: str
    username: str
    password: str
    access_mode: AccessMode = DEFAULT_ACCESS_MODE
    port: Optional[int] = None
    use_ssl: bool = True
    verify_certificate: bool = True

    def validate(self) -> None:
        """验证邮件服务器配置的有效性"""
        if not self.server or not self.server.strip():
            raise InvalidValueObjectException(
                value_object_type="MailServerConfig",
                value=self.server,
                reason="Mail server cannot be empty"
            )

        if not self.username or not self.username.strip():
            raise InvalidValueObjectException(
                value_object_type="MailServerConfig",
                value=self.username,
                reason="Username cannot be empty"
            )

        if not isinstance(self.access_mode, AccessMode):
            try:
                object.__setattr__(self, "access_mode", AccessMode(self.access_mode))
            except ValueError:
                raise InvalidValueObjectException(
                    value_object_type="MailServerConfig",
                    value=self.access_mode,
                    reason=f"Unsupported access mode: {self.access_mode}. Must be 'pop' or 'imap'"
                )

        if self.port is not None and not 1 <= self.port <= 65535:
            raise InvalidValueObjectException(
                value_object_type="MailServerConfig",
                value=self.port,
                reason=f"Invalid port number: {self.port}. Must be between 1 and 65535"
            )

    @property
    def effective_port(self) -> int:
        """返回实际连接端口（未配置时使用协议标准端口）"""
        if self.port is not None:
            return self.port
        return STANDARD_PORTS[(self.access_mode, self.use_ssl)]

    @property
    def connection_string(self) -> str:
        """返回连接字符串格式"""
        protocol = "pop3" if self.access_mode == AccessMode.POP else "imap"
        if self.use_ssl:
            protocol += "s"
        return f"{protocol}://{self.server}:{self.effective_port}"

    def __repr__(self) -> str:
        return (
            f"MailServerConfig(access_mode={self.access_mode.value!r}, "
            f"server={self.server!r}, port={self.port!r}, username={self.username!r})"
        )
