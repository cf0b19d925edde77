"""领域异常定义"""

from typing import Any, Optional


class DomainException(Exception):
    """
    领域异常基类

    Attributes:
        message: 错误消息
        code: 错误代码
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class InvalidValueObjectException(DomainException):
    """值对象校验失败"""

    def __init__(self, value_object_type: str, value: Any, reason: str):
        self.value_object_type = value_object_type
        self.value = value
        super().__init__(
            message=f"Invalid {value_object_type}: {reason}",
            code="INVALID_VALUE_OBJECT",
        )


class InvalidConfigurationException(DomainException):
    """配置无法解析（邮件服务器设置或消费者名称）"""

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        super().__init__(
            message=f"Invalid configuration '{setting}': {reason}",
            code="INVALID_CONFIGURATION",
        )


class NoConsumerError(DomainException):
    """收取前未设置消费者"""

    def __init__(self):
        super().__init__(
            message="A consumer must be defined before you can fetch mail",
            code="NO_CONSUMER",
        )


class ConsumerInterfaceError(DomainException):
    """消费者未实现默认的 receive 操作"""

    def __init__(self, operation: str = "receive"):
        self.operation = operation
        super().__init__(
            message=(
                f"The consumer should at least respond to {operation}. "
                "Alternately, pass operation_names=[...] to fetch"
            ),
            code="CONSUMER_INTERFACE",
        )


class MailConnectionException(DomainException):
    """邮件服务器连接失败（网络、TLS、协议）"""

    def __init__(self, message: str, server: str, port: Optional[int]):
        self.server = server
        self.port = port
        super().__init__(
            message=f"Failed to connect to {server}:{port} - {message}",
            code="MAIL_CONNECTION_ERROR",
        )


class MailAuthenticationException(DomainException):
    """邮件服务器认证失败"""

    def __init__(
        self,
        message: str,
        server: str,
        port: Optional[int],
        username: str,
    ):
        self.server = server
        self.port = port
        self.username = username
        super().__init__(
            message=f"Authentication failed for {username} on {server}:{port} - {message}",
            code="MAIL_AUTHENTICATION_ERROR",
        )


class MessageRetrievalException(DomainException):
    """会话中的枚举、收取、删除或关闭命令失败"""

    def __init__(self, message: str, identifier: Optional[str] = None):
        self.identifier = identifier
        if identifier is not None:
            message = f"Message {identifier}: {message}"
        super().__init__(message=message, code="MESSAGE_RETRIEVAL_ERROR")
