"""原始邮件值对象"""

from dataclasses import dataclass
from email import policy
from email.message import EmailMessage
from email.parser import BytesHeaderParser
from typing import Optional

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException


@dataclass(frozen=True)
class RawMessage(BaseValueObject):
    """
    原始邮件值对象

    表示从服务器收取的一封邮件的原始字节。收取流程不解释内容，
    只原样传递给消费者；头部字段仅供消费者和删除谓词查询，
    按需从头部解析，不解析 MIME 正文。

    Attributes:
        identifier: 会话内的邮件标识（POP 邮件编号 / IMAP 序号）
        content: RFC822 格式的原始字节
    """

    identifier: str
    content: bytes

    def validate(self) -> None:
        """验证原始邮件的有效性"""
        if not isinstance(self.content, (bytes, bytearray)):
            raise InvalidValueObjectException(
                value_object_type="RawMessage",
                value=type(self.content).__name__,
                reason="Message content must be bytes"
            )

    @property
    def headers(self) -> EmailMessage:
        """解析后的头部（不含正文）"""
        return BytesHeaderParser(policy=policy.default).parsebytes(bytes(self.content))

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        获取指定头部字段（已解码）

        Args:
            name: 头部名称，不区分大小写
            default: 头部不存在时的返回值

        Returns:
            头部值字符串
        """
        value = self.headers.get(name)
        if value is None:
            return default
        return str(value)

    @property
    def subject(self) -> str:
        """邮件主题"""
        return self.header("Subject", "") or ""

    @property
    def from_address(self) -> str:
        """发件人"""
        return self.header("From", "") or ""

    @property
    def message_id(self) -> Optional[str]:
        """Message-ID 头部"""
        return self.header("Message-ID")

    @property
    def size(self) -> int:
        """原始字节大小"""
        return len(self.content)

    def __repr__(self) -> str:
        return f"RawMessage(identifier={self.identifier!r}, size={self.size})"
