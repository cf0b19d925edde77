"""邮件值对象模块"""

from domain.mail.value_objects.raw_message import RawMessage

__all__ = ["RawMessage"]
