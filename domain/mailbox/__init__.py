"""
邮件服务器界限上下文

提供连接邮件服务器所需的领域模型，包括：
- MailServerConfig 值对象
- AccessMode 枚举
"""

from domain.mailbox.value_objects.mailbox_enums import AccessMode, DEFAULT_ACCESS_MODE
from domain.mailbox.value_objects.mail_server_config import MailServerConfig

__all__ = [
    "AccessMode",
    "DEFAULT_ACCESS_MODE",
    "MailServerConfig",
]
