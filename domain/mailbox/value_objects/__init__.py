"""邮件服务器值对象模块"""

from domain.mailbox.value_objects.mailbox_enums import AccessMode, DEFAULT_ACCESS_MODE
from domain.mailbox.value_objects.mail_server_config import MailServerConfig

__all__ = [
    "AccessMode",
    "DEFAULT_ACCESS_MODE",
    "MailServerConfig",
]
