"""邮件领域服务"""

from domain.mail.services.mail_session import MailSession
from domain.mail.services.mail_session_factory import MailSessionFactory

__all__ = ["MailSession", "MailSessionFactory"]
