"""POP3 / IMAP4 邮件会话实现"""

from infrastructure.mail.sessions.pop3_mail_session import Pop3MailSession
from infrastructure.mail.sessions.imap_mail_session import ImapMailSession
from infrastructure.mail.sessions.mail_session_factory_impl import MailSessionFactoryImpl

__all__ = ["Pop3MailSession", "ImapMailSession", "MailSessionFactoryImpl"]
