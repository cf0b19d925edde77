"""收取应用服务"""

from application.fetch.services.mail_fetch_service import MailFetchService

__all__ = ["MailFetchService"]
