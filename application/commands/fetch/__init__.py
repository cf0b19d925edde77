"""收取命令模块"""

from application.commands.fetch.fetch_mail import FetchMailCommand

__all__ = ["FetchMailCommand"]
