"""收取处理器模块"""

from application.handlers.fetch.fetch_mail_handler import (
    FetchMailHandler,
    FetchMailResult,
)

__all__ = ["FetchMailHandler", "FetchMailResult"]
