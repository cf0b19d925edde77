"""日志配置"""

from infrastructure.logging.logging_config import configure_logging

__all__ = ["configure_logging"]
