"""日志配置"""

import logging
import os
from typing import Optional

from infrastructure.config.settings import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"


def configure_logging(settings: Settings, root: Optional[logging.Logger] = None) -> logging.Logger:
    """
    按配置初始化根日志记录器

    - 控制台输出
    - log_file 非空时额外写入文件（自动创建目录）

    重复调用只替换本函数添加的处理器。

    Args:
        settings: 应用配置
        root: 要配置的日志记录器，默认根记录器

    Returns:
        配置后的日志记录器
    """
    root = root or logging.getLogger()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    root.setLevel(level)

    for handler in list(root.handlers):
        if getattr(handler, "_mail_fetcher", False):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler()]

    if settings.log_file:
        log_dir = os.path.dirname(settings.log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._mail_fetcher = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    return root
