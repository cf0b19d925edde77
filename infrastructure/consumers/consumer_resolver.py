"""消费者解析器"""

import importlib
import logging
from typing import Any, Optional

from domain.common.exceptions import InvalidConfigurationException


class ConsumerResolver:
    """
    根据导入路径解析消费者对象

    支持两种写法：
    - "package.module:Attribute"
    - "package.module.Attribute"

    冒号后的部分可以是点分的属性链，如 "app.mailers:Registry.mailer"。
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def resolve(self, name: Optional[str]) -> Any:
        """
        解析消费者

        Args:
            name: 导入路径，为空时返回 None（收取时抛出 NoConsumerError）

        Returns:
            消费者对象（类、模块或实例）

        Raises:
            InvalidConfigurationException: 模块或属性不存在
        """
        if not name or not name.strip():
            return None

        name = name.strip()
        if ":" in name:
            module_name, _, attr_path = name.partition(":")
        else:
            module_name, _, attr_path = name.rpartition(".")

        if not module_name or not attr_path:
            raise InvalidConfigurationException(
                "mail_consumer", f"'{name}' is not a valid import path"
            )

        try:
            target: Any = importlib.import_module(module_name)
        except ImportError as e:
            raise InvalidConfigurationException(
                "mail_consumer", f"cannot import module '{module_name}': {e}"
            ) from e

        for attr in attr_path.split("."):
            try:
                target = getattr(target, attr)
            except AttributeError as e:
                raise InvalidConfigurationException(
                    "mail_consumer", f"'{module_name}' has no attribute '{attr_path}'"
                ) from e

        self._logger.debug(f"Resolved consumer {name} -> {target!r}")
        return target
