"""
依赖注入容器

用法：
    from infrastructure.containers import bootstrap

    boot = bootstrap()
    service = boot.app.mail_fetch_service()
"""

from dataclasses import dataclass
from typing import Optional

from infrastructure.config.settings import Settings
from infrastructure.containers.application import AppContainer
from infrastructure.containers.config import ConfigContainer
from infrastructure.containers.infrastructure import InfraContainer


@dataclass
class Bootstrap:
    """已装配的容器集合"""

    config: ConfigContainer
    infra: InfraContainer
    app: AppContainer


def bootstrap(settings: Optional[Settings] = None) -> Bootstrap:
    """
    装配所有容器

    Args:
        settings: 可选的配置实例（测试时覆盖环境变量配置）

    Returns:
        Bootstrap 容器集合
    """
    config = ConfigContainer()
    if settings is not None:
        config.settings.override(settings)

    infra = InfraContainer(config=config)
    app = AppContainer(config=config, infra=infra)
    return Bootstrap(config=config, infra=infra, app=app)


__all__ = ["AppContainer", "Bootstrap", "ConfigContainer", "InfraContainer", "bootstrap"]
