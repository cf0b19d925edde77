"""
应用容器（AppContainer）

管理应用层组件：收取服务、命令处理器、轮询服务。
依赖 InfraContainer 获取基础设施。
"""

from dependency_injector import containers, providers

from application.fetch.services.mail_fetch_service import MailFetchService
from application.handlers.fetch.fetch_mail_handler import FetchMailHandler
from application.mail.services.async_mail_polling_service import AsyncMailPollingService


class AppContainer(containers.DeclarativeContainer):
    """应用容器 - 管理应用层服务"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # 依赖基础设施容器
    infra = providers.DependenciesContainer()

    # ============ 应用服务 ============

    # 邮件收取服务
    # 注意: mail_server_config 使用 .provider 传递工厂，校验消费者之后才加载配置
    mail_fetch_service = providers.Singleton(
        MailFetchService,
        consumer=infra.consumer,
        config_loader=infra.mail_server_config.provider,
        session_factory=infra.mail_session_factory,
    )

    # ============ 命令处理器 ============

    fetch_mail_handler = providers.Factory(
        FetchMailHandler,
        fetch_service=mail_fetch_service,
    )

    # ============ 轮询 ============

    # 邮件轮询服务（单例，整个应用只需一个实例）
    mail_polling_service = providers.Singleton(
        AsyncMailPollingService,
        fetch_service=mail_fetch_service,
        options=infra.default_fetch_options,
        interval=config.settings.provided.mail_polling_interval,
    )
