"""
基础设施容器（InfraContainer）

管理所有基础设施组件：邮件会话工厂、消费者解析、服务器配置等。
依赖 ConfigContainer 获取配置。
"""

from dependency_injector import containers, providers

from infrastructure.config.settings import build_fetch_options, build_mail_server_config
from infrastructure.consumers.consumer_resolver import ConsumerResolver
from infrastructure.mail.sessions.mail_session_factory_impl import MailSessionFactoryImpl


class InfraContainer(containers.DeclarativeContainer):
    """基础设施容器 - 管理技术实现"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # ============ 邮件会话 ============

    # 会话工厂（单例）
    mail_session_factory = providers.Singleton(
        MailSessionFactoryImpl,
        timeout=config.settings.provided.mail_timeout,
    )

    # 邮件服务器配置（每次收取时重新构建，收取服务在校验通过后才调用）
    mail_server_config = providers.Factory(
        build_mail_server_config,
        settings=config.settings,
    )

    # 默认收取选项
    default_fetch_options = providers.Factory(
        build_fetch_options,
        settings=config.settings,
    )

    # ============ 消费者 ============

    consumer_resolver = providers.Singleton(ConsumerResolver)

    # 按 MAIL_CONSUMER 解析的消费者（单例）
    consumer = providers.Singleton(
        lambda resolver, name: resolver.resolve(name),
        resolver=consumer_resolver,
        name=config.settings.provided.mail_consumer,
    )
