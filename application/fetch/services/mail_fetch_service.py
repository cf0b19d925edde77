"""邮件收取服务 - 收取-分发-删除周期"""

import logging
from typing import Any, Callable, Optional

from domain.common.exceptions import ConsumerInterfaceError, NoConsumerError
from domain.fetch.services.message_dispatcher import MessageDispatcher
from domain.fetch.value_objects.fetch_options import DEFAULT_OPERATION, FetchOptions
from domain.fetch.value_objects.fetch_result import FetchResult
from domain.mail.services.mail_session import MailSession
from domain.mail.services.mail_session_factory import MailSessionFactory
from domain.mailbox.value_objects.mail_server_config import MailServerConfig


class MailFetchService:
    """
    邮件收取服务

    编排会话、分发器与删除策略，完成一次收取周期：

    1. 校验消费者（在任何网络 I/O 之前）
    2. 加载邮件服务器配置，按协议创建会话
    3. 逐封收取 -> 依次调用消费者操作 -> 评估删除策略
    4. 提交删除并释放会话

    周期内不捕获、不重试任何错误，第一个失败即中止并抛给调用方。
    会话在所有退出路径上都会释放。
    """

    def __init__(
        self,
        consumer: Any,
        config_loader: Callable[[], MailServerConfig],
        session_factory: MailSessionFactory,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化邮件收取服务

        Args:
            consumer: 消费者对象，None 表示未设置
            config_loader: 返回邮件服务器配置的函数（校验通过后才调用）
            session_factory: 会话工厂
            logger: 可选的日志记录器
        """
        self._consumer = consumer
        self._config_loader = config_loader
        self._session_factory = session_factory
        self._logger = logger or logging.getLogger(__name__)

    @property
    def consumer(self) -> Any:
        return self._consumer

    def fetch(self, options: Optional[FetchOptions] = None) -> FetchResult:
        """
        执行一次收取周期

        Args:
            options: 收取选项，None 时使用默认值（receive，全部删除）

        Returns:
            FetchResult 周期汇总

        Raises:
            NoConsumerError: 未设置消费者
            ConsumerInterfaceError: 只配置了默认操作且消费者不提供 receive
            MailConnectionException / MailAuthenticationException /
            MessageRetrievalException: 传输错误，中止剩余邮件
        """
        options = options or FetchOptions()
        self.check_consumer(options)

        config = self._config_loader()
        dispatcher = MessageDispatcher(self._consumer, logger=self._logger)
        session = self._session_factory.create(config, options)

        self._logger.info(
            f"Starting fetch cycle on {config.connection_string} as {config.username}"
        )
        with session:
            if options.use_live_session:
                if session.supports_live_session:
                    return self._dispatch_live_session(session, dispatcher, options, config)
                self._logger.warning(
                    f"Live session dispatch is not supported over {config.access_mode.value}, "
                    "falling back to message iteration"
                )
            result = self._process_messages(session, dispatcher, options, config)

        self._logger.info(
            f"Fetch cycle complete: {result.dispatched} dispatched, {result.deleted} deleted"
        )
        return result

    def check_consumer(self, options: FetchOptions) -> None:
        """
        校验消费者

        只在操作列表恰好是默认的单个 receive 时检查能力；
        自定义操作列表不做预检查。
        """
        if self._consumer is None:
            raise NoConsumerError()

        if options.uses_default_operation and not MessageDispatcher.responds_to(
            self._consumer, DEFAULT_OPERATION
        ):
            raise ConsumerInterfaceError(DEFAULT_OPERATION)

    def _process_messages(
        self,
        session: MailSession,
        dispatcher: MessageDispatcher,
        options: FetchOptions,
        config: MailServerConfig,
    ) -> FetchResult:
        """逐封收取、分发、删除"""
        policy = options.deletion_policy
        dispatched = 0
        deleted = 0

        for identifier in session.list_messages():
            message = session.retrieve(identifier)
            dispatcher.dispatch(options.operation_names, message)
            dispatched += 1

            if policy.should_delete(message):
                session.delete(identifier)
                deleted += 1

        session.complete()
        return FetchResult(
            access_mode=config.access_mode,
            dispatched=dispatched,
            deleted=deleted,
        )

    def _dispatch_live_session(
        self,
        session: MailSession,
        dispatcher: MessageDispatcher,
        options: FetchOptions,
        config: MailServerConfig,
    ) -> FetchResult:
        """把实时连接交给消费者，由消费者完成文件夹选择、枚举与关闭"""
        dispatcher.dispatch(options.live_session_operations, session.live_handle)
        self._logger.info(
            f"Live session handed to {', '.join(options.live_session_operations)}"
        )
        return FetchResult(access_mode=config.access_mode, live_session=True)
