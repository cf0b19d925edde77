"""FastAPI 应用工厂"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from infrastructure.config.settings import Settings
from infrastructure.containers import Bootstrap, bootstrap
from infrastructure.logging.logging_config import configure_logging
from interfaces.api.routes.fetch import router as fetch_router, set_fetch_handler_getter


def create_app(boot: Optional[Bootstrap] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    创建 FastAPI 应用

    - 装配 DI 容器并连接路由的 handler getter
    - 配置日志
    - MAIL_POLLING_ENABLED 为 true 时随应用启动/停止轮询服务

    Args:
        boot: 已装配的容器，None 时调用 bootstrap()
        settings: 可选的配置实例

    Returns:
        FastAPI 应用
    """
    boot = boot or bootstrap(settings)
    settings = boot.config.settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        polling_service = None
        if settings.mail_polling_enabled:
            polling_service = boot.app.mail_polling_service()
            await polling_service.start()
        try:
            yield
        finally:
            if polling_service is not None:
                await polling_service.stop()

    app = FastAPI(
        title=settings.app_name,
        description="邮件收取服务 - POP3/IMAP 收取、分发给消费者、按策略删除",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.bootstrap = boot

    # 注册 Handler Getter（连接 DI 容器到路由）
    set_fetch_handler_getter(boot.app.fetch_mail_handler)

    app.include_router(fetch_router, prefix="/api/v1", tags=["收取"])

    @app.get("/health")
    async def health():
        """健康检查"""
        return {"status": "healthy"}

    return app
