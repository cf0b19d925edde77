"""create_app 测试"""

from unittest.mock import AsyncMock, Mock

from fastapi.testclient import TestClient

from application.handlers.fetch.fetch_mail_handler import FetchMailResult
from infrastructure.config.settings import Settings
from infrastructure.containers import bootstrap
from interfaces.api import create_app
from interfaces.api.routes.fetch import set_fetch_handler_getter


def make_boot(**overrides):
    values = {
        "_env_file": None,
        "mail_server": "imap.example.com",
        "mail_username": "user@example.com",
        "mail_password": "secret",
        "log_file": "",
    }
    values.update(overrides)
    return bootstrap(Settings(**values))


class TestCreateApp:
    """应用工厂测试"""

    def teardown_method(self):
        set_fetch_handler_getter(None)

    def test_health(self):
        """测试健康检查"""
        client = TestClient(create_app(make_boot()))

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_fetch_route_uses_container_handler(self):
        """测试收取路由使用容器中的处理器"""
        boot = make_boot()
        handler = Mock()
        handler.handle = AsyncMock(
            return_value=FetchMailResult(success=True, message="ok", dispatched=1, deleted=1)
        )
        boot.app.fetch_mail_handler.override(handler)

        client = TestClient(create_app(boot))
        response = client.post("/api/v1/fetch", json={"keep": True})

        assert response.status_code == 200
        assert response.json()["dispatched"] == 1
        handler.handle.assert_awaited_once()

    def test_no_consumer_returns_400(self):
        """测试未配置消费者时返回 400，不连接服务器"""
        client = TestClient(create_app(make_boot(mail_consumer="")))

        response = client.post("/api/v1/fetch", json={})

        assert response.status_code == 400
        assert "consumer must be defined" in response.json()["detail"]

    def test_unresolvable_consumer_returns_json_error(self):
        """测试 MAIL_CONSUMER 无法解析时返回 500 与 JSON 详情"""
        client = TestClient(create_app(make_boot(mail_consumer="no_such_module:Mailer")))

        response = client.post("/api/v1/fetch", json={})

        assert response.status_code == 500
        assert "no_such_module" in response.json()["detail"]

    def test_polling_starts_with_lifespan(self):
        """测试启用轮询时随应用启动和停止"""
        boot = make_boot(mail_polling_enabled=True)
        polling = Mock()
        polling.start = AsyncMock()
        polling.stop = AsyncMock()
        boot.app.mail_polling_service.override(polling)

        with TestClient(create_app(boot)):
            polling.start.assert_awaited_once()

        polling.stop.assert_awaited_once()
