"""Tests for MailServerConfig value object"""

import pytest

from domain.common.exceptions import InvalidValueObjectException
from domain.mailbox.value_objects.mail_server_config import MailServerConfig
from domain.mailbox.value_objects.mailbox_enums import AccessMode


def make_config(**overrides) -> MailServerConfig:
    """创建测试用配置"""
    values = {
        "server": "mail.example.com",
        "username": "user@example.com",
        "password": "secret",
    }
    values.update(overrides)
    return MailServerConfig(**values)


class TestMailServerConfig:
    """MailServerConfig 值对象测试"""

    def test_create_with_defaults(self):
        """测试使用默认值创建"""
        config = make_config()

        assert config.access_mode == AccessMode.IMAP
        assert config.port is None
        assert config.use_ssl is True
        assert config.verify_certificate is True

    def test_access_mode_from_string(self):
        """测试字符串协议自动转换为枚举"""
        config = make_config(access_mode="pop")

        assert config.access_mode is AccessMode.POP

    def test_unsupported_access_mode_raises_error(self):
        """测试不支持的协议抛出异常"""
        with pytest.raises(InvalidValueObjectException) as exc_info:
            make_config(access_mode="smtp")

        assert "Unsupported access mode" in exc_info.value.message

    def test_empty_server_raises_error(self):
        """测试空服务器地址抛出异常"""
        with pytest.raises(InvalidValueObjectException) as exc_info:
            make_config(server="  ")

        assert "Mail server cannot be empty" in exc_info.value.message

    def test_empty_username_raises_error(self):
        """测试空用户名抛出异常"""
        with pytest.raises(InvalidValueObjectException) as exc_info:
            make_config(username="")

        assert "Username cannot be empty" in exc_info.value.message

    @pytest.mark.parametrize("port", [0, -1, 65536])
    def test_invalid_port_raises_error(self, port):
        """测试端口超出范围抛出异常"""
        with pytest.raises(InvalidValueObjectException) as exc_info:
            make_config(port=port)

        assert "Invalid port number" in exc_info.value.message

    @pytest.mark.parametrize(
        "access_mode, use_ssl, expected",
        [
            (AccessMode.POP, True, 995),
            (AccessMode.POP, False, 110),
            (AccessMode.IMAP, True, 993),
            (AccessMode.IMAP, False, 143),
        ],
    )
    def test_effective_port_defaults_to_standard_port(self, access_mode, use_ssl, expected):
        """测试未配置端口时使用协议标准端口"""
        config = make_config(access_mode=access_mode, use_ssl=use_ssl)

        assert config.effective_port == expected

    def test_explicit_port_wins(self):
        """测试显式端口优先"""
        config = make_config(port=1993)

        assert config.effective_port == 1993

    def test_connection_string(self):
        """测试连接字符串"""
        assert make_config(access_mode="pop").connection_string == "pop3s://mail.example.com:995"
        assert (
            make_config(use_ssl=False, port=1143).connection_string
            == "imap://mail.example.com:1143"
        )

    def test_repr_hides_password(self):
        """测试 repr 不包含密码"""
        assert "secret" not in repr(make_config())

    def test_immutability(self):
        """测试值对象不可变性"""
        config = make_config()

        with pytest.raises(Exception):  # FrozenInstanceError
            config.server = "other.example.com"
