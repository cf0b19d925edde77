"""ImapMailSession 单元测试"""

import imaplib
import pytest
from unittest.mock import MagicMock, patch

from domain.common.exceptions import (
    MailAuthenticationException,
    MailConnectionException,
    MessageRetrievalException,
)
from domain.mailbox.value_objects.mail_server_config import MailServerConfig
from infrastructure.mail.sessions.imap_mail_session import ImapMailSession


IMAP4_SSL = "infrastructure.mail.sessions.imap_mail_session.imaplib.IMAP4_SSL"
IMAP4 = "infrastructure.mail.sessions.imap_mail_session.imaplib.IMAP4"


def create_config(**overrides) -> MailServerConfig:
    """创建测试用 IMAP 配置"""
    values = {
        "server": "imap.example.com",
        "username": "test@example.com",
        "password": "test_password",
        "access_mode": "imap",
        "port": 993,
    }
    values.update(overrides)
    return MailServerConfig(**values)


def create_mock_email_data(subject: str = "Test Subject") -> bytes:
    """创建模拟的原始邮件数据"""
    return (
        f"From: sender@example.com\r\n"
        f"To: recipient@example.com\r\n"
        f"Subject: {subject}\r\n"
        f"\r\n"
        f"Test body content\r\n"
    ).encode("utf-8")


def create_mock_imap() -> MagicMock:
    """创建模拟 IMAP 连接"""
    imap = MagicMock()
    imap.state = "AUTH"
    imap.login.return_value = ("OK", [b"Logged in"])

    def select(mailbox):
        imap.state = "SELECTED"
        return ("OK", [b"2"])

    def close():
        imap.state = "AUTH"
        return ("OK", [b"Closed"])

    imap.select.side_effect = select
    imap.close.side_effect = close
    imap.search.return_value = ("OK", [b"1 2"])
    imap.fetch.return_value = ("OK", [(b"1 (RFC822 {100}", create_mock_email_data()), b")"])
    imap.store.return_value = ("OK", [b"1 (FLAGS (\\Deleted))"])
    imap.logout.return_value = ("BYE", [b"Logging out"])
    return imap


class TestImapMailSessionOpen:
    """连接测试"""

    @patch(IMAP4_SSL)
    def test_open_ssl_and_login(self, mock_imap_class):
        """测试 SSL 连接与登录"""
        mock_imap = create_mock_imap()
        mock_imap_class.return_value = mock_imap

        session = ImapMailSession(create_config(), timeout=5)
        session.open()

        assert session.is_open
        kwargs = mock_imap_class.call_args.kwargs
        assert kwargs["host"] == "imap.example.com"
        assert kwargs["port"] == 993
        assert kwargs["timeout"] == 5
        mock_imap.login.assert_called_once_with("test@example.com", "test_password")

    @patch(IMAP4)
    def test_open_plain_connection(self, mock_imap_class):
        """测试非 SSL 连接"""
        mock_imap_class.return_value = create_mock_imap()

        session = ImapMailSession(create_config(use_ssl=False, port=143))
        session.open()

        mock_imap_class.assert_called_once_with(host="imap.example.com", port=143, timeout=30)

    @patch(IMAP4_SSL)
    def test_connect_failure_raises_connection_error(self, mock_imap_class):
        """测试连接失败抛出 MailConnectionException"""
        mock_imap_class.side_effect = OSError("Connection refused")

        with pytest.raises(MailConnectionException) as exc_info:
            ImapMailSession(create_config()).open()

        assert "imap.example.com:993" in str(exc_info.value)

    @patch(IMAP4_SSL)
    def test_auth_failure_raises_auth_error_and_logs_out(self, mock_imap_class):
        """测试认证失败抛出 MailAuthenticationException 并登出"""
        mock_imap = create_mock_imap()
        mock_imap.login.side_effect = imaplib.IMAP4.error("Invalid credentials")
        mock_imap_class.return_value = mock_imap

        session = ImapMailSession(create_config())

        with pytest.raises(MailAuthenticationException) as exc_info:
            session.open()

        assert "test@example.com" in str(exc_info.value)
        assert not session.is_open
        mock_imap.logout.assert_called_once()


class TestImapMailSessionMessages:
    """收取与标记测试"""

    @patch(IMAP4_SSL)
    def test_list_selects_inbox_read_write(self, mock_imap_class):
        """测试以可写模式选择收件箱并搜索全部邮件"""
        mock_imap = create_mock_imap()
        mock_imap_class.return_value = mock_imap

        with ImapMailSession(create_config()) as session:
            identifiers = session.list_messages()

        assert identifiers == ["1", "2"]
        mock_imap.select.assert_called_once_with("INBOX")
        mock_imap.examine.assert_not_called()
        mock_imap.search.assert_called_once_with(None, "ALL")

    @patch(IMAP4_SSL)
    def test_list_empty_mailbox(self, mock_imap_class):
        """测试空邮箱"""
        mock_imap = create_mock_imap()
        mock_imap.search.return_value = ("OK", [b""])
        mock_imap_class.return_value = mock_imap

        with ImapMailSession(create_config()) as session:
            assert session.list_messages() == []

    @patch(IMAP4_SSL)
    def test_retrieve_fetches_rfc822(self, mock_imap_class):
        """测试 FETCH (RFC822) 收取原始字节"""
        mock_imap = create_mock_imap()
        mock_imap_class.return_value = mock_imap

        with ImapMailSession(create_config()) as session:
            session.list_messages()
            message = session.retrieve("1")

        mock_imap.fetch.assert_called_once_with("1", "(RFC822)")
        assert message.identifier == "1"
        assert message.content == create_mock_email_data()

    @patch(IMAP4_SSL)
    def test_retrieve_without_body_raises_error(self, mock_imap_class):
        """测试 FETCH 没有返回正文时抛出异常"""
        mock_imap = create_mock_imap()
        mock_imap.fetch.return_value = ("OK", [None])
        mock_imap_class.return_value = mock_imap

        with ImapMailSession(create_config()) as session:
            with pytest.raises(MessageRetrievalException):
                session.retrieve("9")

    @patch(IMAP4_SSL)
    def test_non_ok_status_raises_error(self, mock_imap_class):
        """测试非 OK 状态抛出 MessageRetrievalException"""
        mock_imap = create_mock_imap()
        mock_imap.search.return_value = ("NO", [b"search failed"])
        mock_imap_class.return_value = mock_imap

        with ImapMailSession(create_config()) as session:
            with pytest.raises(MessageRetrievalException) as exc_info:
                session.list_messages()

        assert "SEARCH failed" in exc_info.value.message

    @patch(IMAP4_SSL)
    def test_delete_sets_deleted_flag(self, mock_imap_class):
        """测试删除设置 \\Deleted 标志"""
        mock_imap = create_mock_imap()
        mock_imap_class.return_value = mock_imap

        with ImapMailSession(create_config()) as session:
            session.list_messages()
            session.delete("2")

        mock_imap.store.assert_called_once_with("2", "+FLAGS", "(\\Deleted)")


class TestImapMailSessionTeardown:
    """CLOSE 与登出测试"""

    @patch(IMAP4_SSL)
    def test_complete_closes_selected_folder(self, mock_imap_class):
        """测试 complete 执行 CLOSE 提交删除，退出时登出"""
        mock_imap = create_mock_imap()
        mock_imap_class.return_value = mock_imap

        with ImapMailSession(create_config()) as session:
            session.list_messages()
            session.complete()

        mock_imap.close.assert_called_once()
        mock_imap.logout.assert_called_once()

    @patch(IMAP4_SSL)
    def test_failure_logs_out_without_close(self, mock_imap_class):
        """测试周期失败时只登出，不 CLOSE"""
        mock_imap = create_mock_imap()
        mock_imap_class.return_value = mock_imap

        with pytest.raises(RuntimeError):
            with ImapMailSession(create_config()) as session:
                session.list_messages()
                raise RuntimeError("consumer failed")

        mock_imap.close.assert_not_called()
        mock_imap.logout.assert_called_once()

    @patch(IMAP4_SSL)
    def test_close_skips_logout_when_consumer_logged_out(self, mock_imap_class):
        """测试实时会话中消费者已登出时不重复登出"""
        mock_imap = create_mock_imap()
        mock_imap_class.return_value = mock_imap

        with ImapMailSession(create_config()) as session:
            handle = session.live_handle
            handle.state = "LOGOUT"

        assert handle is mock_imap
        mock_imap.logout.assert_not_called()

    def test_supports_live_session(self):
        """测试 IMAP 支持实时会话"""
        assert ImapMailSession(create_config()).supports_live_session is True
