"""
应用配置管理

使用 pydantic-settings 管理环境变量和配置
"""

from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.common.exceptions import InvalidConfigurationException, InvalidValueObjectException
from domain.fetch.value_objects.fetch_options import DEFAULT_OPERATION, FetchOptions
from domain.mailbox.value_objects.mail_server_config import MailServerConfig
from domain.mailbox.value_objects.mailbox_enums import AccessMode


class Settings(BaseSettings):
    """
    应用配置类

    自动从环境变量和 .env 文件读取配置
    """

    # ========== 应用环境 ==========
    app_env: Literal["test", "dev", "staging", "prod"] = "dev"
    app_name: str = "MailFetcher"
    app_version: str = "1.0.0"
    debug: bool = False

    # ========== 邮件服务器 ==========
    mail_access_mode: AccessMode = AccessMode.IMAP
    mail_server: str = ""
    mail_port: Optional[int] = None  # 为空时使用协议标准端口
    mail_username: str = ""
    mail_password: str = ""
    mail_use_ssl: bool = True
    mail_verify_certificate: bool = True
    mail_timeout: float = 30.0  # socket 超时（秒）

    # ========== 收取选项 ==========
    # 消费者的导入路径，如 "myapp.mailers:Mailer"
    mail_consumer: str = ""
    # 逗号分隔的操作名
    mail_operations: str = DEFAULT_OPERATION
    mail_keep: bool = False
    mail_finish: bool = False

    # ========== 轮询 ==========
    mail_polling_enabled: bool = False
    mail_polling_interval: float = 60.0

    # ========== 日志配置 ==========
    log_level: str = "INFO"
    log_file: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 忽略未定义的环境变量
    )

    @field_validator("mail_port", mode="before")
    @classmethod
    def _empty_port_is_none(cls, value):
        if value == "":
            return None
        return value

    @property
    def operation_names(self) -> List[str]:
        """解析后的操作名列表"""
        return [name.strip() for name in self.mail_operations.split(",") if name.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    获取配置实例（单例模式）

    Returns:
        Settings 实例
    """
    return Settings()


def build_mail_server_config(settings: Settings) -> MailServerConfig:
    """
    根据配置创建邮件服务器配置值对象

    Raises:
        InvalidConfigurationException: 服务器或用户名缺失、端口无效
    """
    if not settings.mail_server:
        raise InvalidConfigurationException("mail_server", "MAIL_SERVER is not set")

    try:
        return MailServerConfig(
            server=settings.mail_server,
            username=settings.mail_username,
            password=settings.mail_password,
            access_mode=settings.mail_access_mode,
            port=settings.mail_port,
            use_ssl=settings.mail_use_ssl,
            verify_certificate=settings.mail_verify_certificate,
        )
    except InvalidValueObjectException as e:
        raise InvalidConfigurationException("mail_server", e.message) from e


def build_fetch_options(settings: Settings) -> FetchOptions:
    """根据配置创建默认收取选项"""
    return FetchOptions(
        operation_names=settings.operation_names or (DEFAULT_OPERATION,),
        keep=settings.mail_keep,
        finish=settings.mail_finish,
    )
