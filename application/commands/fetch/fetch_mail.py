"""收取邮件命令"""

from dataclasses import dataclass, field
from typing import List, Optional

from domain.fetch.value_objects.fetch_options import DEFAULT_OPERATION, FetchOptions


@dataclass
class FetchMailCommand:
    """
    收取邮件命令

    Attributes:
        operation_names: 每封邮件调用的消费者操作，默认 ["receive"]
        keep: 是否保留服务器上的邮件，默认 False
        finish: 周期结束后是否发送 QUIT（仅 POP）
        live_session_operations: 接收实时 IMAP 连接的操作（仅 IMAP）
    """

    operation_names: List[str] = field(default_factory=lambda: [DEFAULT_OPERATION])
    keep: bool = False
    finish: bool = False
    live_session_operations: Optional[List[str]] = None

    def to_options(self) -> FetchOptions:
        """转换为收取选项值对象"""
        return FetchOptions(
            operation_names=tuple(self.operation_names),
            keep=self.keep,
            finish=self.finish,
            live_session_operations=tuple(self.live_session_operations or ()),
        )
