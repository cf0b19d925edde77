"""收取选项值对象"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple, Union

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException
from domain.fetch.services.deletion_policy import DeletionPolicy
from domain.mail.value_objects.raw_message import RawMessage


DEFAULT_OPERATION = "receive"

OperationNames = Union[str, Iterable[str]]


def _normalize_names(names: Optional[OperationNames]) -> Tuple[str, ...]:
    """单个名称包装为元组，列表转为元组"""
    if names is None:
        return ()
    if isinstance(names, str):
        return (names,)
    return tuple(names)


@dataclass(frozen=True)
class FetchOptions(BaseValueObject):
    """
    收取选项值对象

    每次调用 fetch 时创建，调用结束即丢弃。

    不变式：提供 delete_if 时 keep 强制为 True，
    删除只由谓词决定。

    Attributes:
        operation_names: 每封邮件依次调用的消费者操作名，默认 ("receive",)
        keep: 是否保留服务器上的邮件，默认 False（全部删除）
        delete_if: 可选谓词，返回 True 的邮件被删除
        finish: 周期结束后是否显式发送 QUIT（仅 POP）
        live_session_operations: 接收实时 IMAP 连接的操作名（仅 IMAP），
            为空表示不启用实时会话模式
    """

    operation_names: Optional[OperationNames] = (DEFAULT_OPERATION,)
    keep: bool = False
    delete_if: Optional[Callable[[RawMessage], bool]] = None
    finish: bool = False
    live_session_operations: OperationNames = ()

    def __post_init__(self) -> None:
        # 未设置操作列表时使用默认的 receive；显式的空列表仍然无效
        if self.operation_names is None:
            object.__setattr__(self, "operation_names", (DEFAULT_OPERATION,))
        object.__setattr__(self, "operation_names", _normalize_names(self.operation_names))
        object.__setattr__(
            self, "live_session_operations", _normalize_names(self.live_session_operations)
        )
        if self.delete_if is not None:
            object.__setattr__(self, "keep", True)
        super().__post_init__()

    def validate(self) -> None:
        """验证收取选项的有效性"""
        if not self.operation_names:
            raise InvalidValueObjectException(
                value_object_type="FetchOptions",
                value=self.operation_names,
                reason="At least one operation name is required"
            )

        for name in self.operation_names + self.live_session_operations:
            if not isinstance(name, str) or not name.strip():
                raise InvalidValueObjectException(
                    value_object_type="FetchOptions",
                    value=name,
                    reason="Operation names must be non-empty strings"
                )

        if self.delete_if is not None and not callable(self.delete_if):
            raise InvalidValueObjectException(
                value_object_type="FetchOptions",
                value=self.delete_if,
                reason="delete_if must be callable"
            )

    @property
    def use_live_session(self) -> bool:
        """是否启用实时会话模式"""
        return bool(self.live_session_operations)

    @property
    def uses_default_operation(self) -> bool:
        """是否只配置了默认的 receive 操作"""
        return self.operation_names == (DEFAULT_OPERATION,)

    @property
    def deletion_policy(self) -> DeletionPolicy:
        """本次收取的删除策略"""
        return DeletionPolicy(keep=self.keep, delete_if=self.delete_if)
