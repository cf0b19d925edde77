"""收取结果值对象"""

from dataclasses import dataclass

from domain.common.base_value_object import BaseValueObject
from domain.mailbox.value_objects.mailbox_enums import AccessMode


@dataclass(frozen=True)
class FetchResult(BaseValueObject):
    """
    一次成功收取周期的汇总

    收取失败时直接抛出异常，不返回部分结果。

    Attributes:
        access_mode: 使用的协议
        dispatched: 分发给消费者的邮件数
        deleted: 删除（或标记删除）的邮件数
        live_session: 是否以实时会话模式完成
    """

    access_mode: AccessMode
    dispatched: int = 0
    deleted: int = 0
    live_session: bool = False
