"""删除策略"""

from dataclasses import dataclass
from typing import Callable, Optional

from domain.mail.value_objects.raw_message import RawMessage


@dataclass(frozen=True)
class DeletionPolicy:
    """
    单封邮件的保留/删除决策

    - 有谓词时：谓词返回 True 才删除，忽略 keep
    - 无谓词时：keep 为 False 即删除

    纯函数，无副作用；实际的 DELE / STORE 由会话执行。
    """

    keep: bool = False
    delete_if: Optional[Callable[[RawMessage], bool]] = None

    def should_delete(self, message: RawMessage) -> bool:
        if self.delete_if is not None:
            return bool(self.delete_if(message))
        return not self.keep
