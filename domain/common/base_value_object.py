"""值对象基类"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BaseValueObject:
    """
    值对象基类

    值对象不可变、按值比较。子类在 validate() 中实现校验逻辑，
    创建实例后自动调用。
    """

    def __post_init__(self) -> None:
        """初始化后验证"""
        self.validate()

    def validate(self) -> None:
        """验证值对象的有效性（子类覆盖）"""
