"""邮箱相关枚举类型"""

from enum import Enum


class AccessMode(str, Enum):
    """邮件收取协议枚举"""

    POP = "pop"
    """POP3：逐封收取，DELE 立即标记删除"""

    IMAP = "imap"
    """IMAP4：选择文件夹，设置 \\Deleted 标志后 CLOSE 生效"""


DEFAULT_ACCESS_MODE = AccessMode.IMAP
