"""邮件领域模块

该模块包含邮件收取的领域模型，包括：
- RawMessage 值对象
- MailSession 会话接口
"""
