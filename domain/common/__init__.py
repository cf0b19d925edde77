"""领域通用组件：值对象基类与领域异常"""
