"""
牌组库异常定义
参数错误同时继承 ValueError，便于调用方按标准异常捕获
"""


class DeckError(Exception):
    """牌组库基础异常类"""
    pass


class InvalidArgumentError(DeckError, ValueError):
    """无效参数异常（负数数量、无法解析的牌面等）"""
    pass


class DeckConfigError(DeckError, ValueError):
    """牌组配置错误异常"""
    pass
