"""
三张牌扑克异常定义
核心层只负责抛出，由命令行入口统一捕获
"""


class PokerError(Exception):
    """三张牌扑克基础异常类"""
    pass


class InvalidArgument(PokerError, ValueError):
    """非法参数：牌面格式错误、点数/花色不在合法字符集中等"""
    pass


class InvalidOperation(PokerError, RuntimeError):
    """非法操作：对局没有玩家、手牌张数不一致等"""
    pass
