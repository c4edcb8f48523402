"""牌型定义 - 三张牌扑克的6种牌型（按强度从低到高）"""

from enum import IntEnum


class HandType(IntEnum):
    """牌型枚举（数值越大牌型越强）"""
    HIGH_CARD = 0          # 高牌
    PAIR = 1               # 对子
    FLUSH = 2              # 同花
    STRAIGHT = 3           # 顺子
    THREE_OF_A_KIND = 4    # 三条
    STRAIGHT_FLUSH = 5     # 同花顺


# 牌型显示名
HAND_TYPE_NAME = {
    HandType.HIGH_CARD: "高牌",
    HandType.PAIR: "对子",
    HandType.FLUSH: "同花",
    HandType.STRAIGHT: "顺子",
    HandType.THREE_OF_A_KIND: "三条",
    HandType.STRAIGHT_FLUSH: "同花顺",
}
