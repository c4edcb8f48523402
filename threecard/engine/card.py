"""牌的定义 - 标准52张扑克牌的数据模型"""

from enum import IntEnum, Enum
from dataclasses import dataclass
from typing import Iterable, List

from .errors import InvalidArgument


# 合法点数字符（按从小到大排列）
RANK_CHARS = "23456789TJQKA"

# 合法花色字符（花色之间没有大小）
SUIT_CHARS = "hdsc"


class Rank(IntEnum):
    """点数枚举（数值即牌面大小：字符序号 + 2）"""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def char(self) -> str:
        return RANK_CHARS[self - 2]

    @classmethod
    def from_char(cls, ch: str) -> "Rank":
        """'A' → Rank.ACE；字符不合法时抛出 InvalidArgument"""
        if not isinstance(ch, str) or len(ch) != 1 or ch not in RANK_CHARS:
            raise InvalidArgument(f"无效的点数: {ch!r}，必须是 {RANK_CHARS} 之一")
        return cls(RANK_CHARS.index(ch) + 2)


class Suit(str, Enum):
    """花色枚举"""
    HEART = "h"
    DIAMOND = "d"
    SPADE = "s"
    CLUB = "c"

    @classmethod
    def from_char(cls, ch: str) -> "Suit":
        if not isinstance(ch, str) or len(ch) != 1 or ch not in SUIT_CHARS:
            raise InvalidArgument(f"无效的花色: {ch!r}，必须是 {SUIT_CHARS} 之一")
        return cls(ch)


@dataclass(frozen=True)
class Card:
    """一张扑克牌（大小只看点数，相等需点数与花色都相同）"""
    rank: Rank
    suit: Suit

    def __post_init__(self):
        if not isinstance(self.rank, Rank):
            raise InvalidArgument(f"无效的点数: {self.rank!r}")
        if not isinstance(self.suit, Suit):
            raise InvalidArgument(f"无效的花色: {self.suit!r}")

    @classmethod
    def create(cls, rank_char: str, suit_char: str) -> "Card":
        """由点数字符和花色字符创建一张牌，例如 ('A', 'h')"""
        return cls(Rank.from_char(rank_char), Suit.from_char(suit_char))

    @classmethod
    def parse(cls, token: str) -> "Card":
        """
        解析两个字符的牌面，第一个字符为点数，第二个为花色。
        例如: "Ah" → 红桃A, "Tc" → 梅花10
        """
        if token is None or not isinstance(token, str) or not token.strip():
            raise InvalidArgument("牌面不能为空")
        if len(token) != 2:
            raise InvalidArgument(f"牌面格式错误: {token!r}，必须恰好两个字符")
        return cls.create(token[0], token[1])

    @property
    def numeric_value(self) -> int:
        return int(self.rank)

    def __str__(self) -> str:
        return f"{self.rank.char}{self.suit.value}"

    def __repr__(self) -> str:
        return str(self)

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))


def compare_cards(a: Card, b: Card) -> int:
    """按点数比较两张牌：负数 a 小，0 点数相同（不看花色），正数 a 大"""
    return (a.rank > b.rank) - (a.rank < b.rank)


def sort_cards(cards: Iterable[Card], descending: bool = False) -> List[Card]:
    """按点数排序（稳定排序，同点数保持原顺序）"""
    return sorted(cards, key=lambda c: c.rank, reverse=descending)


def parse_cards(tokens: Iterable[str]) -> List[Card]:
    """批量解析牌面，如 ["2h", "3h", "4h"]"""
    return [Card.parse(t) for t in tokens]
