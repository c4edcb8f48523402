"""牌型评估器 - 识别一手牌的牌型、凭证牌，并比较两手牌的大小"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Iterable, List, Optional, Sequence, Tuple

from .card import Card, compare_cards, parse_cards, sort_cards
from .errors import InvalidArgument, InvalidOperation
from .hand_type import HandType

logger = logging.getLogger(__name__)

# 评估结果：(牌型, 凭证牌)
Evaluation = Tuple[HandType, Tuple[Card, ...]]


# ============================================================
#  辅助函数
# ============================================================

def best_group(cards: Sequence[Card], group_size: int) -> Optional[List[Card]]:
    """
    按点数分组，只保留恰好 group_size 张的组，返回点数最大的那一组。
    没有符合条件的组时返回 None。组内保持发牌顺序。
    """
    rank_counts = Counter(c.rank for c in cards)
    ranks = [r for r, n in rank_counts.items() if n == group_size]
    if not ranks:
        return None
    top = max(ranks)
    return [c for c in cards if c.rank == top]


def is_straight(cards: Sequence[Card]) -> bool:
    """按点数排序后是否逐张连续递增（A 只当最大）"""
    values = sorted(c.numeric_value for c in cards)
    return all(b - a == 1 for a, b in zip(values, values[1:]))


def is_flush(cards: Sequence[Card]) -> bool:
    """是否全部同一花色"""
    return len({c.suit for c in cards}) == 1


# ============================================================
#  牌型检测
# ============================================================

def _detect_straight_or_flush(cards: Sequence[Card]) -> Optional[Evaluation]:
    """顺子与同花各自独立判断，两者都成立即为同花顺"""
    straight = is_straight(cards)
    flush = is_flush(cards)

    if straight and flush:
        category = HandType.STRAIGHT_FLUSH
    elif straight:
        category = HandType.STRAIGHT
    elif flush:
        category = HandType.FLUSH
    else:
        return None
    return category, tuple(sort_cards(cards))


def _detect_group(cards: Sequence[Card], group_size: int, category: HandType) -> Optional[Evaluation]:
    group = best_group(cards, group_size)
    if group is None:
        return None
    return category, tuple(group)


def _detect_high_card(cards: Sequence[Card]) -> Evaluation:
    """高牌：凭证为点数最大的一张（总能成立）"""
    return HandType.HIGH_CARD, (max(cards),)


def evaluate_cards(cards: Iterable[Card]) -> Evaluation:
    """
    识别一组牌的牌型。
    返回 (牌型, 凭证牌)；同花顺/顺子/同花的凭证按点数升序排列。
    """
    cards = list(cards)
    if not cards:
        raise InvalidArgument("手牌不能为空")

    # 按检测优先级依次尝试，第一个命中即停止
    return (
        _detect_straight_or_flush(cards)
        or _detect_group(cards, 3, HandType.THREE_OF_A_KIND)
        or _detect_group(cards, 2, HandType.PAIR)
        or _detect_high_card(cards)
    )


# ============================================================
#  牌型比较
# ============================================================

def _compare_descending(xs: Sequence[Card], ys: Sequence[Card]) -> int:
    """逐张比较两组已按从大到小排列的牌，第一处不同即决定胜负"""
    for a, b in zip(xs, ys):
        result = compare_cards(a, b)
        if result != 0:
            return result
    return 0


def compare_hands(x: "Hand", y: "Hand") -> int:
    """
    比较两手牌：负数 x 小，0 平局，正数 x 大。
    规则：
    1. 先比牌型
    2. 牌型相同，从大到小逐张比凭证牌
    3. 仍相同且为对子，再从大到小逐张比踢脚牌
    """
    if len(x.cards) != len(y.cards):
        raise InvalidOperation(
            f"手牌张数不一致，无法比较: {len(x.cards)} vs {len(y.cards)}"
        )

    if x.category != y.category:
        return 1 if x.category > y.category else -1

    result = _compare_descending(x.evidence[::-1], y.evidence[::-1])
    if result != 0:
        return result

    # 三张牌时对子只剩一张踢脚牌，张数更多时依次比较全部
    if x.category == HandType.PAIR:
        return _compare_descending(x.kickers, y.kickers)
    return 0


def hands_equal(x: "Hand", y: "Hand") -> bool:
    """两手牌是否打平（相等即比较结果为 0）"""
    return compare_hands(x, y) == 0


# ============================================================
#  手牌
# ============================================================

@total_ordering
@dataclass(frozen=True, eq=False)
class Hand:
    """一手已评估的牌，构造时评估一次，之后不可变"""
    cards: Tuple[Card, ...]
    category: HandType = field(init=False)
    evidence: Tuple[Card, ...] = field(init=False)

    def __post_init__(self):
        dealt = tuple(self.cards)
        category, evidence = evaluate_cards(dealt)
        object.__setattr__(self, "cards", dealt)
        object.__setattr__(self, "category", category)
        object.__setattr__(self, "evidence", evidence)
        logger.debug("评估手牌 %s → %s %s", self, category.name, list(evidence))

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "Hand":
        """由牌面字符串创建，如 Hand.from_tokens(["Ah", "Kh", "Qh"])"""
        return cls(tuple(parse_cards(tokens)))

    @property
    def kickers(self) -> List[Card]:
        """不在凭证中的牌，按点数从大到小"""
        rest = list(self.cards)
        for card in self.evidence:
            rest.remove(card)
        return sort_cards(rest, descending=True)

    def __len__(self) -> int:
        return len(self.cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare_hands(self, other) == 0

    def __lt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare_hands(self, other) < 0

    def __hash__(self) -> int:
        # 打平的两手牌张数、牌型和凭证点数必然相同
        return hash((len(self.cards), self.category, tuple(c.rank for c in self.evidence)))

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards)

    def __repr__(self) -> str:
        return f"[{self.category.name}] {self}"
