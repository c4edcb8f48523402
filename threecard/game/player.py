"""玩家模型 - 玩家编号与其手牌"""

from dataclasses import dataclass
from typing import Iterable

from threecard.engine.card import Card
from threecard.engine.hand_evaluator import Hand


@dataclass(frozen=True, eq=False)
class Player:
    """一个玩家（按对象身份比较，手牌打平不代表同一玩家）"""
    id: int        # 调用方提供的玩家编号
    hand: Hand     # 发牌时评估好的手牌

    @classmethod
    def create(cls, player_id: int, cards: Iterable[Card]) -> "Player":
        """由发到的牌创建玩家，同时完成手牌评估"""
        return cls(id=player_id, hand=Hand(tuple(cards)))

    @property
    def hand_size(self) -> int:
        return len(self.hand)

    def __str__(self) -> str:
        return str(self.id)
