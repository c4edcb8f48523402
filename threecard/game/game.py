"""对局 - 按手牌强度给玩家排名并选出赢家"""

import logging
from functools import cmp_to_key
from typing import Iterable, List, Tuple

from threecard.engine.errors import InvalidOperation
from threecard.engine.hand_evaluator import compare_hands
from threecard.game.player import Player

logger = logging.getLogger(__name__)


class Game:
    """一局对局：持有全部玩家，赢家由手牌比较即时算出"""

    def __init__(self, players: Iterable[Player]):
        self._players: Tuple[Player, ...] = tuple(players)

    @classmethod
    def create(cls, players: Iterable[Player]) -> "Game":
        return cls(players)

    @property
    def players(self) -> Tuple[Player, ...]:
        return self._players

    @property
    def standings(self) -> List[List[Player]]:
        """
        按手牌打平关系分组，组间按强度从高到低排列。
        组内保持玩家的原始顺序。
        """
        if not self._players:
            raise InvalidOperation("对局中没有玩家")

        # 稳定排序，reverse 不打乱同组内的原始顺序
        ranked = sorted(
            self._players,
            key=cmp_to_key(lambda a, b: compare_hands(a.hand, b.hand)),
            reverse=True,
        )

        groups: List[List[Player]] = []
        for player in ranked:
            if groups and compare_hands(groups[-1][0].hand, player.hand) == 0:
                groups[-1].append(player)
            else:
                groups.append([player])

        return groups

    @property
    def winners(self) -> List[Player]:
        """手牌并列最强的全部玩家"""
        winners = self.standings[0]
        logger.debug(
            "赢家: %s (%s)",
            [p.id for p in winners],
            winners[0].hand.category.name,
        )
        return winners

    @property
    def winner_ids(self) -> List[int]:
        return [p.id for p in self.winners]
