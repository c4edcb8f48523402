"""终端渲染器 - 在终端中展示各玩家手牌与名次"""

import sys
from typing import List, Optional, TextIO

from threecard.engine.card import Card, Suit
from threecard.engine.hand_type import HandType, HAND_TYPE_NAME
from threecard.game.game import Game
from threecard.game.player import Player


# 颜色常量 (ANSI)
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
MAGENTA = "\033[95m"
CYAN = "\033[96m"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"

# 牌型颜色映射
HAND_TYPE_COLOR = {
    HandType.HIGH_CARD: DIM,
    HandType.PAIR: GREEN,
    HandType.FLUSH: CYAN,
    HandType.STRAIGHT: CYAN,
    HandType.THREE_OF_A_KIND: MAGENTA,
    HandType.STRAIGHT_FLUSH: RED,
}

# 花色符号
SUIT_SYMBOL = {
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.SPADE: "♠",
    Suit.CLUB: "♣",
}


class StandingsRenderer:
    """名次渲染器：赢家高亮，其余按名次依次列出"""

    def __init__(self, out: Optional[TextIO] = None, color: bool = True):
        self.out = out if out is not None else sys.stderr
        self.color = color

    def _paint(self, text: str, *styles: str) -> str:
        if not self.color or not styles:
            return text
        return f"{''.join(styles)}{text}{RESET}"

    # ============================================================
    #  牌面渲染
    # ============================================================

    def format_cards(self, cards: List[Card]) -> str:
        """将牌列表格式化为字符串（红色花色高亮）"""
        parts = []
        for c in cards:
            display = f"{SUIT_SYMBOL[c.suit]}{c.rank.char}"
            if c.suit in (Suit.HEART, Suit.DIAMOND):
                display = self._paint(display, RED)
            parts.append(display)
        return " ".join(parts)

    def format_hand_type(self, hand_type: HandType) -> str:
        name = HAND_TYPE_NAME.get(hand_type, hand_type.name)
        return self._paint(name, HAND_TYPE_COLOR.get(hand_type, ""))

    def format_player(self, player: Player) -> str:
        hand = player.hand
        return (
            f"玩家 {player.id}: {self.format_cards(list(hand.cards))}"
            f"  [{self.format_hand_type(hand.category)}]"
            f"  凭证: {self.format_cards(list(hand.evidence))}"
        )

    # ============================================================
    #  名次展示
    # ============================================================

    def render(self, game: Game) -> List[str]:
        """返回名次表的各行（不含换行符）"""
        lines = [self._paint("═" * 48, YELLOW, BOLD)]
        for place, group in enumerate(game.standings, start=1):
            tag = "🏆" if place == 1 else f"{place}."
            for player in group:
                line = f"  {tag} {self.format_player(player)}"
                if place == 1:
                    line = self._paint(line, BOLD)
                lines.append(line)
        lines.append(self._paint("═" * 48, YELLOW, BOLD))
        return lines

    def show(self, game: Game) -> None:
        """打印名次表"""
        for line in self.render(game):
            print(line, file=self.out)
