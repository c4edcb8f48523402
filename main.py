"""三张牌扑克比牌 - 命令行入口

用法:
    python main.py 3 "0 2h 3h 4h" "1 Ah Ad 5c" "2 9s 9c 9d"

输出赢家编号（并列时以空格分隔）。
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, Sequence

from threecard.engine.card import parse_cards
from threecard.engine.errors import PokerError, InvalidArgument, InvalidOperation
from threecard.game.game import Game
from threecard.game.player import Player
from threecard.ui.renderer import StandingsRenderer

logger = logging.getLogger(__name__)

# 环境变量配置
LOG_LEVEL_ENV = "THREE_CARD_LOG_LEVEL"
COLOR_ENV = "THREE_CARD_COLOR"
DEFAULT_LOG_LEVEL = "WARNING"


def configure_logging(verbose: bool = False) -> None:
    """日志输出到标准错误，标准输出只留给结果"""
    if verbose:
        level = logging.DEBUG
    else:
        name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def color_enabled() -> bool:
    if "NO_COLOR" in os.environ:
        return False
    return os.getenv(COLOR_ENV, "1") != "0"


# ============================================================
#  参数 → 对局
# ============================================================

def parse_player(entry: str) -> Player:
    """解析一位玩家："<编号> <牌1> <牌2> ..."，如 "0 Ah Kh Qh" """
    parts = entry.split()
    if not parts:
        raise InvalidArgument("玩家信息不能为空")
    try:
        player_id = int(parts[0])
    except ValueError:
        raise InvalidArgument(f"玩家编号必须是整数: {parts[0]!r}") from None
    return Player.create(player_id, parse_cards(parts[1:]))


def build_game(count: Optional[str], entries: Sequence[str]) -> Game:
    """
    校验参数并构建对局。
    第一个参数为玩家人数，其后每项对应一位玩家，人数必须吻合，
    且所有玩家手牌张数必须相同。
    """
    if count is None:
        raise InvalidArgument("参数不能为空")
    try:
        player_count = int(count)
    except ValueError:
        raise InvalidArgument(f"第一个参数必须是整数（玩家人数）: {count!r}") from None
    if player_count != len(entries):
        raise InvalidArgument(
            f"玩家人数不符: 声明 {player_count} 人，实际 {len(entries)} 人"
        )

    players = [parse_player(e) for e in entries]
    if players:
        sizes = {p.hand_size for p in players}
        if len(sizes) > 1:
            raise InvalidOperation(f"所有玩家的手牌张数必须相同: {sorted(sizes)}")

    logger.info("共 %d 位玩家，每人 %s 张牌", len(players),
                players[0].hand_size if players else 0)
    return Game(players)


# ============================================================
#  命令行入口
# ============================================================

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="三张牌扑克比牌，输出赢家编号")
    parser.add_argument("count", nargs="?", help="玩家人数")
    parser.add_argument(
        "players", nargs="*",
        help='每位玩家一项，如 "0 Ah Kh Qh"（点数 23456789TJQKA，花色 hdsc）',
    )
    parser.add_argument("--show", action="store_true", help="在标准错误输出打印名次表")
    parser.add_argument("-v", "--verbose", action="store_true", help="输出调试日志")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """命令行入口，返回进程退出码"""
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        game = build_game(args.count, args.players)
        winners = game.winners
    except PokerError as e:
        print(e, file=sys.stderr)
        return 1

    if args.show:
        StandingsRenderer(color=color_enabled()).show(game)

    print(" ".join(str(p.id) for p in winners))
    return 0


if __name__ == "__main__":
    sys.exit(main())
