"""Game 单元测试 - 赢家与名次"""

import pytest

from threecard.engine.card import parse_cards
from threecard.engine.errors import InvalidOperation
from threecard.engine.hand_type import HandType
from threecard.game.game import Game
from threecard.game.player import Player


def p(pid: int, text: str) -> Player:
    """p(0, "2h 3h 4h")"""
    return Player.create(pid, parse_cards(text.split()))


class TestPlayer:

    def test_create_evaluates_hand(self):
        player = p(7, "5h 5d 2s")
        assert player.id == 7
        assert player.hand.category == HandType.PAIR
        assert player.hand_size == 3
        assert str(player) == "7"

    def test_same_id_tied_hands_are_distinct_players(self):
        x = p(1, "2h 5d 9s")
        y = p(1, "3h 6d 9c")
        assert x.hand == y.hand
        assert x != y
        assert x == x
        assert len({x, y}) == 2


class TestWinners:
    """Game.winners"""

    def test_single_player(self):
        only = p(1, "2h 5d 9s")
        assert Game([only]).winners == [only]

    def test_best_hand_wins(self):
        game = Game.create([
            p(0, "2h 5d 9s"),
            p(1, "2h 3h 4h"),
            p(2, "5h 5d 5s"),
        ])
        assert game.winner_ids == [1]

    def test_tie_returns_all_in_input_order(self):
        game = Game([
            p(3, "2h 3d 4s"),
            p(1, "Kh Kd 2c"),
            p(2, "2c 3s 4h"),
        ])
        assert game.winner_ids == [3, 2]

    def test_pair_kicker_breaks_tie(self):
        game = Game([p(0, "5h 5d 2s"), p(1, "5c 5s 3h")])
        assert game.winner_ids == [1]

    def test_winners_recomputed(self):
        game = Game([p(0, "2h 5d 9s"), p(1, "2c 5s 9h")])
        assert game.winner_ids == game.winner_ids == [0, 1]

    def test_empty_game(self):
        with pytest.raises(InvalidOperation):
            Game([]).winners

    def test_mixed_hand_sizes(self):
        game = Game([p(0, "2h 3h 4h"), p(1, "2d 3d 4d 5d")])
        with pytest.raises(InvalidOperation):
            game.winners


class TestStandings:
    """Game.standings"""

    def test_groups_descending(self):
        game = Game([
            p(0, "2h 5d 9s"),
            p(1, "5h 5d 2s"),
            p(2, "2c 5s 9h"),
            p(3, "Qh Kh Ah"),
        ])
        ids = [[pl.id for pl in group] for group in game.standings]
        assert ids == [[3], [1], [0, 2]]

    def test_players_immutable_tuple(self):
        players = [p(0, "2h 5d 9s")]
        game = Game(players)
        players.append(p(1, "Qh Kh Ah"))
        assert len(game.players) == 1
