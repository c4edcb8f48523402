"""命令行入口测试"""

import pytest

import main


class TestMain:

    def test_single_winner(self, capsys):
        code = main.main(["3", "0 2h 3h 4h", "1 Ah Ad 5c", "2 9s 9c 9d"])
        out, err = capsys.readouterr()
        assert code == 0
        assert out == "0\n"

    def test_tie(self, capsys):
        assert main.main(["2", "1 2h 3d 4s", "2 2c 3s 4h"]) == 0
        assert capsys.readouterr().out == "1 2\n"

    @pytest.mark.parametrize("argv", [
        [],
        ["x"],
        ["0"],
        ["2", "0 2h 3h 4h"],
        ["1", "0 2h 3h 1h"],
        ["1", "a 2h 3h 4h"],
        ["1", "0"],
        ["1", "   "],
        ["2", "0 2h 3h 4h", "1 2d 3d"],
    ])
    def test_errors(self, argv, capsys):
        assert main.main(argv) == 1
        out, err = capsys.readouterr()
        assert out == ""
        assert err.strip()

    def test_show(self, capsys, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert main.main(["--show", "2", "0 2h 5d 9s", "1 Qh Kh Ah"]) == 0
        out, err = capsys.readouterr()
        assert out == "1\n"
        assert "同花顺" in err
        assert "\033[" not in err


class TestBuildGame:

    def test_parse_player(self):
        player = main.parse_player("12 Ah Kd 2c")
        assert player.id == 12
        assert player.hand_size == 3

    def test_build_game(self):
        game = main.build_game("2", ["0 2h 3h 4h", "1 5h 5d 5s"])
        assert [pl.id for pl in game.players] == [0, 1]

    def test_color_env(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv(main.COLOR_ENV, "0")
        assert main.color_enabled() is False
        monkeypatch.setenv(main.COLOR_ENV, "1")
        assert main.color_enabled() is True
