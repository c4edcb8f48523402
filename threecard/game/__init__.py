# 对局结算模块
from .player import Player
from .game import Game
