# 牌型评估引擎模块
from .errors import PokerError, InvalidArgument, InvalidOperation
from .card import Card, Rank, Suit, compare_cards, parse_cards, sort_cards
from .hand_type import HandType, HAND_TYPE_NAME
from .hand_evaluator import Hand, best_group, compare_hands, evaluate_cards, hands_equal
