"""
国际象棋规则层模块

包含棋子身份、棋子目录、状态编解码、合法性闸门和对局生命周期。
"""

from .piece import PieceKind, PieceIdentity, PLAYER_TAG_OFFSET
from .piece_catalog import PieceCatalog, texture_name
from .rule_engine import (
    BoardSnapshot, RuleEngine, MoveRule, UnrestrictedMoveRule,
    NoWinnerEvaluator, NoDrawEvaluator
)
from .legality_gate import LegalityGate, TurnContext
from .chess_game import ChessGame, GameState
from .board_validator import BoardValidator

__all__ = [
    'PieceKind', 'PieceIdentity', 'PLAYER_TAG_OFFSET',
    'PieceCatalog', 'texture_name',
    'BoardSnapshot', 'RuleEngine', 'MoveRule', 'UnrestrictedMoveRule',
    'NoWinnerEvaluator', 'NoDrawEvaluator',
    'LegalityGate', 'TurnContext',
    'ChessGame', 'GameState',
    'BoardValidator'
]
