"""
Chess Game 源代码模块

- chess_game_engine: 国际象棋规则层
"""

from . import chess_game_engine

__all__ = [
    "chess_game_engine",
]
