"""
国际象棋对局系统 (Chess Game)

运行在通用棋类框架之上的国际象棋规则层，负责棋局状态、格式转换和走子合法性查询。
"""

__version__ = "0.1.0"
__author__ = "Chess Game Team"
__description__ = "国际象棋规则层 - 棋局状态、FEN导入、紧凑状态字符串与合法性闸门"

from chess_game_project.src import chess_game_engine

__all__ = [
    "chess_game_engine",
    "__version__",
    "__author__",
    "__description__",
]
