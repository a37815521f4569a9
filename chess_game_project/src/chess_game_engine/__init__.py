"""
国际象棋规则引擎

运行在通用棋类框架之上的双人国际象棋规则层。
包括棋局表示、FEN布局导入、紧凑状态字符串编解码、合法性闸门和生命周期钩子。
"""

__version__ = "0.1.0"
__author__ = "Chess Game Team"

from .rules_engine import ChessGame, GameState, PieceKind, PieceIdentity, BoardValidator
from .config import ConfigManager, GameConfig, SystemConfig
from .utils import setup_logger, get_logger, ChessGameError, MalformedStateError

__all__ = [
    "__version__", "__author__",
    "ChessGame", "GameState", "PieceKind", "PieceIdentity", "BoardValidator",
    "ConfigManager", "GameConfig", "SystemConfig",
    "setup_logger", "get_logger", "ChessGameError", "MalformedStateError"
]
