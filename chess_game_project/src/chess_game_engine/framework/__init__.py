"""
宿主框架接口模块

规则层依赖的通用网格、格子、棋子、玩家与回合管理。
"""

from .bit import Bit
from .grid import ChessSquare, Grid
from .player import Player, TurnManager
from .textures import TextureLoader, NullTextureLoader

__all__ = ['Bit', 'ChessSquare', 'Grid', 'Player', 'TurnManager',
           'TextureLoader', 'NullTextureLoader']
