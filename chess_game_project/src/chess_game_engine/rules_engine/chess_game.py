"""
国际象棋对局

宿主框架调用的生命周期钩子、状态字符串读写、胜负查询和合法性谓词。
"""

from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from . import board_codec
from .legality_gate import LegalityGate, TurnContext
from .piece import PieceIdentity, PieceKind
from .piece_catalog import PieceCatalog
from .rule_engine import BoardSnapshot, RuleEngine
from ..config.game_config import GameConfig
from ..framework.bit import Bit
from ..framework.grid import ChessSquare, Grid
from ..framework.player import Player, TurnManager
from ..framework.textures import TextureLoader
from ..utils.exceptions import ConfigurationError
from ..utils.logger import LoggerMixin

BOARD_SIZE = board_codec.BOARD_SIZE
NUMBER_OF_PLAYERS = 2


class GameState(Enum):
    """对局生命周期状态"""
    UNINITIALIZED = "uninitialized"
    PLAYABLE = "playable"
    TERMINAL = "terminal"


class ChessGame(LoggerMixin):
    """
    国际象棋对局

    棋盘内容是唯一的可变状态。格子独占持有棋子，棋子到玩家只是非拥有关联。
    """

    def __init__(self,
                 config: Optional[GameConfig] = None,
                 texture_loader: Optional[TextureLoader] = None,
                 rule_engine: Optional[RuleEngine] = None):
        """
        初始化对局

        Args:
            config: 对局配置，None表示使用默认配置
            texture_loader: 宿主纹理加载器
            rule_engine: 规则引擎，None表示使用最小规则
        """
        self.config = config or GameConfig()
        if self.config.board_size != BOARD_SIZE:
            raise ConfigurationError("board_size",
                                     f"只支持{BOARD_SIZE}x{BOARD_SIZE}棋盘，实际为{self.config.board_size}")
        if self.config.number_of_players != NUMBER_OF_PLAYERS:
            raise ConfigurationError("number_of_players",
                                     f"只支持{NUMBER_OF_PLAYERS}名玩家，实际为{self.config.number_of_players}")
        size = self.config.board_size

        self.grid = Grid(size, size)
        self.turns = TurnManager()
        self.turns.set_number_of_players(self.config.number_of_players)
        self.catalog = PieceCatalog(self.turns, self.config.piece_size, texture_loader)
        self.rule_engine = rule_engine or RuleEngine()
        self.gate = LegalityGate(self.grid, self.rule_engine)

        self.row_x = size
        self.row_y = size
        self.state = GameState.UNINITIALIZED

    # ==================== 生命周期 ====================

    def setup(self):
        """
        开始新对局

        配置双人8x8对局，初始化格子外观，导入初始局面，然后通知宿主开始行棋。
        """
        # 重建玩家前先清空棋盘，避免残留棋子指向旧的玩家对象
        self._clear_board()

        self.turns.set_number_of_players(self.config.number_of_players)
        self.row_x = self.config.board_size
        self.row_y = self.config.board_size

        self.grid.initialize_chess_squares(self.config.piece_size, self.config.board_texture)
        self.fen_to_board(self.config.start_position)

        self.turns.start_game()
        self.state = GameState.PLAYABLE
        self.log_info(f"对局开始: {self.config.start_position}")

    def teardown(self):
        """释放所有格子上的棋子，可重复调用"""
        self._clear_board()
        if self.state is not GameState.UNINITIALIZED:
            self.state = GameState.TERMINAL
        self.log_info("对局结束，棋盘已清空")

    def _clear_board(self):
        self.grid.for_each_square(lambda square, x, y: square.destroy_bit())

    def stop_game(self):
        """宿主框架的结束回调"""
        self.teardown()

    def winner(self) -> Optional[Player]:
        """
        获取胜者

        Returns:
            Optional[Player]: 胜者，尚未分出胜负时返回None
        """
        index = self.rule_engine.winner(self.snapshot())
        return None if index is None else self.turns.get_player_at(index)

    def check_for_winner(self) -> Optional[Player]:
        return self.winner()

    def is_draw(self) -> bool:
        """是否和棋"""
        return self.rule_engine.is_draw(self.snapshot())

    def check_for_draw(self) -> bool:
        return self.is_draw()

    # ==================== 状态编解码 ====================

    def fen_to_board(self, fen: str):
        """导入FEN棋子布局，不清空棋盘"""
        board_codec.fen_to_board(self.grid, self.catalog, fen)

    def board_to_fen(self) -> str:
        """导出FEN棋子布局字段"""
        return board_codec.board_to_fen(self.grid)

    def piece_notation(self, x: int, y: int) -> str:
        return board_codec.piece_notation(self.grid, x, y)

    def state_string(self) -> str:
        """导出64字符紧凑状态字符串"""
        return board_codec.state_string(self.grid)

    def initial_state_string(self) -> str:
        """宿主悔棋机制使用的初始快照"""
        return self.state_string()

    def set_state_string(self, state: str):
        """
        从紧凑状态字符串恢复棋盘

        Raises:
            MalformedStateError: 状态字符串长度或字符非法，棋盘保持不变
        """
        board_codec.set_state_string(
            self.grid, self.catalog, state,
            legacy_pawn_decoding=self.config.legacy_pawn_decoding,
        )
        self.log_debug(f"已恢复状态: {state}")

    # ==================== 合法性闸门 ====================

    def _context(self, context: Optional[TurnContext]) -> TurnContext:
        return context if context is not None else TurnContext.from_turn_manager(self.turns)

    def can_select(self, piece: Bit, source: ChessSquare,
                   context: Optional[TurnContext] = None) -> bool:
        """棋子是否属于当前行棋方"""
        return self.gate.can_select(piece, source, self._context(context))

    def can_move(self, piece: Bit, source: ChessSquare, destination: ChessSquare,
                 context: Optional[TurnContext] = None) -> bool:
        return self.gate.can_move(piece, source, destination, self._context(context))

    def on_empty_interaction(self, holder: ChessSquare,
                             context: Optional[TurnContext] = None) -> bool:
        return self.gate.on_empty_interaction(holder, self._context(context))

    # ==================== 查询 ====================

    def owner_at(self, x: int, y: int) -> Optional[Player]:
        """
        指定格子上棋子的所属玩家

        Returns:
            Optional[Player]: 越界或空格返回None
        """
        square = self.grid.get_square(x, y)
        if square is None or square.bit() is None:
            return None
        return square.bit().get_owner()

    def identity_at(self, x: int, y: int) -> Optional[PieceIdentity]:
        square = self.grid.get_square(x, y)
        if square is None or square.bit() is None:
            return None
        return PieceIdentity.from_tag(square.bit().game_tag)

    def pieces_of(self, player_index: int) -> List[Tuple[Tuple[int, int], PieceKind]]:
        """
        获取指定玩家的所有棋子

        Returns:
            List[Tuple[Tuple[int, int], PieceKind]]: [((列, 行), 种类), ...]
        """
        pieces = []

        def collect(square, x, y):
            identity = self.identity_at(x, y)
            if identity is not None and identity.player == player_index:
                pieces.append(((x, y), identity.kind))

        self.grid.for_each_square(collect)
        return pieces

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot.from_grid(self.grid)

    def to_matrix(self) -> np.ndarray:
        """
        转换为矩阵格式

        Returns:
            np.ndarray: 8x8身份标签矩阵，按 [行, 列] 索引
        """
        return self.snapshot().to_matrix()

    @classmethod
    def from_matrix(cls, matrix: np.ndarray, config: Optional[GameConfig] = None,
                    texture_loader: Optional[TextureLoader] = None) -> 'ChessGame':
        """
        从身份标签矩阵创建对局

        Args:
            matrix: 8x8标签矩阵
            config: 对局配置

        Returns:
            ChessGame: 未开始的对局，棋盘已按矩阵放置

        Raises:
            ConfigurationError: 矩阵形状不是 (8, 8)
        """
        game = cls(config, texture_loader)
        size = game.config.board_size
        if np.shape(matrix) != (size, size):
            raise ConfigurationError("matrix", f"形状应为({size}, {size})，实际为{np.shape(matrix)}")
        game.grid.initialize_chess_squares(game.config.piece_size, game.config.board_texture)
        for row in range(size):
            for col in range(size):
                identity = PieceIdentity.from_tag(int(matrix[row, col]))
                if identity is None:
                    continue
                square = game.grid.get_square(col, row)
                bit = game.catalog.piece_for_identity(identity)
                square.set_bit(bit)
                bit.set_position(square.get_position())
        return game

    def to_visual_string(self) -> str:
        """
        转换为可视化字符串，第8横线在上
        """
        lines = []
        for row in range(self.row_y - 1, -1, -1):
            cells = []
            for col in range(self.row_x):
                char = self.piece_notation(col, row)
                cells.append('.' if char == board_codec.EMPTY_CHAR else char)
            lines.append(f"{row + 1} " + " ".join(cells))
        lines.append("  " + " ".join("abcdefgh"[:self.row_x]))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_visual_string()
