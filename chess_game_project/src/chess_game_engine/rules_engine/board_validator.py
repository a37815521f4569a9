"""
棋局合法性验证器

提供棋局状态的检查报告。验证只给出建议，不会抛出异常，也不参与状态编解码。
"""

from typing import Any, Dict, List, Tuple

import numpy as np

from .chess_game import ChessGame
from .piece import PieceIdentity, PieceKind
from ..utils.exceptions import InvalidPieceError


class BoardValidator:
    """
    棋局合法性验证器

    检查棋盘结构、棋子数量和棋子位置。
    """

    def __init__(self):
        """初始化验证器"""
        # 每方棋子数量上限
        self.piece_limits = {
            PieceKind.PAWN: 8,
            PieceKind.KING: 1,
        }
        self.max_pieces_per_player = 16

        self.player_names = {0: "白方", 1: "黑方"}

    def validate_board_structure(self, game: ChessGame) -> Tuple[bool, List[str]]:
        """
        验证棋盘基本结构

        Args:
            game: 要验证的对局

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        errors = []
        matrix = game.to_matrix()

        if matrix.shape != (8, 8):
            errors.append(f"棋盘尺寸错误: {matrix.shape}, 应为(8, 8)")

        for row, col in zip(*np.nonzero(matrix)):
            try:
                PieceIdentity.from_tag(int(matrix[row, col]))
            except InvalidPieceError:
                errors.append(f"({col}, {row}) 的身份标签无效: {int(matrix[row, col])}")

        return len(errors) == 0, errors

    def validate_piece_counts(self, game: ChessGame) -> Tuple[bool, List[str]]:
        """
        验证棋子数量

        Args:
            game: 要验证的对局

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        errors = []
        counts = self.count_pieces(game)

        for player, name in self.player_names.items():
            player_counts = counts[player]
            total = sum(player_counts.values())
            if total > self.max_pieces_per_player:
                errors.append(f"{name}棋子总数超限: {total} > {self.max_pieces_per_player}")

            pawns = player_counts.get(PieceKind.PAWN, 0)
            if pawns > self.piece_limits[PieceKind.PAWN]:
                errors.append(f"{name}兵数量超限: {pawns} > {self.piece_limits[PieceKind.PAWN]}")

            kings = player_counts.get(PieceKind.KING, 0)
            if kings != self.piece_limits[PieceKind.KING]:
                errors.append(f"{name}王数量错误: {kings}, 应为1")

        return len(errors) == 0, errors

    def validate_piece_positions(self, game: ChessGame) -> Tuple[bool, List[str]]:
        """
        验证棋子位置的合法性

        兵不能出现在第1或第8横线上。
        """
        errors = []

        for player in self.player_names:
            for (col, row), kind in game.pieces_of(player):
                if kind is PieceKind.PAWN and row in (0, 7):
                    errors.append(f"{self.player_names[player]}的兵位于底线: ({col}, {row})")

        return len(errors) == 0, errors

    def count_pieces(self, game: ChessGame) -> Dict[int, Dict[PieceKind, int]]:
        """
        统计棋子数量

        Returns:
            Dict[int, Dict[PieceKind, int]]: {玩家: {种类: 数量}}
        """
        counts: Dict[int, Dict[PieceKind, int]] = {0: {}, 1: {}}
        for player in counts:
            for _, kind in game.pieces_of(player):
                counts[player][kind] = counts[player].get(kind, 0) + 1
        return counts

    def full_validation(self, game: ChessGame) -> Tuple[bool, List[str]]:
        """
        完整验证

        Returns:
            Tuple[bool, List[str]]: (是否合法, 全部错误信息)
        """
        all_errors = []

        is_valid, errors = self.validate_board_structure(game)
        all_errors.extend(errors)
        if not is_valid:
            # 标签无效时后续统计没有意义
            return False, all_errors

        for check in (self.validate_piece_counts, self.validate_piece_positions):
            _, errors = check(game)
            all_errors.extend(errors)

        return len(all_errors) == 0, all_errors

    def get_validation_report(self, game: ChessGame) -> Dict[str, Any]:
        """
        获取详细的验证报告

        Returns:
            Dict[str, Any]: 验证报告
        """
        is_valid, errors = self.full_validation(game)
        structure_ok, _ = self.validate_board_structure(game)
        counts = self.count_pieces(game) if structure_ok else {0: {}, 1: {}}

        return {
            'is_valid': is_valid,
            'errors': errors,
            'piece_counts': {
                player: {kind.name.lower(): n for kind, n in player_counts.items()}
                for player, player_counts in counts.items()
            },
            'total_pieces': sum(sum(c.values()) for c in counts.values()),
        }
