"""
国际象棋规则引擎

走法规则与终局判定都是作用于不可变棋局快照的纯函数，可以独立测试和替换。
当前只提供最小实现：任何走法都允许，没有胜者，也不判和。
"""

from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from .piece import PieceIdentity

if TYPE_CHECKING:
    from ..framework.grid import Grid

Position = Tuple[int, int]  # (列, 行)


@dataclass(frozen=True)
class BoardSnapshot:
    """
    不可变棋局快照

    tags 按 row*8+col 排列，每项是身份标签 (0 表示空格)。
    """
    tags: Tuple[int, ...]
    size: int = 8

    @classmethod
    def from_grid(cls, grid: "Grid") -> 'BoardSnapshot':
        tags: List[int] = []

        def collect(square, x, y):
            bit = square.bit()
            tags.append(0 if bit is None else int(bit.game_tag))

        grid.for_each_square(collect)
        return cls(tuple(tags), grid.width)

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> 'BoardSnapshot':
        return cls(tuple(int(t) for t in matrix.reshape(-1)), matrix.shape[1])

    def to_matrix(self) -> np.ndarray:
        """转换为 [行, 列] 索引的标签矩阵"""
        return np.array(self.tags, dtype=np.int16).reshape(self.size, self.size)

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.size and 0 <= row < self.size

    def tag_at(self, col: int, row: int) -> int:
        if not self.in_bounds(col, row):
            return 0
        return self.tags[row * self.size + col]

    def identity_at(self, col: int, row: int) -> Optional[PieceIdentity]:
        return PieceIdentity.from_tag(self.tag_at(col, row))

    def occupied(self, col: int, row: int) -> bool:
        return self.tag_at(col, row) != 0


class MoveRule(Protocol):
    """走法规则：所有规则都通过时走法才被允许"""

    def check(self, snapshot: BoardSnapshot, from_pos: Position, to_pos: Position,
              player_index: int) -> bool:
        ...


class UnrestrictedMoveRule:
    """允许任何走法"""

    def check(self, snapshot: BoardSnapshot, from_pos: Position, to_pos: Position,
              player_index: int) -> bool:
        return True


class WinnerEvaluator(Protocol):
    def evaluate(self, snapshot: BoardSnapshot) -> Optional[int]:
        ...


class DrawEvaluator(Protocol):
    def evaluate(self, snapshot: BoardSnapshot) -> bool:
        ...


class NoWinnerEvaluator:
    """始终没有胜者"""

    def evaluate(self, snapshot: BoardSnapshot) -> Optional[int]:
        return None


class NoDrawEvaluator:
    """始终不判和"""

    def evaluate(self, snapshot: BoardSnapshot) -> bool:
        return False


class RuleEngine:
    """
    规则引擎

    持有有序的走法规则列表以及胜负、和棋判定器。
    完整的规则实现(棋子走法模式、路径阻挡、王的安全、重复局面与五十步和棋)
    通过替换这些组件接入，调用方接口保持不变。
    """

    def __init__(self,
                 move_rules: Optional[Sequence[MoveRule]] = None,
                 winner_evaluator: Optional[WinnerEvaluator] = None,
                 draw_evaluator: Optional[DrawEvaluator] = None):
        self.move_rules: List[MoveRule] = list(move_rules) if move_rules is not None else [UnrestrictedMoveRule()]
        self.winner_evaluator = winner_evaluator or NoWinnerEvaluator()
        self.draw_evaluator = draw_evaluator or NoDrawEvaluator()

    def is_legal_move(self, snapshot: BoardSnapshot, from_pos: Position, to_pos: Position,
                      player_index: int) -> bool:
        """
        检查走法是否合法

        Args:
            snapshot: 当前棋局快照
            from_pos: 起始格 (列, 行)
            to_pos: 目标格 (列, 行)
            player_index: 行棋方

        Returns:
            bool: 是否所有规则都允许
        """
        return all(rule.check(snapshot, from_pos, to_pos, player_index)
                   for rule in self.move_rules)

    def winner(self, snapshot: BoardSnapshot) -> Optional[int]:
        """胜者编号，未分胜负返回None"""
        return self.winner_evaluator.evaluate(snapshot)

    def is_draw(self, snapshot: BoardSnapshot) -> bool:
        return self.draw_evaluator.evaluate(snapshot)
