"""
合法性闸门

宿主框架在选中棋子和移动棋子之前查询的谓词集合。
行棋方通过 TurnContext 显式传入，闸门本身不持有回合状态。
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from .piece import player_of_tag
from .rule_engine import BoardSnapshot, RuleEngine

if TYPE_CHECKING:
    from ..framework.bit import Bit
    from ..framework.grid import ChessSquare, Grid
    from ..framework.player import TurnManager


@dataclass(frozen=True)
class TurnContext:
    """一次交互查询的回合上下文"""
    current_player_index: int

    @classmethod
    def from_turn_manager(cls, turns: "TurnManager") -> 'TurnContext':
        current = turns.current_player
        return cls(current.player_number() if current is not None else 0)


class LegalityGate:
    """
    合法性闸门

    can_select 只比较棋子标签中的玩家部分与当前行棋方；
    can_move 交给规则引擎在棋局快照上判定。
    """

    def __init__(self, grid: "Grid", rule_engine: Optional[RuleEngine] = None):
        self.grid = grid
        self.rule_engine = rule_engine or RuleEngine()

    def can_select(self, piece: "Bit", source: "ChessSquare", context: TurnContext) -> bool:
        """
        棋子能否被选中

        Args:
            piece: 被选中的棋子
            source: 棋子所在格子
            context: 回合上下文

        Returns:
            bool: 棋子属于当前行棋方时为真
        """
        return player_of_tag(piece.game_tag) == context.current_player_index

    def can_move(self, piece: "Bit", source: "ChessSquare", destination: "ChessSquare",
                 context: TurnContext) -> bool:
        """
        棋子能否从 source 移动到 destination

        回合归属的前置条件由 can_select 负责，这里不重复检查。
        """
        snapshot = BoardSnapshot.from_grid(self.grid)
        return self.rule_engine.is_legal_move(
            snapshot,
            (source.column, source.row),
            (destination.column, destination.row),
            context.current_player_index,
        )

    def on_empty_interaction(self, holder: "ChessSquare", context: TurnContext) -> bool:
        """点击空格子：保留接口，当前不做任何处理"""
        return False
