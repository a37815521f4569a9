"""
棋子身份数据结构

棋子的规范身份是 (种类, 玩家) 二元组；整数身份标签只在序列化边界上派生。
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from ..utils.exceptions import InvalidPieceError


# 1号玩家的标签偏移量
PLAYER_TAG_OFFSET = 128

# 按种类序号排列的记法字母，下标0为空格
WHITE_NOTATION = "0PNBRQK"
BLACK_NOTATION = "0pnbrqk"


class PieceKind(IntEnum):
    """棋子种类，序号用于记法查表和标签编码"""
    NONE = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def texture_stem(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class PieceIdentity:
    """
    棋子身份

    Attributes:
        kind: 棋子种类 (PAWN..KING)
        player: 所属玩家编号 (0 或 1)
    """
    kind: PieceKind
    player: int

    def __post_init__(self):
        try:
            kind = PieceKind(self.kind)
        except ValueError:
            raise InvalidPieceError(f"种类 {self.kind!r}", "未知的棋子种类") from None
        if kind is PieceKind.NONE:
            raise InvalidPieceError(f"种类 {self.kind!r}", "必须在 PAWN..KING 之间")
        object.__setattr__(self, 'kind', kind)
        if self.player not in (0, 1):
            raise InvalidPieceError(f"玩家 {self.player!r}", "必须为0或1")

    def to_tag(self) -> int:
        """编码为整数身份标签: 种类序号 + 玩家编号 * 128"""
        return int(self.kind) + self.player * PLAYER_TAG_OFFSET

    @classmethod
    def from_tag(cls, tag: int) -> Optional['PieceIdentity']:
        """
        从整数身份标签解码

        Args:
            tag: 身份标签，0 表示空格

        Returns:
            Optional[PieceIdentity]: 棋子身份，空格返回None
        """
        tag = int(tag)
        if tag == 0:
            return None
        player, ordinal = divmod(tag, PLAYER_TAG_OFFSET)
        if player not in (0, 1) or not 1 <= ordinal <= 6:
            raise InvalidPieceError(f"身份标签 {tag}", "不在 {0} ∪ [1,6] ∪ [129,134] 中")
        return cls(PieceKind(ordinal), player)

    @property
    def notation(self) -> str:
        """记法字母，0号玩家大写，1号玩家小写"""
        letters = WHITE_NOTATION if self.player == 0 else BLACK_NOTATION
        return letters[self.kind]

    @classmethod
    def from_notation(cls, char: str) -> Optional['PieceIdentity']:
        """
        从记法字母解析，无法识别时返回None
        """
        if len(char) != 1:
            return None
        if char in WHITE_NOTATION[1:]:
            return cls(PieceKind(WHITE_NOTATION.index(char)), 0)
        if char in BLACK_NOTATION[1:]:
            return cls(PieceKind(BLACK_NOTATION.index(char)), 1)
        return None


def player_of_tag(tag: int) -> int:
    """标签中的玩家部分 (tag >= 128 为1号玩家)"""
    return 1 if int(tag) & PLAYER_TAG_OFFSET else 0


def notation_for_tag(tag: int) -> str:
    """身份标签转记法字符，空格为 '0'"""
    identity = PieceIdentity.from_tag(tag)
    return '0' if identity is None else identity.notation
