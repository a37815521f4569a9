"""
棋子目录

为指定玩家和种类创建带身份标签的棋子。
"""

from typing import Optional, TYPE_CHECKING

from .piece import PieceIdentity, PieceKind
from ..framework.bit import Bit
from ..framework.textures import TextureLoader
from ..utils.exceptions import GameStateError, InvalidPieceError

if TYPE_CHECKING:
    from ..framework.player import TurnManager


def texture_name(player_index: int, kind: PieceKind) -> str:
    """
    棋子纹理文件名

    Returns:
        str: 如 "w_pawn.png"、"b_king.png"
    """
    prefix = "w_" if player_index == 0 else "b_"
    return f"{prefix}{PieceKind(kind).texture_stem}.png"


class PieceCatalog:
    """
    棋子目录

    根据玩家编号和棋子种类生成新的棋子实例，设置纹理、尺寸、所属玩家和身份标签。
    """

    def __init__(self, turns: "TurnManager", piece_size: int = 64,
                 texture_loader: Optional[TextureLoader] = None):
        """
        Args:
            turns: 回合管理器，用于查找玩家对象
            piece_size: 单格像素尺寸
            texture_loader: 宿主纹理加载器
        """
        self.turns = turns
        self.piece_size = piece_size
        self.texture_loader = texture_loader

    def piece_for_player(self, player_index: int, kind: PieceKind) -> Bit:
        """
        创建棋子

        Args:
            player_index: 玩家编号 (0 或 1)
            kind: 棋子种类 (PAWN..KING)

        Returns:
            Bit: 新棋子
        """
        identity = PieceIdentity(kind, player_index)
        return self.piece_for_identity(identity)

    def piece_for_identity(self, identity: PieceIdentity) -> Bit:
        try:
            owner = self.turns.get_player_at(identity.player)
        except GameStateError as e:
            raise InvalidPieceError(f"玩家 {identity.player}", "对局中不存在该玩家") from e

        bit = Bit(self.texture_loader)
        bit.load_texture_from_file(texture_name(identity.player, identity.kind))
        bit.set_owner(owner)
        bit.set_size(self.piece_size, self.piece_size)
        bit.set_game_tag(identity.to_tag())
        return bit
