"""
棋子载体(Bit)

宿主框架中可放置在格子上的通用棋子对象。
"""

from typing import Optional, Tuple, TYPE_CHECKING

from .textures import NullTextureLoader, TextureLoader

if TYPE_CHECKING:
    from .grid import ChessSquare
    from .player import Player


_DEFAULT_LOADER = NullTextureLoader()


class Bit:
    """
    通用棋子

    携带整数标签、像素位置与尺寸、纹理以及所属玩家。
    所属玩家是非拥有关联；棋子的生命周期由所在格子管理。
    """

    def __init__(self, texture_loader: Optional[TextureLoader] = None):
        self.game_tag: int = 0
        self.position: Tuple[float, float] = (0.0, 0.0)
        self.size: Tuple[int, int] = (0, 0)
        self.owner: Optional["Player"] = None
        self.texture: object = None
        self.texture_name: Optional[str] = None
        self.holder: Optional["ChessSquare"] = None
        self._texture_loader = texture_loader or _DEFAULT_LOADER

    def load_texture_from_file(self, name: str):
        """通过宿主加载器加载纹理，失败处理由宿主负责"""
        self.texture_name = name
        self.texture = self._texture_loader.load(name)

    def set_game_tag(self, tag: int):
        self.game_tag = tag

    def set_position(self, position: Tuple[float, float]):
        self.position = position

    def set_size(self, width: int, height: int):
        self.size = (width, height)

    def set_owner(self, owner: Optional["Player"]):
        self.owner = owner

    def get_owner(self) -> Optional["Player"]:
        return self.owner

    def __repr__(self) -> str:
        return f"Bit(tag={self.game_tag}, texture={self.texture_name!r})"
