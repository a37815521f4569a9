"""
棋盘网格与格子(holder)

宿主框架提供的可寻址格子网格，每个格子至多持有一个棋子。
"""

from typing import Callable, List, Optional, Tuple

from .bit import Bit


class ChessSquare:
    """
    棋盘格子

    独占持有其上的棋子；放入新棋子前先释放旧棋子。
    """

    def __init__(self, column: int, row: int):
        self.column = column
        self.row = row
        self.position: Tuple[float, float] = (0.0, 0.0)
        self.size: int = 0
        self.texture_name: Optional[str] = None
        self._bit: Optional[Bit] = None

    def bit(self) -> Optional[Bit]:
        """当前棋子"""
        return self._bit

    def get_position(self) -> Tuple[float, float]:
        return self.position

    def set_bit(self, bit: Optional[Bit]):
        """
        放置棋子

        Args:
            bit: 新棋子，None表示清空格子
        """
        if bit is not None and bit is self._bit:
            return
        self.destroy_bit()
        if bit is None:
            return

        # 同一棋子实例不能同时出现在两个格子上
        if bit.holder is not None:
            bit.holder._bit = None
        bit.holder = self
        self._bit = bit

    def destroy_bit(self):
        """释放当前棋子"""
        if self._bit is not None:
            self._bit.holder = None
            self._bit = None

    def empty(self) -> bool:
        return self._bit is None

    def __repr__(self) -> str:
        return f"ChessSquare({self.column}, {self.row}, bit={self._bit!r})"


class Grid:
    """
    格子网格

    坐标 (x, y) 中 x 为列，y 为行，第0行靠近0号玩家。
    """

    def __init__(self, width: int = 8, height: int = 8):
        self.width = width
        self.height = height
        self._squares: List[List[ChessSquare]] = [
            [ChessSquare(x, y) for x in range(width)] for y in range(height)
        ]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_square(self, x: int, y: int) -> Optional[ChessSquare]:
        """获取格子，越界返回None"""
        if not self.in_bounds(x, y):
            return None
        return self._squares[y][x]

    def for_each_square(self, fn: Callable[[ChessSquare, int, int], None]):
        """
        遍历所有格子，行在外层(0..height-1)，列在内层(0..width-1)

        Args:
            fn: 回调函数 fn(square, x, y)
        """
        for y in range(self.height):
            for x in range(self.width):
                fn(self._squares[y][x], x, y)

    def initialize_chess_squares(self, square_size: int, texture_name: str):
        """
        初始化格子外观

        第0行绘制在屏幕底部。
        """
        for y in range(self.height):
            for x in range(self.width):
                square = self._squares[y][x]
                square.size = square_size
                square.texture_name = texture_name
                square.position = (
                    x * square_size + square_size / 2,
                    (self.height - 1 - y) * square_size + square_size / 2,
                )
