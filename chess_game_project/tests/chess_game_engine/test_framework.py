"""
测试宿主框架接口

测试网格遍历顺序、格子对棋子的独占持有和回合管理。
"""

import pytest

from chess_game_project.src.chess_game_engine.framework import Bit, Grid, NullTextureLoader, TurnManager
from chess_game_project.src.chess_game_engine.utils import GameStateError


class TestGrid:
    """Grid和ChessSquare的测试"""

    def setup_method(self):
        self.grid = Grid(8, 8)

    def test_enumeration_order(self):
        """行在外层，列在内层"""
        visited = []
        self.grid.for_each_square(lambda square, x, y: visited.append((x, y)))

        assert len(visited) == 64
        assert len(set(visited)) == 64
        assert visited[0] == (0, 0)
        assert visited[1] == (1, 0)
        assert visited[8] == (0, 1)
        assert visited[-1] == (7, 7)

    def test_get_square(self):
        square = self.grid.get_square(3, 5)
        assert (square.column, square.row) == (3, 5)
        assert self.grid.get_square(8, 0) is None
        assert self.grid.get_square(0, -1) is None

    def test_set_bit_releases_previous(self):
        """放入新棋子前释放旧棋子"""
        square = self.grid.get_square(0, 0)
        first, second = Bit(), Bit()

        square.set_bit(first)
        square.set_bit(second)

        assert square.bit() is second
        assert first.holder is None
        assert second.holder is square

    def test_same_bit_never_on_two_squares(self):
        bit = Bit()
        a = self.grid.get_square(0, 0)
        b = self.grid.get_square(1, 0)

        a.set_bit(bit)
        b.set_bit(bit)

        assert a.bit() is None
        assert b.bit() is bit

    def test_set_same_bit_is_noop(self):
        bit = Bit()
        square = self.grid.get_square(2, 2)
        square.set_bit(bit)
        square.set_bit(bit)
        assert square.bit() is bit
        assert bit.holder is square

    def test_destroy_bit(self):
        square = self.grid.get_square(0, 0)
        square.set_bit(Bit())
        square.destroy_bit()
        square.destroy_bit()
        assert square.empty()

    def test_bit_texture_loading(self):
        loader = NullTextureLoader()
        bit = Bit(loader)
        bit.load_texture_from_file("w_rook.png")
        assert bit.texture_name == "w_rook.png"
        assert loader.requested == ["w_rook.png"]


class TestTurnManager:
    """TurnManager的测试"""

    def setup_method(self):
        self.turns = TurnManager()
        self.turns.set_number_of_players(2)

    def test_players(self):
        assert self.turns.get_player_at(0).player_number() == 0
        assert self.turns.get_player_at(1).player_number() == 1
        with pytest.raises(GameStateError):
            self.turns.get_player_at(2)

    def test_turn_rotation(self):
        self.turns.start_game()
        assert self.turns.current_player.player_number() == 0
        self.turns.end_turn()
        assert self.turns.current_player.player_number() == 1
        self.turns.end_turn()
        assert self.turns.current_player.player_number() == 0

    def test_invalid_player_count(self):
        with pytest.raises(GameStateError):
            self.turns.set_number_of_players(0)

    def test_no_players(self):
        assert TurnManager().current_player is None
