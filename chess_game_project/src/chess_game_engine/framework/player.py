"""
玩家与回合管理

宿主框架的玩家对象和回合管理器。
"""

from typing import List, Optional

from ..utils.exceptions import GameStateError


class Player:
    """玩家"""

    def __init__(self, player_number: int):
        self._player_number = player_number

    def player_number(self) -> int:
        return self._player_number

    def __repr__(self) -> str:
        return f"Player({self._player_number})"


class TurnManager:
    """
    回合管理器

    持有所有玩家并记录当前行棋方。
    """

    def __init__(self):
        self._players: List[Player] = []
        self._current_index: int = 0
        self.started: bool = False

    def set_number_of_players(self, count: int):
        """重建玩家列表"""
        if count <= 0:
            raise GameStateError("玩家数量", f"必须为正数，当前: {count}")
        self._players = [Player(i) for i in range(count)]
        self._current_index = 0
        self.started = False

    @property
    def number_of_players(self) -> int:
        return len(self._players)

    def get_player_at(self, index: int) -> Player:
        """获取指定编号的玩家"""
        if not 0 <= index < len(self._players):
            raise GameStateError(f"玩家编号 {index}", "不存在")
        return self._players[index]

    def get_current_player(self) -> Optional[Player]:
        if not self._players:
            return None
        return self._players[self._current_index]

    @property
    def current_player(self) -> Optional[Player]:
        return self.get_current_player()

    def start_game(self):
        """开始对局，0号玩家先行"""
        self._current_index = 0
        self.started = True

    def end_turn(self):
        """交换行棋方"""
        if self._players:
            self._current_index = (self._current_index + 1) % len(self._players)
