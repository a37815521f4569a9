"""
异常定义

定义国际象棋规则层的各种异常类型。
"""


class ChessGameError(Exception):
    """
    国际象棋规则层基础异常

    所有规则层相关异常的基类。
    """

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class MalformedStateError(ChessGameError):
    """
    状态字符串格式异常

    当紧凑状态字符串长度不是64或包含非法字符时抛出。
    """

    def __init__(self, state: str, reason: str = ""):
        preview = state if len(state) <= 16 else state[:16] + "..."
        message = f"无效的状态字符串: {preview!r}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "MALFORMED_STATE")
        self.state = state
        self.reason = reason


class InvalidPieceError(ChessGameError):
    """
    非法棋子异常

    当棋子种类、玩家编号或身份标签无效时抛出。
    """

    def __init__(self, description: str, reason: str = ""):
        message = f"非法棋子: {description}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "INVALID_PIECE")
        self.description = description
        self.reason = reason


class ConfigurationError(ChessGameError):
    """
    配置错误异常

    当配置参数无效时抛出。
    """

    def __init__(self, config_name: str, reason: str = ""):
        message = f"配置错误 - {config_name}"
        if reason:
            message += f": {reason}"
        super().__init__(message, "CONFIG_ERROR")
        self.config_name = config_name
        self.reason = reason


class GameStateError(ChessGameError):
    """
    游戏状态异常

    当宿主框架接口被错误使用时抛出。
    """

    def __init__(self, state_description: str, reason: str = ""):
        message = f"游戏状态错误: {state_description}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "GAME_STATE_ERROR")
        self.state_description = state_description
        self.reason = reason
