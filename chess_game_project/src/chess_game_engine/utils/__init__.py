"""
工具模块

包含日志、异常处理和其他通用工具。
"""

from .logger import setup_logger, setup_logger_from_config, get_logger, LoggerMixin
from .exceptions import (
    ChessGameError, MalformedStateError, InvalidPieceError,
    ConfigurationError, GameStateError
)

__all__ = [
    'setup_logger', 'setup_logger_from_config', 'get_logger', 'LoggerMixin',
    'ChessGameError', 'MalformedStateError', 'InvalidPieceError',
    'ConfigurationError', 'GameStateError'
]
