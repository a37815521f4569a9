"""
日志系统

规则层所有日志记录器都挂在 'chess_game' 之下: 对局类使用 chess_game.<类名>，
编解码模块使用 chess_game.board_codec。命令行入口根据系统配置调用一次 setup_logger。
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from ..config.game_config import SystemConfig

ROOT_LOGGER_NAME = 'chess_game'

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _build_handlers(log_file: Optional[str], log_dir: str, max_size: int,
                    backup_count: int, console_output: bool) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []

    if console_output:
        handlers.append(logging.StreamHandler(sys.stdout))

    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            filename=log_path / log_file,
            maxBytes=max_size * 1024 * 1024,  # MB -> 字节
            backupCount=backup_count,
            encoding='utf-8'
        ))

    return handlers


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: str = 'INFO',
    log_file: Optional[str] = None,
    log_dir: str = 'logs/chess_game_engine',
    max_size: int = 10,  # MB
    backup_count: int = 5,
    console_output: bool = True
) -> logging.Logger:
    """
    设置日志记录器

    同一记录器重复设置时不再添加处理器，只更新级别。

    Args:
        name: 日志记录器名称
        level: 日志级别，无法识别时使用INFO
        log_file: 日志文件名，为空时不写文件
        log_dir: 日志目录
        max_size: 单个日志文件最大大小(MB)
        backup_count: 轮转备份数量
        console_output: 是否输出到标准输出

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    logger = logging.getLogger(name)
    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(log_level)
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(log_file, log_dir, max_size, backup_count, console_output):
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def setup_logger_from_config(system_config: "SystemConfig", debug: bool = False) -> logging.Logger:
    """
    按系统配置设置规则层根日志记录器

    Args:
        system_config: 系统配置
        debug: 调试模式，强制DEBUG级别并输出到控制台
    """
    return setup_logger(
        ROOT_LOGGER_NAME,
        level='DEBUG' if debug else system_config.log_level,
        log_file=system_config.log_file or None,
        log_dir=system_config.log_dir,
        max_size=system_config.log_max_size,
        backup_count=system_config.log_backup_count,
        console_output=debug,
    )


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    return logging.getLogger(name)


class LoggerMixin:
    """为对局类提供 chess_game.<类名> 日志记录器"""

    @property
    def logger(self) -> logging.Logger:
        return get_logger(f'{ROOT_LOGGER_NAME}.{self.__class__.__name__}')

    def log_info(self, message: str, *args, **kwargs):
        self.logger.info(message, *args, **kwargs)

    def log_debug(self, message: str, *args, **kwargs):
        self.logger.debug(message, *args, **kwargs)
