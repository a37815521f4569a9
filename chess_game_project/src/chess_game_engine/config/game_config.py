"""
游戏配置数据结构

定义各种配置类和默认参数。
"""

from dataclasses import dataclass


STANDARD_START_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


@dataclass
class GameConfig:
    """对局配置"""
    # 棋盘
    board_size: int = 8                         # 棋盘边长
    number_of_players: int = 2                  # 玩家数量
    piece_size: int = 64                        # 单格像素尺寸
    board_texture: str = "boardsquare.png"      # 棋盘格纹理

    # 开局
    start_position: str = STANDARD_START_POSITION  # 初始局面(FEN棋子布局)

    # 状态字符串兼容选项
    legacy_pawn_decoding: bool = False          # 解码时所有棋子按兵处理(旧格式兼容)


@dataclass
class SystemConfig:
    """系统配置"""
    log_level: str = 'INFO'             # 日志级别
    log_file: str = ''                  # 日志文件，为空时不写文件
    log_dir: str = 'logs'               # 日志目录
    log_max_size: int = 10              # 日志文件最大大小(MB)
    log_backup_count: int = 5           # 日志备份数量


# 默认配置实例
DEFAULT_GAME_CONFIG = GameConfig()
DEFAULT_SYSTEM_CONFIG = SystemConfig()
