"""
棋局状态编解码

支持两种互不兼容的文本格式:
- FEN 棋子布局字段 (导入与导出)，从第8横线到第1横线
- 64字符紧凑状态字符串，按格子遍历顺序(行在外层，列在内层)，用于存档、悔棋快照和网络同步
"""

from typing import List, Optional, TYPE_CHECKING

from .piece import PieceIdentity, PieceKind, notation_for_tag
from ..utils.exceptions import MalformedStateError
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from ..framework.grid import Grid
    from .piece_catalog import PieceCatalog

logger = get_logger('chess_game.board_codec')

BOARD_SIZE = 8
STATE_LENGTH = BOARD_SIZE * BOARD_SIZE

EMPTY_CHAR = '0'
# 旧格式中的数字表示 "玩家编号+1"，只携带玩家信息
LEGACY_PLAYER_DIGITS = {'1': 0, '2': 1}


# ==================== FEN 棋子布局 ====================

def fen_to_board(grid: "Grid", catalog: "PieceCatalog", fen: str) -> None:
    """
    将FEN棋子布局放置到棋盘上

    只读取第一个空格之前的部分，其余字段(行棋方、易位权、吃过路兵目标、计数)被忽略。
    不会清空棋盘；落子会覆盖目标格原有棋子。无法识别的字符和越界落子被静默丢弃。

    Args:
        grid: 棋盘网格
        catalog: 棋子目录
        fen: FEN字符串或其棋子布局字段
    """
    placement = fen.split(' ', 1)[0]

    row = BOARD_SIZE - 1  # 从第8横线开始
    col = 0

    for char in placement:
        if char == '/':
            row -= 1
            col = 0
        elif '1' <= char <= '8':
            col += int(char)
        else:
            identity = PieceIdentity.from_notation(char)
            if identity is None:
                logger.debug(f"忽略无法识别的字符: {char!r}")
            elif col < BOARD_SIZE and row >= 0:
                square = grid.get_square(col, row)
                bit = catalog.piece_for_identity(identity)
                square.set_bit(bit)
                bit.set_position(square.get_position())
            else:
                logger.debug(f"丢弃越界落子: {char!r} -> ({col}, {row})")
            col += 1


def board_to_fen(grid: "Grid") -> str:
    """
    导出FEN棋子布局字段

    Returns:
        str: 如 "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
    """
    fen_parts = []

    for row in range(BOARD_SIZE - 1, -1, -1):
        fen_row = ""
        empty_count = 0

        for col in range(BOARD_SIZE):
            bit = grid.get_square(col, row).bit()
            if bit is None:
                empty_count += 1
            else:
                if empty_count > 0:
                    fen_row += str(empty_count)
                    empty_count = 0
                fen_row += notation_for_tag(bit.game_tag)

        if empty_count > 0:
            fen_row += str(empty_count)

        fen_parts.append(fen_row)

    return "/".join(fen_parts)


# ==================== 紧凑状态字符串 ====================

def piece_notation(grid: "Grid", x: int, y: int) -> str:
    """单个格子的记法字符，空格为 '0'"""
    square = grid.get_square(x, y)
    if square is None or square.bit() is None:
        return EMPTY_CHAR
    return notation_for_tag(square.bit().game_tag)


def state_string(grid: "Grid") -> str:
    """
    导出64字符紧凑状态字符串

    Returns:
        str: 按格子遍历顺序，每格一个字符 ('0' 或 PNBRQK/pnbrqk)
    """
    chars: List[str] = []
    grid.for_each_square(lambda square, x, y: chars.append(piece_notation(grid, x, y)))
    return "".join(chars)


def decode_state_string(state: str, legacy_pawn_decoding: bool = False) -> List[Optional[PieceIdentity]]:
    """
    解码紧凑状态字符串

    字母解码为完整的 (种类, 玩家) 身份；数字 '1'/'2' 按旧格式解码为0号/1号玩家的兵。
    legacy_pawn_decoding 为真时所有非空格都解码为兵，只保留占位和所属玩家。

    Args:
        state: 64字符状态字符串
        legacy_pawn_decoding: 是否启用旧格式兼容

    Returns:
        List[Optional[PieceIdentity]]: 下标为 row*8+col 的身份列表

    Raises:
        MalformedStateError: 长度不为64或含有非法字符
    """
    if len(state) != STATE_LENGTH:
        logger.warning(f"拒绝状态字符串: 长度 {len(state)}")
        raise MalformedStateError(state, f"长度应为{STATE_LENGTH}，实际为{len(state)}")

    identities: List[Optional[PieceIdentity]] = []
    for index, char in enumerate(state):
        if char == EMPTY_CHAR:
            identities.append(None)
            continue

        if char in LEGACY_PLAYER_DIGITS:
            identity = PieceIdentity(PieceKind.PAWN, LEGACY_PLAYER_DIGITS[char])
        else:
            identity = PieceIdentity.from_notation(char)
            if identity is None:
                logger.warning(f"拒绝状态字符串: 第{index}位字符 {char!r}")
                raise MalformedStateError(state, f"第{index}位为非法字符 {char!r}")

        if legacy_pawn_decoding:
            identity = PieceIdentity(PieceKind.PAWN, identity.player)
        identities.append(identity)

    return identities


def set_state_string(grid: "Grid", catalog: "PieceCatalog", state: str,
                     legacy_pawn_decoding: bool = False) -> None:
    """
    从紧凑状态字符串恢复棋盘

    先完整校验再改动棋盘；校验失败时棋盘保持不变。每个格子都会被重写。

    Args:
        grid: 棋盘网格
        catalog: 棋子目录
        state: 64字符状态字符串
        legacy_pawn_decoding: 是否启用旧格式兼容
    """
    identities = decode_state_string(state, legacy_pawn_decoding)

    def restore(square, x, y):
        identity = identities[y * BOARD_SIZE + x]
        if identity is None:
            square.set_bit(None)
            return
        bit = catalog.piece_for_identity(identity)
        square.set_bit(bit)
        bit.set_position(square.get_position())

    grid.for_each_square(restore)
