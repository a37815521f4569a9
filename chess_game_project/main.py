#!/usr/bin/env python3
"""
Chess Game 主入口文件

提供命令行接口查看局面、导出紧凑状态字符串和验证棋局。
"""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from chess_game_project import __version__, __description__
from chess_game_project.src.chess_game_engine.config import (
    ConfigManager, GameConfig, SystemConfig, STANDARD_START_POSITION
)
from chess_game_project.src.chess_game_engine.rules_engine import BoardValidator, ChessGame
from chess_game_project.src.chess_game_engine.utils import setup_logger_from_config

console = Console()


def print_banner():
    """打印项目横幅"""
    banner_text = Text()
    banner_text.append("♞ Chess Game ♞\n", style="bold blue")
    banner_text.append(f"版本: {__version__}\n", style="green")
    banner_text.append(__description__, style="white")

    panel = Panel(
        banner_text,
        title="国际象棋规则层",
        title_align="center",
        border_style="blue",
        padding=(1, 2)
    )
    console.print(panel)


def load_board(game_config: GameConfig, fen: str) -> ChessGame:
    """在空棋盘上导入FEN布局"""
    game = ChessGame(game_config)
    game.grid.initialize_chess_squares(game_config.piece_size, game_config.board_texture)
    game.fen_to_board(fen)
    return game


def board_table(game: ChessGame) -> Table:
    """将棋盘渲染为表格，第8横线在上"""
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("")
    for file_char in "abcdefgh":
        table.add_column(file_char, justify="center")

    for row in range(7, -1, -1):
        cells = []
        for col in range(8):
            char = game.piece_notation(col, row)
            if char == '0':
                cells.append("[dim].[/dim]")
            elif char.isupper():
                cells.append(f"[bold white]{char}[/bold white]")
            else:
                cells.append(f"[bold red]{char}[/bold red]")
        table.add_row(str(row + 1), *cells)
    return table


@click.group()
@click.version_option(version=__version__, prog_name="Chess Game")
@click.option('--debug', is_flag=True, help='启用调试模式')
@click.option('--config', 'config_dir', type=click.Path(file_okay=False), help='配置目录路径')
@click.pass_context
def cli(ctx, debug: bool, config_dir: Optional[str]):
    """国际象棋规则层 - 棋局状态、FEN导入与紧凑状态字符串"""
    game_config = GameConfig()
    system_config = SystemConfig()

    if config_dir:
        manager = ConfigManager(config_dir)
        if not manager.validate_config('game'):
            console.print(f"[red]对局配置无效: {config_dir}[/red]")
            ctx.exit(1)
        game_config = manager.get_game_config()
        system_config = manager.get_system_config()
        console.print(f"[green]使用配置目录: {config_dir}[/green]")

    if debug:
        console.print("[yellow]调试模式已启用[/yellow]")

    setup_logger_from_config(system_config, debug=debug)

    ctx.ensure_object(dict)
    ctx.obj['game_config'] = game_config


@cli.command()
def info():
    """显示系统信息"""
    print_banner()


@cli.command()
@click.option('--fen', type=str, default=None, help='FEN字符串，默认为初始局面')
@click.pass_context
def show(ctx, fen: Optional[str]):
    """显示局面"""
    game_config = ctx.obj['game_config']
    game = load_board(game_config, fen or game_config.start_position)
    console.print(board_table(game))
    console.print(f"FEN: {game.board_to_fen()}")


@cli.command()
@click.option('--fen', type=str, default=None, help='FEN字符串，默认为初始局面')
@click.pass_context
def state(ctx, fen: Optional[str]):
    """输出64字符紧凑状态字符串"""
    game_config = ctx.obj['game_config']
    game = load_board(game_config, fen or game_config.start_position)
    click.echo(game.state_string())


@cli.command()
@click.option('--fen', type=str, default=STANDARD_START_POSITION, help='FEN字符串')
@click.pass_context
def validate(ctx, fen: str):
    """验证局面"""
    game = load_board(ctx.obj['game_config'], fen)
    report = BoardValidator().get_validation_report(game)

    if report['is_valid']:
        console.print(f"[green]局面合法，共 {report['total_pieces']} 枚棋子[/green]")
    else:
        console.print("[red]局面不合法:[/red]")
        for error in report['errors']:
            console.print(f"  • {error}")
        ctx.exit(1)


def main():
    """主入口函数"""
    try:
        cli(obj={})
    except KeyboardInterrupt:
        console.print("\n[yellow]程序被用户中断[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
