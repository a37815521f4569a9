"""
基础测试模块

测试项目的基本功能和导入。
"""

import pytest
from pathlib import Path

project_root = Path(__file__).parent.parent.parent


def test_project_import():
    """测试项目主模块是否可以正常导入"""
    import chess_game_project
    assert chess_game_project.__version__ == "0.1.0"
    assert chess_game_project.__author__ == "Chess Game Team"


def test_submodules_import():
    """测试子模块是否可以正常导入"""
    from chess_game_project.src import chess_game_engine
    from chess_game_project.src.chess_game_engine import rules_engine, framework, config, utils

    assert chess_game_engine.__version__ == "0.1.0"
    assert hasattr(rules_engine, 'ChessGame')
    assert hasattr(framework, 'Grid')
    assert hasattr(config, 'ConfigManager')
    assert hasattr(utils, 'setup_logger')


def test_main_entry_points():
    """测试主入口文件是否存在"""
    assert (project_root / "chess_game_project" / "main.py").exists()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
