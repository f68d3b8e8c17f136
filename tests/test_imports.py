"""
Tests that each module imports on its own in a fresh interpreter.
"""
import os
import subprocess
import sys

import pytest

SRC = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")


class TestImportOrder:
    """Import order must not matter between core and ui."""

    @pytest.mark.parametrize(
        "module",
        ["ui.terminal", "ui.frames", "core.errors", "core.engine", "snake_game.scene", "main"],
    )
    def test_module_imports_first(self, module):
        result = subprocess.run(
            [sys.executable, "-c", f"import {module}"],
            cwd=SRC,
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0, result.stderr
