import pathlib
import subprocess
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parent.parent


@pytest.mark.parametrize("module", ["scorecraft", "scorecraft.display", "scorecraft.note", "scorecraft.piece", "scorecraft.render"])
def test_module_imports_in_fresh_interpreter (module: str) -> None:

	"""Each module imports cleanly on its own, whatever order the cycle is entered in."""

	result = subprocess.run([sys.executable, "-c", f"import {module}"], capture_output=True, text=True, cwd=ROOT)

	assert result.returncode == 0, result.stderr
