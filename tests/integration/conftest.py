"""Integration test fixtures running the CLI in a separate interpreter."""

import os
import subprocess
import sys
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def run_cmd(args: list[str], cwd: Path) -> subprocess.CompletedProcess:
    """Run create-dummy-file with ``args`` and capture its output."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "create_dummy_file.cli", *args],
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
    )


@pytest.fixture(scope="session")
def integration_dir():
    """Session-wide temp directory for generated files."""
    with tempfile.TemporaryDirectory() as td:
        yield Path(td)


@pytest.fixture
def run_cli(integration_dir: Path) -> Callable[..., subprocess.CompletedProcess]:
    def run(*args: str) -> subprocess.CompletedProcess:
        return run_cmd(list(args), cwd=integration_dir)

    return run
