# ruff: noqa: E402

import builtins
import sys
from pathlib import Path

import pytest
from _pytest.doctest import DoctestModule

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import create_comet.io as io
import create_comet.log as comet_log

DOCTEST_MODULES = {
    ROOT / "src" / "create_comet" / "models.py",
    ROOT / "src" / "create_comet" / "paths.py",
    ROOT / "src" / "create_comet" / "templates.py",
}


@pytest.fixture(autouse=True)
def _default_io_patches(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: False)
    monkeypatch.setattr(comet_log, "_configured_level", None)
    monkeypatch.setattr(comet_log, "_no_color_override", None)
    monkeypatch.delenv("COMET_LOG_LEVEL", raising=False)

    def fail_input(prompt: str = "") -> str:
        raise AssertionError("prompted unexpectedly")

    monkeypatch.setattr(builtins, "input", fail_input)


def pytest_collect_file(
    parent: pytest.Collector, file_path: Path
) -> DoctestModule | None:
    path = file_path if isinstance(file_path, Path) else Path(str(file_path))
    if path in DOCTEST_MODULES:
        return DoctestModule.from_parent(parent, path=path)
    return None
