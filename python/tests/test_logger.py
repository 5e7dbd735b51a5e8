"""Logging setup tests — level switching and component tagging."""

from __future__ import annotations

import sys
from collections.abc import Iterator

import pytest
from loguru import logger

from backend.logger import configure, get_logger


@pytest.fixture(autouse=True)
def _restore_default_sink() -> Iterator[None]:
    yield
    logger.remove()
    logger.add(sys.__stderr__)


def test_verbose_emits_debug_with_component(capsys: pytest.CaptureFixture[str]) -> None:
    configure(verbose=True)

    get_logger("solver").debug("expanding frontier")

    err = capsys.readouterr().err
    assert "expanding frontier" in err
    assert "solver" in err


def test_default_level_hides_debug(capsys: pytest.CaptureFixture[str]) -> None:
    configure(verbose=False)

    get_logger("generator").debug("quiet detail")
    get_logger("generator").warning("loud detail")

    err = capsys.readouterr().err
    assert "quiet detail" not in err
    assert "loud detail" in err
    assert "generator" in err


def test_verbose_flag_reaches_configure(monkeypatch: pytest.MonkeyPatch) -> None:
    from typer.testing import CliRunner

    import main

    seen: list[bool] = []
    monkeypatch.setattr(main, "configure", seen.append)

    result = CliRunner().invoke(
        main.app, ["--tiles", "1 2 3 4 5 6 7 8 0", "--solve", "-v"]
    )

    assert result.exit_code == 0
    assert seen == [True]
