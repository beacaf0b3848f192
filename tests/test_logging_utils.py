import importlib

import pytest
from loguru import logger

from tapl.chapters import ARITH, run_chapter
from tapl.core.ast import IsZero, Pred, Succ, Zero
from tapl.core.context import Context
from tapl.eval.machine import Evaluator
from tapl.eval.strategy import Strategy

logging_utils = importlib.import_module("tapl.logging_utils")


@pytest.fixture(autouse=True)
def _fresh_logging(monkeypatch):
    monkeypatch.setattr(logging_utils, "_CONFIGURED_PROFILE", None)
    yield
    logger.remove()
    logger.disable("tapl")


def _single_step() -> None:
    Evaluator().evaluate(IsZero(Pred(Succ(Zero()))), Context.empty(), Strategy.SINGLE_STEP)


def test_default_profile_writes_to_stderr(capsys) -> None:
    logging_utils.configure_logging()
    logger.info("plain info line")
    logger.debug("hidden debug line")

    err = capsys.readouterr().err
    assert "plain info line" in err
    assert "| INFO" in err
    assert "hidden debug line" not in err


def test_module_level_below_global(monkeypatch, capsys) -> None:
    monkeypatch.setenv("TAPL_LOG_FILTER", "info,tapl.eval=debug")
    logging_utils.configure_logging()
    _single_step()
    run_chapter(ARITH)

    err = capsys.readouterr().err
    assert "eval.step n=0" in err
    assert "eval.normal_form steps=2" in err
    assert "chapter.done" not in err


def test_module_disabled(monkeypatch, capsys) -> None:
    monkeypatch.setenv("TAPL_LOG_FILTER", "debug,tapl.eval=false")
    logging_utils.configure_logging()
    _single_step()
    run_chapter(ARITH)

    err = capsys.readouterr().err
    assert "eval.step" not in err
    assert "chapter.done name=arith" in err


def test_global_level(monkeypatch, capsys) -> None:
    monkeypatch.setenv("TAPL_LOG_FILTER", "warning")
    logging_utils.configure_logging()
    logger.info("quiet")
    logger.warning("loud")

    err = capsys.readouterr().err
    assert "quiet" not in err
    assert "loud" in err


def test_cli_profile_uses_rich_console(capsys) -> None:
    logging_utils.configure_logging(profile="cli")
    logger.info("hello from cli")

    captured = capsys.readouterr()
    assert "hello from cli" in captured.out
    assert "hello from cli" not in captured.err


def test_same_profile_configures_once(monkeypatch, capsys) -> None:
    logging_utils.configure_logging()
    monkeypatch.setenv("TAPL_LOG_FILTER", "error")
    logging_utils.configure_logging()
    logger.info("still info")

    assert "still info" in capsys.readouterr().err


def test_package_logs_disabled_until_configured(capsys) -> None:
    logger.disable("tapl")
    handler_id = logger.add(lambda message: print(message, end=""), level="DEBUG")
    try:
        _single_step()
    finally:
        logger.remove(handler_id)

    assert "eval.step" not in capsys.readouterr().out
