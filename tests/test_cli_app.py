import importlib

from typer.testing import CliRunner

cli_app_module = importlib.import_module("tapl.cli.app")


def test_list_shows_examples() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["list"])

    assert result.exit_code == 0
    assert "untyped/nested-beta" in result.output
    assert "typed/guard-not-bool" in result.output


def test_list_uses_fresh_name_suffix(monkeypatch) -> None:
    monkeypatch.setenv("TAPL_FRESH_NAME_SUFFIX", "_")
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["list"])

    assert result.exit_code == 0
    assert "untyped/shadowing: ((lambda x. (lambda x_. x)) (lambda x. x))" in result.output


def test_chapters_passes_fresh_name_suffix(monkeypatch) -> None:
    seen = []

    def fake_run_chapter(chapter, evaluator, checker, strategies, suffix):
        seen.append(suffix)
        return []

    monkeypatch.setenv("TAPL_FRESH_NAME_SUFFIX", "#")
    monkeypatch.setattr(cli_app_module, "run_chapter", fake_run_chapter)
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["chapters", "untyped"])

    assert result.exit_code == 0
    assert seen == ["#"]


def test_chapters_all_pass() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["chapters"])

    assert result.exit_code == 0
    assert "FAIL" not in result.output
    assert "all checks passed" in result.output


def test_chapters_single_strategy() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["chapters", "arith", "--strategy", "single-step"])

    assert result.exit_code == 0
    assert "eval:single-step" in result.output
    assert "eval:full-reduction" not in result.output
    assert "typed/" not in result.output


def test_chapters_failure_exit_code(monkeypatch) -> None:
    from tapl.chapters import ExampleResult

    def fake_run_chapter(chapter, evaluator, checker, strategies, suffix):
        return [ExampleResult(chapter.name, "broken", "type", False, "expected Bool, got Nat")]

    monkeypatch.setattr(cli_app_module, "run_chapter", fake_run_chapter)
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["chapters", "typed"])

    assert result.exit_code == 1
    assert "FAIL" in result.output
    assert "expected Bool, got Nat" in result.output


def test_chapters_unknown_name() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["chapters", "nope"])

    assert result.exit_code != 0


def test_eval_prints_trace() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["eval", "arith/iszero-zero", "-s", "single-step"])

    assert result.exit_code == 0
    lines = [line.strip() for line in result.output.splitlines()]
    assert "type: Bool" in lines
    assert "0  (iszero (pred (succ 0)))" in lines
    assert "2  true" in lines


def test_eval_full_reduction_names_binders() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["eval", "untyped/free-in-argument", "-s", "full-reduction"])

    assert result.exit_code == 0
    assert "(lambda x2. z)" in result.output
    assert "type error" in result.output


def test_eval_uses_settings(monkeypatch) -> None:
    monkeypatch.setenv("TAPL_STRATEGY", "single-step")
    monkeypatch.setenv("TAPL_STEP_LIMIT", "1")
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["eval", "arith/iszero-zero"])

    assert result.exit_code == 1
    assert "stopped after 1 steps" in result.output


def test_eval_bad_target() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["eval", "arith"])

    assert result.exit_code != 0
