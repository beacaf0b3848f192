"""Typer CLI entrypoints."""

from __future__ import annotations

from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from tapl.chapters import CHAPTERS, get_chapter, run_chapter
from tapl.config.settings import load_settings
from tapl.core.checker import TypeChecker
from tapl.core.errors import StepLimitExceeded, TypeError
from tapl.core.printer import show
from tapl.eval.machine import Evaluator
from tapl.eval.strategy import Strategy
from tapl.logging_utils import configure_logging

app = typer.Typer(name="tapl", help="Evaluators and type checker for small calculi", add_completion=False)


def _split_target(target: str) -> tuple[str, str]:
    chapter, sep, example = target.partition("/")
    if not sep or not example:
        raise typer.BadParameter(f"expected CHAPTER/EXAMPLE, got {target!r}")
    return chapter, example


@app.command("list")
def list_examples() -> None:
    """List chapters and their examples."""
    suffix = load_settings().fresh_name_suffix
    console = Console()
    for chapter in CHAPTERS.values():
        console.print(f"[bold]{chapter.name}[/bold]: {chapter.title}")
        for example in chapter.examples:
            console.print(f"  {chapter.name}/{example.name}: {escape(show(example.term, example.ctx, suffix))}")


@app.command()
def chapters(
    names: Annotated[list[str] | None, typer.Argument(help="Chapters to run (default: all)")] = None,
    strategy: Annotated[Strategy | None, typer.Option("--strategy", "-s", help="Only this strategy")] = None,
) -> None:
    """Run chapter examples and report each check."""
    configure_logging(profile="cli")
    settings = load_settings()
    selected = names or list(CHAPTERS)
    strategies = (strategy,) if strategy is not None else tuple(Strategy)
    logger.info("chapters.start names={} strategies={}", selected, [str(s) for s in strategies])

    console = Console()
    evaluator = Evaluator(step_limit=settings.step_limit)
    checker = TypeChecker()
    failures = 0
    for name in selected:
        try:
            chapter = get_chapter(name)
        except KeyError as e:
            raise typer.BadParameter(str(e.args[0])) from e
        for result in run_chapter(chapter, evaluator, checker, strategies, settings.fresh_name_suffix):
            if result.passed:
                console.print(f"[green]ok[/green]   {result.chapter}/{result.example} [dim]{result.check}[/dim]")
            else:
                failures += 1
                console.print(
                    f"[red]FAIL[/red] {result.chapter}/{result.example} [dim]{result.check}[/dim]: {escape(result.detail)}"
                )

    if failures:
        console.print(f"[red]{failures} check(s) failed[/red]")
        raise typer.Exit(code=1)
    console.print("[bold green]all checks passed[/bold green]")


@app.command("eval")
def eval_example(
    target: Annotated[str, typer.Argument(help="CHAPTER/EXAMPLE, see `tapl list`")],
    strategy: Annotated[Strategy | None, typer.Option("--strategy", "-s")] = None,
) -> None:
    """Evaluate one example, printing each step when single-stepping."""
    configure_logging(profile="cli")
    settings = load_settings()
    chapter_name, example_name = _split_target(target)
    try:
        example = get_chapter(chapter_name).find(example_name)
    except KeyError as e:
        raise typer.BadParameter(str(e.args[0])) from e

    chosen = strategy if strategy is not None else settings.strategy
    suffix = settings.fresh_name_suffix
    console = Console()
    evaluator = Evaluator(step_limit=settings.step_limit)

    try:
        ty = TypeChecker().infer(example.ctx, example.term)
    except TypeError as e:
        console.print(f"[yellow]type error[/yellow]: {type(e).__name__}: {escape(str(e))}")
    else:
        console.print(f"[blue]type[/blue]: {ty}")

    if chosen is Strategy.SINGLE_STEP:
        try:
            for count, term in enumerate(evaluator.steps(example.term, example.ctx)):
                console.print(f"{count:>3}  {escape(show(term, example.ctx, suffix))}")
        except StepLimitExceeded as e:
            console.print(f"[red]stopped after {e.limit} steps[/red]")
            raise typer.Exit(code=1) from e
    else:
        result = evaluator.evaluate(example.term, example.ctx, chosen)
        console.print(escape(show(result, example.ctx, suffix)))


def main() -> None:
    app()
