"""Main invoke tasks file. Use `inv --list` to see available tasks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from invoke import Collection, task

if TYPE_CHECKING:
    from invoke.context import Context


@task(name="lint")
def lint(ctx: Context) -> None:
    """Run linting and format checks (no fixes) - for CI."""
    print("Running ruff check...")
    ctx.run("ruff check src tests tasks.py")

    print("Running ruff format check...")
    ctx.run("ruff format --check src tests tasks.py")

    print("All checks passed")


@task(name="format")
def format_and_check(ctx: Context) -> None:
    """Format code using ruff - for local dev."""
    ctx.run("ruff check src tests tasks.py --fix")
    ctx.run("ruff format src tests tasks.py")


@task(
    name="test",
    help={
        "keyword": "Only run tests matching this pytest -k expression",
        "verbose": "Show each test name",
    },
)
def run_tests(ctx: Context, keyword: str | None = None, verbose: bool = False) -> None:
    """Run the test suite."""
    args = ["pytest"]
    if verbose:
        args.append("-v")
    if keyword:
        args.append(f'-k "{keyword}"')
    ctx.run(" ".join(args), pty=True)


ns = Collection()
ns.add_task(lint)
ns.add_task(format_and_check)
ns.add_task(run_tests)
