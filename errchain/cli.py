from __future__ import annotations

"""errchain Command Line Interface."""

import importlib.util
import inspect
from importlib import import_module
from pathlib import Path
from typing import Any, Callable, Optional

import anyio
import typer
from rich.console import Console
from rich.markup import escape

from errchain import __version__
from errchain.config import RenderOptions, load_options
from errchain.core.boundary import from_async, from_call
from errchain.core.chain_error import ChainError, ErrorHandle
from errchain.core.result import Result
from errchain.utils.constants import SYMBOLS, STYLE
from errchain.utils.logging import get as get_logger
from errchain.utils.render import build_rich_tree, format_stack, iter_chain

app = typer.Typer(
    name="errchain",
    help="CLI for errchain: run a callable and show its error chain.",
    add_completion=False,
)

console = Console()


def _module_from_file(file_path: Path) -> Any:
    """Execute a Python file and return it as a module object."""
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    spec = importlib.util.spec_from_file_location(file_path.stem, file_path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load module from {file_path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _load_target(target: str) -> Result[Callable[[], Any]]:
    """Resolve ``module:attr`` or ``file.py:attr`` into a callable."""
    if ":" not in target:
        return Result.failure(
            ChainError(f"Target must look like 'module:callable' or 'file.py:callable', got '{target}'")
        )
    location, attr = target.rsplit(":", 1)

    if location.endswith(".py"):
        module, err = from_call(lambda: _module_from_file(Path(location)), f"Could not load {location}")
    else:
        module, err = from_call(lambda: import_module(location), f"Could not import {location}")
    if err:
        return Result.failure(err)

    fn = getattr(module, attr, None)
    if fn is None or not callable(fn):
        return Result.failure(ChainError(f"Callable '{attr}' not found in {location}"))
    return Result.success(fn)


def _load_render_options(config: Optional[Path], show_types: bool) -> Result[RenderOptions]:
    opts = RenderOptions()
    if config is not None:
        opts, err = from_call(lambda: load_options(config), f"Invalid render config {config}")
        if err:
            return Result.failure(err)
    if show_types:
        opts = opts.model_copy(update={"show_types": True})
    return Result.success(opts)


def _report(err: ErrorHandle, opts: RenderOptions, as_tree: bool) -> None:
    if as_tree:
        console.print(build_rich_tree(err, opts))
    else:
        console.print(f"[{STYLE['error']}]{escape(format_stack(err, opts))}[/]")


@app.command()
def run(
    target: str = typer.Argument(..., help="Callable to invoke: 'package.module:func' or 'path/to/file.py:func'."),
    message: str = typer.Option("", "--message", "-m", help="Message of the wrapping error on failure."),
    tree: bool = typer.Option(False, "--tree", help="Render the error chain as a tree."),
    types: bool = typer.Option(False, "--types", help="Prefix each message with its exception type."),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML file with render options.", dir_okay=False),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Invoke TARGET with no arguments and print its value or error chain."""
    log = get_logger("debug" if verbose else "warning")

    opts, err = _load_render_options(config, types)
    if err:
        _report(err, RenderOptions(), tree)
        raise typer.Exit(code=1)

    fn, err = _load_target(target)
    if err:
        _report(err, opts, tree)
        raise typer.Exit(code=1)
    log.debug("resolved %s -> %r", target, fn)

    if inspect.iscoroutinefunction(fn):
        value, err = anyio.run(from_async, fn, message)
    else:
        value, err = from_call(fn, message)

    if err:
        log.debug("%s failed, chain depth %d", target, sum(1 for _ in iter_chain(err)))
        _report(err, opts, tree)
        raise typer.Exit(code=1)

    log.debug("%s returned %s", target, type(value).__name__)
    console.print(SYMBOLS["success"] + escape(repr(value)))


@app.command()
def version():
    """Print the errchain version."""
    console.print(f"errchain {__version__}")


if __name__ == "__main__":  # pragma: no cover
    app()
