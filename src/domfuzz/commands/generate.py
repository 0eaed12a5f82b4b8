"""Command: generate typosquatting variations of a domain."""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

import click

from domfuzz.commands._base import DomfuzzCommand
from domfuzz.domain.types import KeyboardLayout

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from domfuzz.commands._context import AppContext
    from domfuzz.services.checker import CheckProgress


@contextmanager
def _progress_bar(enabled: bool) -> Iterator[Callable[[CheckProgress], None] | None]:
    """Yield an ``on_progress`` callback driving a Rich bar on stderr, or None."""
    from domfuzz.output.console import create_stderr_console

    console = create_stderr_console()
    if not enabled or not console.is_terminal:
        yield None
        return

    from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn, TimeElapsedColumn

    with Progress(
        TextColumn("[df.op]checking"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("check", total=None)

        def update(state: CheckProgress) -> None:
            progress.update(task, total=state.total, completed=state.completed)

        yield update


def _load_dictionary(path: Path | None) -> tuple[str, ...]:
    from domfuzz.infrastructure.dictionary import resolve_dictionary

    if path is not None and not path.is_file():
        raise click.ClickException(f"Dictionary file not found: {path}")
    try:
        return resolve_dictionary(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Cannot read dictionary {path}: {exc}") from exc


@click.command(
    cls=DomfuzzCommand,
    examples=(
        "generate example.com",
        "generate example.com -t all -n 200",
        "generate example.com -t lookalike,tld-variations --sort score",
        "generate example.com -t combosquatting --dictionary words.txt",
        "generate example.com -s --concurrency 30 --timeout 3",
        "generate example.com -r --ordered",
        "--json generate example.com -t bitsquatting",
    ),
)
@click.argument("domain")
@click.option(
    "-t",
    "--transformations",
    "tokens",
    multiple=True,
    help="Transformation ids, aliases or bundles (comma-separated, repeatable).",
)
@click.option("-n", "--max-variations", type=click.IntRange(min=1), default=None, help="Stop after N variations.")
@click.option("-s", "--check-status", is_flag=True, help="Check registration status of each variation.")
@click.option("-r", "--only-registered", is_flag=True, help="Keep registered/parked variations (implies -s).")
@click.option("-a", "--only-available", is_flag=True, help="Keep available variations (implies -s).")
@click.option(
    "--dictionary",
    "dictionary_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Word list for combosquatting, brand confusion and word swaps.",
)
@click.option("--batch-size", type=click.IntRange(min=1), default=None, help="Generation batch size.")
@click.option("--concurrency", type=click.IntRange(min=1), default=None, help="Concurrent status checks.")
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=None, help="Per-check timeout (s).")
@click.option("--max-substitutions", type=click.IntRange(min=1), default=None, help="Lower the substitution bound.")
@click.option(
    "--layout",
    "layouts",
    type=click.Choice([layout.value for layout in KeyboardLayout]),
    multiple=True,
    help="Keyboard layout(s) for fat-finger and misspelling (repeatable).",
)
@click.option("--min-score", type=click.FloatRange(0.0, 1.0), default=None, help="Drop variations scoring below X.")
@click.option("--ordered", is_flag=True, help="Report checked variations in generation order.")
@click.option("--sort", type=click.Choice(["generation", "score"]), default=None, help="Output order.")
@click.pass_obj
def generate(
    app: AppContext,
    domain: str,
    tokens: tuple[str, ...],
    max_variations: int | None,
    check_status: bool,
    only_registered: bool,
    only_available: bool,
    dictionary_path: Path | None,
    batch_size: int | None,
    concurrency: int | None,
    timeout: float | None,
    max_substitutions: int | None,
    layouts: tuple[str, ...],
    min_score: float | None,
    ordered: bool,
    sort: str | None,
) -> None:
    """Generate lookalike variations of DOMAIN."""
    from domfuzz.config.models import FuzzConfig
    from domfuzz.services.fuzz import FuzzService

    settings = app.settings
    config = FuzzConfig.from_settings(
        settings,
        transformations=tokens or None,
        max_variations=max_variations,
        batch_size=batch_size,
        concurrency_limit=concurrency,
        per_check_timeout=timeout,
        check_status=check_status or None,
        only_registered=only_registered or None,
        only_available=only_available or None,
        dictionary=_load_dictionary(dictionary_path or settings.dictionary.path),
        max_substitutions=max_substitutions,
        keyboard_layouts=tuple(KeyboardLayout(layout) for layout in layouts) or None,
        min_score=min_score,
        preserve_order=ordered or None,
        sort=sort,
    )

    show_progress = config.check_status and not (settings.json_output or settings.quiet)
    with _progress_bar(show_progress) as on_progress:
        result = FuzzService().generate(
            domain,
            config,
            on_record=app.echo_record if app.streaming else None,
            on_progress=on_progress,
        )
    app.emit(result, streamed=app.streaming)
