"""Command line entry point: ``pastery [OPTIONS] [PATH]``."""

from pathlib import Path
from typing import Optional

import typer

from .config import load_config
from .duration import MAX_AMOUNT, DurationError, parse_duration
from .languages import AUTODETECT, resolve_language
from .models import Options
from .reader import SourceReadError, read_source
from .request_builder import build_paste_url
from .runner import create_paste
from .uploader import PasteError

app = typer.Typer(help="Upload a file or standard input to pastery.net.", add_completion=False)


@app.command()
def paste(
    path: Optional[Path] = typer.Argument(
        None,
        help="The path of the file to upload. If not provided, the file is read from standard input.",
    ),
    api_key: str = typer.Option(
        ...,
        "--api-key",
        envvar="PASTERY_API_KEY",
        help="Your Pastery API key, found at https://www.pastery.net/account/.",
    ),
    lang: str = typer.Option(
        AUTODETECT,
        "--lang",
        help="The alias of the language the paste is written in. Unknown aliases auto-detect.",
    ),
    duration: str = typer.Option(
        "1d",
        "--duration",
        help="How long the paste lives, e.g. 30m, 12h, 2d, 1w, 1mo, 1y. At most 100y.",
    ),
    title: Optional[str] = typer.Option(None, "--title", help="The title of the paste."),
    max_views: Optional[int] = typer.Option(
        None,
        "--max-views",
        min=0,
        max=MAX_AMOUNT,
        help="The number of views after which the paste expires.",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the request URL and exit."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr."),
) -> None:
    try:
        span = parse_duration(duration)
    except DurationError as exc:
        raise typer.BadParameter(str(exc), param_hint="--duration") from exc

    options = Options(
        api_key=api_key,
        lang=resolve_language(lang),
        duration=span,
        title=title,
        max_views=max_views,
        path=path,
    )
    config = load_config()

    if dry_run:
        typer.echo(build_paste_url(options, base_url=config.base_url))
        return

    log_cb = _stderr_log if verbose else None
    try:
        body = read_source(options.path)
        result = create_paste(options, body, config, log_cb=log_cb)
    except (SourceReadError, PasteError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(result.url)


def _stderr_log(message: str) -> None:
    typer.echo(message, err=True)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
