"""
Defines the command-line interface for the application using Typer.
"""

import logging
import os
import sys
import time
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from twilio_recordings import __version__
from twilio_recordings.core.session import TwilioRecordings
from twilio_recordings.exceptions import TwilioRecordingsError
from twilio_recordings.media.integrity import joined_audio_length
from twilio_recordings.storage.config_manager import ConfigManager

from .formatters import format_error_with_suggestions, print_config, print_summary_panel

console = Console()

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("twilio_recordings")

app = typer.Typer(
    name="twilio-recordings",
    help=(
        "Download Twilio call recordings concurrently and join them into a single"
        " MP3. Use 'twilio-recordings <command> --help' for more info."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "twilio-recordings"


CONFIG_DIR = get_config_dir()
CONFIG_FILE = CONFIG_DIR / "config.ini"


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    show_config: bool = typer.Option(
        False, "--show-config", help="Display the current configuration."
    ),
):
    """Twilio Recordings CLI"""
    if version:
        console.print(
            f"[bold]twilio-recordings[/bold] version [cyan]{__version__}[/cyan]"
        )
        raise typer.Exit()

    log_level = "WARNING"
    if verbose == 1:
        log_level = "INFO"
    elif verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("twilio_recordings").setLevel(log_level)

    if show_config:
        try:
            config = ConfigManager(CONFIG_FILE).load_config()
        except TwilioRecordingsError as e:
            console.print(format_error_with_suggestions(e))
            raise typer.Exit(code=1) from e
        print_config(CONFIG_FILE, config.model_dump())
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def init(
    tmp_dir: str | None = typer.Option(
        None, "--tmp-dir", help="Directory for temporary recording files."
    ),
    max_connections: int | None = typer.Option(
        None, "--max-connections", "-c", help="Simultaneous downloads (default 8)."
    ),
    verify: bool | None = typer.Option(
        None,
        "--verify/--no-verify",
        help="Check that the joined file is a valid MP3 by default.",
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing config without asking."
    ),
):
    """Write a configuration file with the given defaults."""
    if (
        CONFIG_FILE.exists()
        and not force
        and not typer.confirm("Configuration file already exists. Overwrite it?")
    ):
        raise typer.Abort()

    settings = {
        "tmp_dir": tmp_dir,
        "max_connections": max_connections,
        "verify_output": verify,
    }
    try:
        ConfigManager(CONFIG_FILE).save_new_config(settings)
    except TwilioRecordingsError as e:
        console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e
    console.print(f"[bold green]✓ Configuration saved to '{CONFIG_FILE}'[/bold green]")


def _read_sids_from_stdin() -> list[str]:
    """Reads recording SIDs from stdin, one per line."""
    sids = []
    for line in sys.stdin:
        line = line.strip()
        if line and not line.startswith("#"):
            sids.append(line)
    return sids


@app.command()
def urls(
    account_sid: str = typer.Argument(..., help="Twilio account SID (AC...)."),
    recording_sids: list[str] = typer.Argument(  # noqa: B008
        ..., help="Recording SIDs (RE...)."
    ),
):
    """Print the media URL of each recording."""
    config = ConfigManager(CONFIG_FILE).load_config()
    recordings = TwilioRecordings(account_sid, recording_sids, config=config)
    for url in recordings.urls():
        typer.echo(url)


@app.command(name="join")
def join_command(
    account_sid: str = typer.Argument(..., help="Twilio account SID (AC...)."),
    recording_sids: list[str] | None = typer.Argument(  # noqa: B008
        None, help="Recording SIDs (RE...), in the order they should be joined."
    ),
    output: Path | None = typer.Option(  # noqa: B008
        None,
        "-o",
        "--output",
        help="Path of the joined file. Defaults to a new file in the temp directory.",
    ),
    tmp_dir: str | None = typer.Option(
        None, "--tmp-dir", help="Directory for temporary recording files."
    ),
    max_connections: int | None = typer.Option(
        None, "--max-connections", "-c", help="Simultaneous downloads."
    ),
    verify: bool | None = typer.Option(
        None, "--verify/--no-verify", help="Check that the joined file is a valid MP3."
    ),
    stdin: bool = typer.Option(
        False, "--stdin", help="Read recording SIDs from standard input, one per line."
    ),
):
    """Download recordings and join them into one MP3."""
    sids = list(recording_sids or [])
    if stdin:
        sids.extend(_read_sids_from_stdin())
    if not sids:
        console.print(
            "[red]✗ No recording SIDs provided.[/red] "
            "Use: [cyan]twilio-recordings join <ACCOUNT_SID> <SID>...[/cyan]"
            " or [cyan]--stdin[/cyan]"
        )
        raise typer.Exit(code=1)

    cli_options = {
        "tmp_dir": tmp_dir,
        "max_connections": max_connections,
        "verify_output": verify,
    }

    try:
        config = ConfigManager(CONFIG_FILE).load_config(cli_options)
    except TwilioRecordingsError as e:
        console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e

    recordings = TwilioRecordings(account_sid, sids, config=config)

    start_time = time.monotonic()
    try:
        total_bytes = recordings.download()
        output_path = recordings.join(output)
    except TwilioRecordingsError as e:
        log.debug(f"Removing temp files after failure: {recordings.storage.handles}")
        recordings.cleanup()
        console.print(format_error_with_suggestions(e, {"account": account_sid}))
        raise typer.Exit(code=1) from e
    duration = time.monotonic() - start_time

    audio_length = joined_audio_length(output_path) if config.verify_output else None

    print_summary_panel(
        output_path,
        len(sids),
        total_bytes,
        duration,
        verified=config.verify_output,
        audio_length=audio_length,
    )
    if config.verify_output and audio_length is None:
        raise typer.Exit(code=2)
