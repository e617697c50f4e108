"""
Functions for formatting and displaying data in the console using Rich.
"""

from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from twilio_recordings.utils.formatting import format_duration, format_size


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "FetchFailed": [
            "• Check that the account SID and recording SIDs are correct.",
            "• A 404 usually means the recording was deleted or belongs to another account.",
            "• Check your internet connection and try again.",
        ],
        "JoinFailed": [
            "• Check that the output directory exists and is writable.",
            "• The temp files of this run were removed; rerun with -vv to log their paths.",
        ],
        "ResourceUnavailable": [
            "• The temp directory may be full or not writable.",
            "• Choose another directory with --tmp-dir.",
        ],
        "StorageReleasedError": [
            "• This session already cleaned up its temp files; start a new one.",
        ],
        "ConfigurationError": [
            "• Run `twilio-recordings --show-config` to inspect the settings.",
            "• Run `twilio-recordings init --force` to rewrite the config file.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_config(config_path: Path, config_data: dict[str, Any]):
    """Displays the current configuration."""
    console = Console()
    content = ""
    for key, value in config_data.items():
        if value is None:
            value = "[dim](system default)[/dim]"
        content += f"{key} = {value}\n"

    console.print(
        Panel(
            content.strip(),
            title=f"Configuration ([dim]{config_path}[/dim])",
            border_style="cyan",
        )
    )


def print_summary_panel(
    output_path: str,
    recording_count: int,
    total_bytes: int,
    duration_s: float,
    verified: bool = False,
    audio_length: float | None = None,
):
    """Displays the final summary of a download-and-join run."""
    console = Console()

    stats_table = Table(show_header=False, box=None, padding=(0, 2))
    stats_table.add_column(style="bold cyan", justify="right", width=16)
    stats_table.add_column(style="white", justify="left")

    stats_table.add_row("Recordings:", f"[bold green]{recording_count}[/bold green]")
    stats_table.add_row("Total Size:", f"[cyan]{format_size(total_bytes)}[/cyan]")
    stats_table.add_row("Time Elapsed:", f"[blue]{format_duration(duration_s)}[/blue]")
    if verified:
        stats_table.add_row(
            "Audio Length:",
            f"[green]{format_duration(audio_length)}[/green]"
            if audio_length is not None
            else "[red]✗ Not readable as MP3[/red]",
        )
    stats_table.add_row("Output:", f"[dim]{output_path}[/dim]")

    console.print()
    console.print(
        Panel(
            stats_table,
            title="🎧 [bold]Recordings Joined![/bold]",
            border_style="yellow" if verified and audio_length is None else "green",
            box=box.DOUBLE,
            expand=False,
            padding=(1, 2),
        )
    )
