"""
Console entry point: `twilio-recordings ...` or `python -m twilio_recordings ...`.
"""

import logging
import sys

from rich.console import Console

from twilio_recordings.cli.app import app
from twilio_recordings.cli.formatters import format_error_with_suggestions
from twilio_recordings.exceptions import TwilioRecordingsError

log = logging.getLogger("twilio_recordings")


def main() -> None:
    """
    Runs the CLI. Errors raised outside a command's own handling are shown
    as a suggestion panel with exit status 1; Ctrl-C exits quietly with 0.
    """
    console = Console()
    try:
        app()
    except KeyboardInterrupt:
        console.print(
            "\n[yellow]Interrupted. Temp files of an unfinished join may remain in "
            "the temp directory.[/yellow]"
        )
        sys.exit(0)
    except TwilioRecordingsError as e:
        console.print(format_error_with_suggestions(e))
        sys.exit(1)
    except Exception as e:
        log.debug("Unhandled error:", exc_info=True)
        console.print(format_error_with_suggestions(e, {"type": "Unexpected"}))
        sys.exit(1)


if __name__ == "__main__":
    main()
