import sys

import click
from rich.console import Console

from slackfetch.exceptions import PipelineError
from slackfetch.handler import build_pipeline
from slackfetch.logging import configure_logging
from slackfetch.settings import Mode, Settings

console = Console()


@click.command()
@click.argument("url")
@click.option("--event-id", default=None, help="Event id carried into the result and notifications.")
@click.option("--channel", default=None, help="Channel carried into the result and notifications.")
@click.option(
    "--mode",
    type=click.Choice([m.value for m in Mode]),
    default=None,
    help="Override SLACKFETCH_MODE for this run.",
)
def main(url: str, event_id: str | None, channel: str | None, mode: str | None) -> None:
    """Fetch URL once through the pipeline and print the result."""
    overrides = {"mode": mode} if mode else {}
    settings = Settings(**overrides)
    configure_logging(settings)

    event = {"eventId": event_id, "channel": channel, "url": url}
    event = {key: value for key, value in event.items() if value is not None}
    console.print(f"Sending request to: [cyan]{url}[/cyan]")

    try:
        result = build_pipeline(settings).run(event)
    except PipelineError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    console.print_json(data=result)


if __name__ == "__main__":
    main()
