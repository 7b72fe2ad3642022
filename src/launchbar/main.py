import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from launchbar.application.expressions import ExpressionRegistry
from launchbar.application.resolver import Resolver
from launchbar.domain.events import EventBus
from launchbar.infrastructure import EventBusDispatcher, FileLaunchConfigProvider, StaticOptionProvider
from launchbar.logger import get_logger, setup_logger
from launchbar.presentation.tui import LauncherApp

load_dotenv()

cli = typer.Typer(
    name="launchbar",
    help="Keystroke-driven launcher resolving applications, intents and interests",
    epilog="""
    Examples:
    $ launchbar --config ./launch_config.json --debug
    """,
    add_completion=False,
)


def build_resolver(config_path: Optional[Path] = None, event_bus: Optional[EventBus] = None) -> Resolver:
    """Wire the resolver with the file-backed configuration and event-bus dispatcher."""
    event_bus = event_bus or EventBus()
    config = FileLaunchConfigProvider(config_path).fetch_launch_config()
    return Resolver(
        config=config,
        provider=StaticOptionProvider(config.lists),
        dispatcher=EventBusDispatcher(event_bus),
        expressions=ExpressionRegistry.with_builtins(),
        event_bus=event_bus,
    )


@cli.command()
def main(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to the launch configuration JSON"),
    debug: bool = typer.Option(os.getenv("DEBUG", "false").lower() == "true", "--debug", help="Enable debug mode"),
):
    """Run the launcher TUI."""
    setup_logger(log_level="DEBUG" if debug else "INFO")
    logger = get_logger("main")
    logger.info("Starting launchbar")

    resolver = build_resolver(config)
    LauncherApp(resolver).run()


def run() -> None:
    cli()


if __name__ == "__main__":
    run()
