import asyncio
from typing import Optional

import click

from nowcast.config import (
    AppConfig,
    LocationSource,
    load_config,
    load_environment,
)
from nowcast.factory import ScreenFactory
from nowcast.location.permissions import (
    ConsolePermissionGate,
    PermissionGate,
    StaticPermissionGate,
)
from nowcast.screen.console import ConsoleWeatherView
from nowcast.shared.logging_mixin import configure_logging


def display_header() -> None:
    click.echo(
        click.style("┌─[ ", fg="cyan", bold=True)
        + click.style("NOWCAST", fg="bright_green", bold=True)
        + click.style(" ]─ current weather where you are", fg="cyan", bold=True)
    )


def build_config(
    config_path: Optional[str],
    latitude: Optional[float],
    longitude: Optional[float],
) -> AppConfig:
    config = load_config(config_path) if config_path else AppConfig()

    if latitude is None and longitude is None:
        return config
    if latitude is None or longitude is None:
        raise click.UsageError("--latitude and --longitude must be given together")

    location = config.location.model_copy(
        update={
            "source": LocationSource.FIXED,
            "latitude": latitude,
            "longitude": longitude,
        }
    )
    return AppConfig.model_validate(
        {**config.model_dump(), "location": location.model_dump()}
    )


def build_permission_gate(grant: Optional[bool]) -> PermissionGate:
    if grant is None:
        return ConsolePermissionGate()
    return StaticPermissionGate.granting() if grant else StaticPermissionGate.denying()


def run_screen(factory: ScreenFactory, permission_gate: PermissionGate, once: bool) -> None:
    """Drive the screen from the main thread; prompts block between refreshes."""
    view = ConsoleWeatherView()
    context = factory.create_context(view=view, permission_gate=permission_gate)

    with asyncio.Runner() as runner:
        try:
            runner.run(context.start())
            while not once:
                answer = click.prompt(
                    click.style("[Enter] refresh, [q] quit", fg="bright_black"),
                    default="",
                    show_default=False,
                )
                if answer.strip().lower() == "q":
                    break
                runner.run(context.refresh())
        finally:
            runner.run(context.close())


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML file with weather and location settings",
)
@click.option("--log-level", default=None, help="Override NOWCAST_LOG_LEVEL")
@click.option("--latitude", type=float, default=None, help="Use a fixed latitude")
@click.option("--longitude", type=float, default=None, help="Use a fixed longitude")
@click.option(
    "--grant/--deny",
    "grant",
    default=None,
    help="Answer the location permission prompt without asking",
)
@click.option("--once", is_flag=True, help="Exit after the initial load")
def main(config_path, log_level, latitude, longitude, grant, once):
    """🌤️ NOWCAST - current weather for your current location"""
    try:
        env = load_environment()
        config = build_config(config_path, latitude, longitude)
    except (RuntimeError, FileNotFoundError) as e:
        raise click.ClickException(str(e)) from e

    configure_logging(log_level or env.nowcast_log_level)

    display_header()

    factory = ScreenFactory(config=config, api_key=env.openweather_api_key)
    try:
        run_screen(factory, build_permission_gate(grant), once)
    except (KeyboardInterrupt, click.Abort):
        pass


if __name__ == "__main__":

    main()
