from typing import Optional

import click

from nowcast.screen.base import WeatherView
from nowcast.weather.views import WeatherDisplay


class ConsoleWeatherView(WeatherView):
    """Terminal rendition of the weather screen."""

    def __init__(self):
        self.busy = False
        self.refresh_enabled = True
        self.display: Optional[WeatherDisplay] = None

    def set_busy(self, busy: bool) -> None:
        if busy and not self.busy:
            click.echo(click.style("⏳ Fetching weather...", fg="bright_black"))
        self.busy = busy

    def set_refresh_enabled(self, enabled: bool) -> None:
        self.refresh_enabled = enabled

    def show_notice(self, message: str) -> None:
        click.echo(click.style(f"⚠ {message}", fg="yellow", bold=True), err=True)

    def render(self, display: WeatherDisplay) -> None:
        self.display = display

        click.echo()
        click.echo(click.style(f"📍 {display.location}", fg="bright_cyan", bold=True))
        click.echo(
            click.style(f"   {display.temperature}", fg="bright_white", bold=True)
            + click.style(f"  {display.description}", fg="bright_green")
        )
        click.echo(f"   Humidity: {display.humidity}")
        click.echo(f"   Wind:     {display.wind}")
        click.echo(f"   Pressure: {display.pressure}")
        click.echo()
