from abc import ABC, abstractmethod

from nowcast.weather.views import WeatherDisplay


class WeatherView(ABC):
    """The on-screen surface the refresh pipeline writes to."""

    @abstractmethod
    def set_busy(self, busy: bool) -> None:
        """Show or hide the busy indicator"""
        ...

    @abstractmethod
    def set_refresh_enabled(self, enabled: bool) -> None:
        """Enable or disable the refresh control"""
        ...

    @abstractmethod
    def show_notice(self, message: str) -> None:
        """Show a short, non-blocking notice"""
        ...

    @abstractmethod
    def render(self, display: WeatherDisplay) -> None:
        """Replace all six text fields at once"""
        ...
