from nowcast.weather.views import (
    OpenWeatherApiResponse,
    OpenWeatherConditionResponse,
    WeatherCondition,
    WeatherDisplay,
    WeatherObservation,
)


def transform_api_response(api_response: OpenWeatherApiResponse) -> WeatherObservation:
    """Transform complete API response to domain model."""
    return WeatherObservation(
        location_name=api_response.name,
        temperature=api_response.main.temp,
        humidity=api_response.main.humidity,
        pressure=api_response.main.pressure,
        wind_speed=api_response.wind.speed,
        wind_direction=api_response.wind.deg,
        conditions=tuple(
            _transform_condition(condition) for condition in api_response.weather
        ),
        country=api_response.sys.country,
    )


def format_weather_display(observation: WeatherObservation) -> WeatherDisplay:
    """Format an observation into the strings shown on screen."""
    return WeatherDisplay(
        location=observation.location_name,
        temperature=f"{int(observation.temperature)}°C",
        description=_capitalize(observation.primary_condition.description),
        humidity=f"{observation.humidity}%",
        wind=f"{observation.wind_speed} m/s",
        pressure=f"{observation.pressure} hPa",
    )


def _transform_condition(api_condition: OpenWeatherConditionResponse) -> WeatherCondition:
    return WeatherCondition(
        code=api_condition.id,
        category=api_condition.main,
        description=api_condition.description,
        icon=api_condition.icon,
    )


def _capitalize(text: str) -> str:
    """Upper-case the first character only; str.capitalize would lower the rest."""
    return text[:1].upper() + text[1:]
