from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# API Response Models (OpenWeatherMap current weather mappings)
# =============================================================================


class OpenWeatherMainResponse(BaseModel):
    """Direct mapping to the `main` block."""

    model_config = ConfigDict(allow_inf_nan=False)

    temp: float
    humidity: int
    pressure: int


class OpenWeatherConditionResponse(BaseModel):
    """One entry of the `weather` array."""

    id: int
    main: str
    description: str
    icon: str


class OpenWeatherWindResponse(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    speed: float
    deg: Optional[int] = None


class OpenWeatherSysResponse(BaseModel):
    country: str


class OpenWeatherApiResponse(BaseModel):
    """Complete OpenWeatherMap current weather response structure."""

    name: str
    main: OpenWeatherMainResponse
    weather: list[OpenWeatherConditionResponse] = Field(min_length=1)
    wind: OpenWeatherWindResponse
    sys: OpenWeatherSysResponse


# =============================================================================
# Domain Models
# =============================================================================


class WeatherCondition(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: int
    category: str
    description: str
    icon: str


class WeatherObservation(BaseModel):
    """Current conditions for one location, in metric units."""

    model_config = ConfigDict(frozen=True)

    location_name: str
    temperature: float
    humidity: int
    pressure: int
    wind_speed: float
    wind_direction: Optional[int] = None
    conditions: tuple[WeatherCondition, ...] = Field(min_length=1)
    country: str

    @property
    def primary_condition(self) -> WeatherCondition:
        return self.conditions[0]


class WeatherDisplay(BaseModel):
    """The six strings bound to the screen."""

    model_config = ConfigDict(frozen=True)

    location: str
    temperature: str
    description: str
    humidity: str
    wind: str
    pressure: str
