from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from lsm.domain.value_objects.environment import AirQuality, WeatherCondition
from lsm.interfaces.http.schemas.base import (
    CamelModel,
    RecordIn,
    RecordOut,
    UtcDatetime,
    partial_model,
)


class Coordinates(CamelModel):
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)


class Location(CamelModel):
    city: str = Field(..., min_length=1, max_length=255)
    coordinates: Coordinates | None = None


class EnvironmentalDataCreate(RecordIn):
    location: Location
    date: UtcDatetime
    temperature: float
    humidity: float = Field(..., ge=0, le=100)
    water_level: float | None = Field(default=None, ge=0, le=100)
    rainfall: float | None = Field(default=None, ge=0)
    wind_speed: float | None = Field(default=None, ge=0)
    weather_condition: WeatherCondition
    air_quality: AirQuality | None = None
    notes: str | None = None

    def to_columns(self, *, exclude_unset: bool = False) -> dict[str, Any]:
        """Location is nested on the wire and flat in the table."""
        values = self.model_dump(exclude_unset=exclude_unset)
        location = values.pop("location", None)
        if location is None:
            return values
        values["city"] = location["city"]
        coordinates = location.get("coordinates")
        if coordinates is not None:
            values.update(coordinates)
        elif "coordinates" in location:
            values.update(latitude=None, longitude=None)
        return values


EnvironmentalDataUpdate = partial_model(EnvironmentalDataCreate, "EnvironmentalDataUpdate")


class EnvironmentalDataResponse(RecordOut, EnvironmentalDataCreate):
    @model_validator(mode="before")
    @classmethod
    def _nest_location(cls, data: Any) -> Any:
        if isinstance(data, dict) and "location" not in data and "city" in data:
            data = dict(data)
            latitude = data.pop("latitude", None)
            longitude = data.pop("longitude", None)
            coordinates = None
            if latitude is not None or longitude is not None:
                coordinates = {"latitude": latitude, "longitude": longitude}
            data["location"] = {"city": data.pop("city"), "coordinates": coordinates}
        return data
