from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    """A single location fix. Not stored beyond the update that produced it."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class IpLocation(BaseModel):
    """Subset of the ipapi.co response."""

    latitude: float
    longitude: float
    city: str | None = None
    region: str | None = None
    country_name: str | None = None

    def to_position(self) -> Position:
        return Position(latitude=self.latitude, longitude=self.longitude)
