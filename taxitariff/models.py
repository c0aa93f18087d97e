"""Value objects passed in and out of the engine."""

from pydantic import BaseModel, ConfigDict, Field


class BaseTariff14(BaseModel):
    """Rates for the 1-4 seat group in the daytime period (NOK)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    start: float = 97.0
    km0_10: float = 11.14
    km_over_10: float = Field(default=21.23, alias="kmOver10")
    min: float = 8.42


class Rate(BaseModel):
    """A fully scaled rate for one vehicle group and tariff period."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    start: float
    km0_10: float
    km_over_10: float = Field(alias="kmOver10")
    min: float


class Segment(BaseModel):
    """Contiguous trip minutes billed under the same tariff period."""

    model_config = ConfigDict(frozen=True)

    type: str
    minutes: int = Field(ge=0)
    km: float
    price: int


class FareResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int
    segments: tuple[Segment, ...] = ()
