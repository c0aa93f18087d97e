"""Engine exceptions."""


class TariffError(ValueError):
    """Base exception for the tariff engine."""


class InvalidTripError(TariffError):
    """Raised when trip distance or duration fails validation."""


class UnknownTariffError(TariffError):
    """Raised when a vehicle group or tariff period has no rate."""
