"""
Result of a single collection cycle.

Each fetch owns one slot. A slot left as None means the fetch failed;
the emission boundary collapses it to a zero-valued record.
"""

from dataclasses import dataclass, field

from ..device.models import DeviceConfiguration, Readings


@dataclass
class CycleResult:
    """Readings and configuration gathered in one cycle."""

    readings: Readings | None = None
    configuration: DeviceConfiguration | None = None

    # Resource name -> error message for failed fetches
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def complete(self) -> bool:
        """Both fetches succeeded."""
        return self.readings is not None and self.configuration is not None

    def set_error(self, resource: str, error: BaseException) -> None:
        """Record a failed fetch."""
        self.errors[resource] = str(error) or type(error).__name__

    def readings_or_default(self) -> Readings:
        return self.readings if self.readings is not None else Readings()

    def configuration_or_default(self) -> DeviceConfiguration:
        return self.configuration if self.configuration is not None else DeviceConfiguration()

    def __repr__(self) -> str:
        status = "OK" if self.complete else f"ERRORS: {', '.join(sorted(self.errors))}"
        return f"CycleResult({status})"
