"""Tracking domain models — pure dataclasses, validated on construction."""
from dataclasses import dataclass, field

from src.tn_common.errors import InvalidConfigurationError

# Widths above 63 bits would push the packed id past a signed 64-bit value.
MAX_TOTAL_BITS = 63
NEVER_GENERATED = -1


def _check_range(name: str, value: int, low: int, high: int) -> None:
    """Raise InvalidConfigurationError if value is not in [low, high]."""
    if not (low <= value <= high):
        raise InvalidConfigurationError(name, value, f"between {low} and {high}")


@dataclass(frozen=True)
class BitLayout:
    """Field widths of a packed id, most-significant first.

    Default layout (63 bits used, sign bit always 0):
      - 41 bits: milliseconds since the custom epoch (~69 years)
      -  5 bits: datacenter_id (0-31)
      -  5 bits: worker_id (0-31)
      - 12 bits: sequence (0-4095 per millisecond)
    """

    timestamp_bits: int = 41
    datacenter_id_bits: int = 5
    worker_id_bits: int = 5
    sequence_bits: int = 12

    def __post_init__(self) -> None:
        _check_range("timestamp_bits", self.timestamp_bits, 1, MAX_TOTAL_BITS)
        _check_range("datacenter_id_bits", self.datacenter_id_bits, 1, MAX_TOTAL_BITS)
        _check_range("worker_id_bits", self.worker_id_bits, 1, MAX_TOTAL_BITS)
        _check_range("sequence_bits", self.sequence_bits, 1, MAX_TOTAL_BITS)
        _check_range("total_bits", self.total_bits, 4, MAX_TOTAL_BITS)

    @property
    def total_bits(self) -> int:
        return (
            self.timestamp_bits
            + self.datacenter_id_bits
            + self.worker_id_bits
            + self.sequence_bits
        )

    @property
    def max_timestamp(self) -> int:
        return (1 << self.timestamp_bits) - 1

    @property
    def max_datacenter_id(self) -> int:
        return (1 << self.datacenter_id_bits) - 1

    @property
    def max_worker_id(self) -> int:
        return (1 << self.worker_id_bits) - 1

    @property
    def max_sequence(self) -> int:
        return (1 << self.sequence_bits) - 1

    @property
    def worker_id_shift(self) -> int:
        return self.sequence_bits

    @property
    def datacenter_id_shift(self) -> int:
        return self.sequence_bits + self.worker_id_bits

    @property
    def timestamp_shift(self) -> int:
        return self.sequence_bits + self.worker_id_bits + self.datacenter_id_bits


DEFAULT_LAYOUT = BitLayout()


@dataclass(frozen=True)
class GeneratorConfig:
    datacenter_id: int
    worker_id: int
    layout: BitLayout = field(default=DEFAULT_LAYOUT)

    def __post_init__(self) -> None:
        _check_range("datacenter_id", self.datacenter_id, 0, self.layout.max_datacenter_id)
        _check_range("worker_id", self.worker_id, 0, self.layout.max_worker_id)


@dataclass(frozen=True)
class GeneratorState:
    """Snapshot of the generator's mutable fields; the live values stay behind its lock."""

    last_timestamp: int = NEVER_GENERATED
    sequence: int = 0

    @property
    def has_generated(self) -> bool:
        return self.last_timestamp != NEVER_GENERATED


@dataclass(frozen=True)
class DecodedId:
    timestamp_ms: int  # absolute, epoch already added back
    datacenter_id: int
    worker_id: int
    sequence: int
