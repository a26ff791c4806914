"""Snowflake-style tracking number generator.

Each call packs (timestamp, datacenter_id, worker_id, sequence) into a
monotonically increasing 64-bit id under a per-instance lock, then formats it
outside the lock as {country}-{address}-{6 digits}-{5 random chars}.
"""

import logging
import random
import threading
import time
from collections.abc import Callable, Mapping

from config.settings import settings
from src.tn_common.datetime_utils import current_millis
from src.tn_common.errors import ClockRegressionError
from src.tn_tracking.domain.bit_packer import pack_id, unpack_id
from src.tn_tracking.domain.formatter import (
    DEFAULT_COUNTRY_CODES,
    format_tracking_number,
    lookup_country_code,
    random_suffix,
    validate_country_codes,
)
from src.tn_tracking.domain.models import (
    DEFAULT_LAYOUT,
    NEVER_GENERATED,
    BitLayout,
    DecodedId,
    GeneratorConfig,
    GeneratorState,
)

logger = logging.getLogger(__name__)

DEFAULT_EPOCH_MS = 1_288_834_974_657

Clock = Callable[[], int]


class TrackingNumberGenerator:
    """Thread-safe tracking number generator.

    Uniqueness holds per instance; callers running several instances must give
    each one a distinct (datacenter_id, worker_id) pair.
    """

    def __init__(
        self,
        datacenter_id: int,
        worker_id: int,
        *,
        layout: BitLayout = DEFAULT_LAYOUT,
        epoch_ms: int = DEFAULT_EPOCH_MS,
        clock: Clock = current_millis,
        rng: random.Random | None = None,
        country_codes: Mapping[str, str] | None = None,
    ) -> None:
        self._config = GeneratorConfig(datacenter_id=datacenter_id, worker_id=worker_id, layout=layout)
        self._epoch_ms = epoch_ms
        self._clock = clock
        self._rng = rng if rng is not None else random.Random()
        self._country_codes = validate_country_codes(
            country_codes if country_codes is not None else DEFAULT_COUNTRY_CODES
        )

        self._sequence = 0
        self._last_timestamp_ms = NEVER_GENERATED
        self._lock = threading.Lock()

        logger.info(
            "Tracking generator ready: datacenter_id=%d worker_id=%d layout=%d/%d/%d/%d",
            datacenter_id,
            worker_id,
            layout.timestamp_bits,
            layout.datacenter_id_bits,
            layout.worker_id_bits,
            layout.sequence_bits,
        )

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def state(self) -> GeneratorState:
        with self._lock:
            return GeneratorState(last_timestamp=self._last_timestamp_ms, sequence=self._sequence)

    def next_id(self) -> int:
        """Advance the sequence and return the packed 64-bit id.

        Raises ClockRegressionError (leaving state untouched) when the clock
        reads earlier than the last generated timestamp.
        """
        layout = self._config.layout
        with self._lock:
            ts = self._clock()
            if ts < self._last_timestamp_ms:
                logger.error(
                    "Clock moved backwards by %dms (now=%d last=%d)",
                    self._last_timestamp_ms - ts,
                    ts,
                    self._last_timestamp_ms,
                )
                raise ClockRegressionError(ts, self._last_timestamp_ms)

            if ts == self._last_timestamp_ms:
                self._sequence = (self._sequence + 1) & layout.max_sequence
                if self._sequence == 0:
                    logger.debug("Sequence exhausted at ts=%d, waiting for next ms", ts)
                    ts = self._wait_next_ms(ts)
            else:
                self._sequence = 0

            self._last_timestamp_ms = ts
            return pack_id(
                ts - self._epoch_ms,
                self._config.datacenter_id,
                self._config.worker_id,
                self._sequence,
                layout,
            )

    def generate(self, country: str, local_address: str) -> str:
        """Return a tracking number such as 'US-NYC-123456-AB12C'."""
        packed = self.next_id()
        country_code = lookup_country_code(self._country_codes, country)
        suffix = random_suffix(self._rng)
        return format_tracking_number(packed, country_code, local_address, suffix)

    def decode(self, packed_id: int) -> DecodedId:
        return unpack_id(packed_id, self._epoch_ms, self._config.layout)

    def _wait_next_ms(self, last_ts: int) -> int:
        # Spins while holding the lock; sleep(0) yields the GIL between reads.
        ts = self._clock()
        while ts <= last_ts:
            time.sleep(0)
            ts = self._clock()
        return ts

    def _set_last_timestamp_for_testing(self, last_timestamp_ms: int) -> None:
        with self._lock:
            self._last_timestamp_ms = last_timestamp_ms


def build_generator_from_settings() -> TrackingNumberGenerator:
    layout = BitLayout(
        timestamp_bits=settings.TIMESTAMP_BITS,
        datacenter_id_bits=settings.DATACENTER_ID_BITS,
        worker_id_bits=settings.WORKER_ID_BITS,
        sequence_bits=settings.SEQUENCE_BITS,
    )
    return TrackingNumberGenerator(
        settings.DATACENTER_ID,
        settings.WORKER_ID,
        layout=layout,
        epoch_ms=settings.EPOCH_MS,
        country_codes=settings.COUNTRY_CODES,
    )


_default_generator: TrackingNumberGenerator | None = None
_default_lock = threading.Lock()


def get_default_generator() -> TrackingNumberGenerator:
    """Lazily build the process-wide generator from settings."""
    global _default_generator
    with _default_lock:
        if _default_generator is None:
            _default_generator = build_generator_from_settings()
        return _default_generator


def generate_tracking_number(country: str, local_address: str) -> str:
    """Generate a tracking number using the module-level default generator."""
    return get_default_generator().generate(country, local_address)
