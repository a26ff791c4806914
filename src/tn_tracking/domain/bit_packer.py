"""Snowflake bit packing — pure functions, no hidden state.

Field values are trusted to fit their widths: ids are range-checked by
GeneratorConfig and the sequence wraps with a mask before it gets here.
"""

from src.tn_tracking.domain.models import DEFAULT_LAYOUT, BitLayout, DecodedId


def pack_id(
    elapsed_ms: int,
    datacenter_id: int,
    worker_id: int,
    sequence: int,
    layout: BitLayout = DEFAULT_LAYOUT,
) -> int:
    """Compose the 64-bit id: elapsed | datacenter | worker | sequence."""
    return (
        (elapsed_ms << layout.timestamp_shift)
        | (datacenter_id << layout.datacenter_id_shift)
        | (worker_id << layout.worker_id_shift)
        | sequence
    )


def unpack_id(packed_id: int, epoch_ms: int, layout: BitLayout = DEFAULT_LAYOUT) -> DecodedId:
    """Split a packed id back into its fields. Inverse of pack_id.

    Bits above layout.total_bits are ignored.
    """
    return DecodedId(
        timestamp_ms=((packed_id >> layout.timestamp_shift) & layout.max_timestamp) + epoch_ms,
        datacenter_id=(packed_id >> layout.datacenter_id_shift) & layout.max_datacenter_id,
        worker_id=(packed_id >> layout.worker_id_shift) & layout.max_worker_id,
        sequence=packed_id & layout.max_sequence,
    )
