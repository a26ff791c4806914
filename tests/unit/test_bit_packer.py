"""Tests for tn_tracking.domain.bit_packer — pure packing functions."""

from src.tn_tracking.domain.bit_packer import pack_id, unpack_id
from src.tn_tracking.domain.models import BitLayout, DecodedId


class TestPackId:
    def test_default_layout_shifts(self) -> None:
        # 41/5/5/12: elapsed << 22 | dc << 17 | worker << 12 | seq
        assert pack_id(1, 0, 0, 0) == 1 << 22
        assert pack_id(0, 1, 0, 0) == 1 << 17
        assert pack_id(0, 0, 1, 0) == 1 << 12
        assert pack_id(0, 0, 0, 1) == 1

    def test_composite(self) -> None:
        assert pack_id(1000, 3, 7, 42) == (1000 << 22) | (3 << 17) | (7 << 12) | 42

    def test_deterministic(self) -> None:
        assert pack_id(123456, 1, 1, 9) == pack_id(123456, 1, 1, 9)

    def test_all_fields_max_fits_63_bits(self) -> None:
        layout = BitLayout()
        packed = pack_id(
            layout.max_timestamp,
            layout.max_datacenter_id,
            layout.max_worker_id,
            layout.max_sequence,
            layout,
        )
        assert packed == (1 << 63) - 1
        assert packed.bit_length() == 63

    def test_timestamp_dominates_ordering(self) -> None:
        # a later millisecond always sorts after any earlier-ms sequence value
        assert pack_id(101, 0, 0, 0) > pack_id(100, 31, 31, 4095)

    def test_custom_layout(self) -> None:
        layout = BitLayout(timestamp_bits=40, datacenter_id_bits=4, worker_id_bits=6, sequence_bits=10)
        assert pack_id(5, 2, 3, 4, layout) == (5 << 20) | (2 << 16) | (3 << 10) | 4


class TestUnpackId:
    def test_inverse_of_pack(self) -> None:
        epoch = 1_288_834_974_657
        packed = pack_id(987_654_321, 17, 29, 4000)
        assert unpack_id(packed, epoch) == DecodedId(
            timestamp_ms=epoch + 987_654_321,
            datacenter_id=17,
            worker_id=29,
            sequence=4000,
        )

    def test_custom_layout(self) -> None:
        layout = BitLayout(timestamp_bits=41, datacenter_id_bits=3, worker_id_bits=7, sequence_bits=12)
        decoded = unpack_id(pack_id(77, 7, 100, 1, layout), 0, layout)
        assert decoded == DecodedId(timestamp_ms=77, datacenter_id=7, worker_id=100, sequence=1)

    def test_bits_above_layout_ignored(self) -> None:
        layout = BitLayout(timestamp_bits=20, datacenter_id_bits=1, worker_id_bits=1, sequence_bits=1)
        decoded = unpack_id((1 << 63) - 1, 0, layout)
        assert decoded == DecodedId(timestamp_ms=(1 << 20) - 1, datacenter_id=1, worker_id=1, sequence=1)

    def test_high_garbage_does_not_change_fields(self) -> None:
        packed = pack_id(987_654_321, 17, 29, 4000)
        assert unpack_id(packed | (1 << 63), 0) == unpack_id(packed, 0)
