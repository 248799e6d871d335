import pytest

from cbb_pitching.stats.rates import (
    K_BB_SENTINEL,
    bb_per_9,
    era,
    format_k_bb,
    format_rate,
    k_bb_ratio,
    k_per_9,
    whip,
)


class TestRates:
    def test_era(self) -> None:
        assert era(3, 9.0) == pytest.approx(3.0)
        assert era(2, 6 + 1 / 3) == pytest.approx(2 * 9 / (19 / 3))

    def test_whip(self) -> None:
        assert whip(2, 7, 6.0) == pytest.approx(1.5)

    def test_per_nine(self) -> None:
        assert k_per_9(10, 9.0) == pytest.approx(10.0)
        assert bb_per_9(3, 4.5) == pytest.approx(6.0)

    @pytest.mark.parametrize("ip", [0.0, 0.2, 0.3])
    def test_below_one_out_reads_zero(self, ip: float) -> None:
        assert era(4, ip) == 0.0
        assert whip(1, 3, ip) == 0.0
        assert k_per_9(2, ip) == 0.0
        assert bb_per_9(2, ip) == 0.0

    def test_exactly_one_out_counts(self) -> None:
        assert era(1, 1 / 3) == pytest.approx(27.0)


class TestKbbRatio:
    def test_ratio(self) -> None:
        assert k_bb_ratio(9, 3) == pytest.approx(3.0)

    def test_no_walks_with_strikeouts_is_sentinel(self) -> None:
        assert k_bb_ratio(5, 0) == K_BB_SENTINEL

    def test_no_walks_no_strikeouts_is_zero(self) -> None:
        assert k_bb_ratio(0, 0) == 0.0


class TestFormatRate:
    def test_decimals(self) -> None:
        assert format_rate(2.456) == "2.46"
        assert format_rate(9.04, 1) == "9.0"

    def test_large_era_is_printed(self) -> None:
        assert format_rate(1080.0) == "1080.00"


class TestFormatKBB:
    def test_sentinel(self) -> None:
        assert format_k_bb(K_BB_SENTINEL) == "∞"

    def test_ratio(self) -> None:
        assert format_k_bb(3.5) == "3.50"


class TestZeroInnings:
    def test_guard_fires_at_exactly_zero(self) -> None:
        assert era(0, 0) == 0.0
        assert whip(0, 0, 0) == 0.0
