import pytest

from cbb_pitching.stats.innings import format_innings, parse_count, parse_innings


class TestParseInnings:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("5.0", 5.0),
            ("5", 5.0),
            ("5.1", 5 + 1 / 3),
            ("5.2", 5 + 2 / 3),
            ("0.1", 1 / 3),
            (".2", 2 / 3),
            ("6.", 6.0),
        ],
    )
    def test_outs_notation(self, raw: str, expected: float) -> None:
        assert parse_innings(raw) == pytest.approx(expected)

    def test_point_two_is_not_decimal(self) -> None:
        assert parse_innings("5.2") != pytest.approx(5.2)

    @pytest.mark.parametrize(
        "raw",
        [None, "", "   ", "5.3", "5.9", "1.2.3", "abc", "-", "5.x", "-1.0", "²", "5.²", "³.1", "٥.1"],
    )
    def test_malformed_reads_as_zero(self, raw: str | None) -> None:
        assert parse_innings(raw) == 0.0

    def test_numeric_input(self) -> None:
        assert parse_innings(7) == 7.0
        assert parse_innings(4.1) == pytest.approx(4 + 1 / 3)

    def test_surrounding_whitespace(self) -> None:
        assert parse_innings(" 3.1 ") == pytest.approx(3 + 1 / 3)


class TestParseCount:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("3", 3), ("12", 12), ("0", 0), ("4abc", 4), (" 7", 7), ("", 0), ("-", 0), ("abc", 0), (None, 0)],
    )
    def test_values(self, raw: str | None, expected: int) -> None:
        assert parse_count(raw) == expected

    def test_int_passthrough(self) -> None:
        assert parse_count(5) == 5

    def test_negative_int_clamped(self) -> None:
        assert parse_count(-2) == 0


class TestFormatInnings:
    def test_whole(self) -> None:
        assert format_innings(6.0) == "6.0"

    def test_partial(self) -> None:
        assert format_innings(5 + 2 / 3) == "5.2"
        assert format_innings(1 / 3) == "0.1"

    def test_sum_of_thirds(self) -> None:
        assert format_innings(1 / 3 + 1 / 3 + 1 / 3) == "1.0"
