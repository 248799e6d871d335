import pytest

from cbb_pitching.domain.game import Participation
from cbb_pitching.stats.game_stats import opponent_of, to_game_stats
from tests.helpers import make_game


def _row(stats: dict[str, str], team_id: str = "t1") -> Participation:
    return Participation(game_id="g1", team_id=team_id, pitcher_name="John Doe", pitcher_id="p1", stats=stats)


class TestOpponentOf:
    def test_home_team_faces_away(self) -> None:
        game = make_game(home_team_id="t1", away_team_id="t2", away_name="Rival State")
        assert opponent_of("t1", game) == ("t2", "Rival State")

    def test_away_team_faces_home(self) -> None:
        game = make_game(home_team_id="t1", away_team_id="t2", home_name="Test Tech")
        assert opponent_of("t2", game) == ("t1", "Test Tech")


class TestToGameStats:
    def test_parses_full_line(self) -> None:
        game = make_game(date="2025-03-07")
        stats = to_game_stats(
            _row({"IP": "5.2", "H": "4", "R": "2", "ER": "2", "BB": "1", "K": "7", "HR": "1", "PC": "88"}),
            game,
        )

        assert stats.innings_pitched == pytest.approx(17 / 3)
        assert stats.hits == 4
        assert stats.runs == 2
        assert stats.earned_runs == 2
        assert stats.walks == 1
        assert stats.strikeouts == 7
        assert stats.home_runs == 1
        assert stats.pitch_count == 88
        assert stats.date == "2025-03-07"
        assert stats.opponent_id == "t2"
        assert stats.era == pytest.approx(2 * 9 / (17 / 3))
        assert stats.k_bb_ratio == pytest.approx(7.0)

    def test_missing_and_junk_fields_are_zero(self) -> None:
        stats = to_game_stats(_row({"IP": "garbage", "K": "-", "BB": ""}), make_game())
        assert stats.innings_pitched == 0.0
        assert stats.strikeouts == 0
        assert stats.walks == 0
        assert stats.hits == 0
        assert stats.era == 0.0

    def test_empty_stats(self) -> None:
        stats = to_game_stats(_row({}), make_game())
        assert stats.innings_pitched == 0.0
        assert stats.pitcher_id == "p1"
