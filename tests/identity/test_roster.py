import pytest

from cbb_pitching.domain.game import Participation
from cbb_pitching.domain.roster import RosterEntry
from cbb_pitching.identity.roster import (
    link_participation,
    match_roster_entry,
    normalize_class_year,
    parse_height,
    parse_weight,
    plan_bio_backfill,
)
from tests.helpers import make_pitcher


class TestParseHeight:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("6-2", "6-2"), ("6'2\"", "6-2"), ("6' 2\"", "6-2"), ("5 11", "5-11"), ("tall", "tall"), ("", None), (None, None)],
    )
    def test_values(self, raw: str | None, expected: str | None) -> None:
        assert parse_height(raw) == expected


class TestParseWeight:
    @pytest.mark.parametrize(("raw", "expected"), [("205", "205"), ("205 lbs", "205"), ("lbs", None), (None, None)])
    def test_values(self, raw: str | None, expected: str | None) -> None:
        assert parse_weight(raw) == expected


class TestNormalizeClassYear:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Fr.", "Fr."),
            ("Freshman", "Fr."),
            ("R-Fr.", "R-Fr."),
            ("Redshirt Freshman", "R-Fr."),
            ("So.", "So."),
            ("R-So.", "R-So."),
            ("Junior", "Jr."),
            ("R-Jr.", "R-Jr."),
            ("Sr.", "Sr."),
            ("Redshirt Senior", "R-Sr."),
            ("Gr.", "Gr."),
            ("Graduate", "Gr."),
            ("5th", "5th"),
            (None, None),
        ],
    )
    def test_values(self, raw: str | None, expected: str | None) -> None:
        assert normalize_class_year(raw) == expected


class TestMatchRosterEntry:
    def test_exact_beats_loose(self) -> None:
        entries = [RosterEntry(name="Jake Smith Jr"), RosterEntry(name="Jake Smith")]
        match = match_roster_entry(make_pitcher(name="Jake Smith - P"), entries)
        assert match is not None and match.name == "Jake Smith"

    def test_unique_loose_match(self) -> None:
        entries = [RosterEntry(name="Jake Smith Jr."), RosterEntry(name="Tom Jones")]
        match = match_roster_entry(make_pitcher(name="Jake Smith"), entries)
        assert match is not None and match.name == "Jake Smith Jr."

    def test_ambiguous_loose_match(self) -> None:
        entries = [RosterEntry(name="Jake Smith Jr."), RosterEntry(name="Jake Smith III")]
        assert match_roster_entry(make_pitcher(name="Jake Smith"), entries) is None


class TestPlanBioBackfill:
    def test_fills_only_empty_fields(self) -> None:
        pitcher = make_pitcher("p1", name="Jake Smith", height="6-4")
        entry = RosterEntry(name="Jake Smith", height="6'1\"", weight="195 lbs", year="R-So.", hometown=" Tulsa, OK ")

        updates = plan_bio_backfill([pitcher], [entry])

        assert len(updates) == 1
        assert updates[0].fields == {"weight": "195", "year": "R-So.", "hometown": "Tulsa, OK"}

    def test_nothing_to_add(self) -> None:
        pitcher = make_pitcher(name="Jake Smith", weight="200")
        assert plan_bio_backfill([pitcher], [RosterEntry(name="Jake Smith", weight="190")]) == []

    def test_unmatched_pitcher_skipped(self) -> None:
        assert plan_bio_backfill([make_pitcher(name="Nobody Here")], [RosterEntry(name="Jake Smith", weight="1")]) == []


class TestLinkParticipation:
    def test_links_unique_same_team_match(self) -> None:
        rows = [
            Participation(game_id="g1", team_id="t1", pitcher_name="John Doe - P", id=1),
            Participation(game_id="g1", team_id="t1", pitcher_name="Already Linked", pitcher_id="p9", id=2),
        ]
        pitchers = [make_pitcher("p1", "t1", "John Doe"), make_pitcher("p2", "t2", "John Doe")]

        links = link_participation(rows, pitchers)

        assert len(links) == 1
        assert links[0].participation_id == 1
        assert links[0].pitcher_id == "p1"

    def test_ambiguous_not_linked(self) -> None:
        rows = [Participation(game_id="g1", team_id="t1", pitcher_name="Smith", id=1)]
        pitchers = [make_pitcher("p1", "t1", "John Smith"), make_pitcher("p2", "t1", "Jim Smith")]
        assert link_participation(rows, pitchers) == []

    def test_other_team_not_linked(self) -> None:
        rows = [Participation(game_id="g1", team_id="t3", pitcher_name="John Doe", id=1)]
        assert link_participation(rows, [make_pitcher("p1", "t1", "John Doe")]) == []
