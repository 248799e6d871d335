from dataclasses import dataclass

TRACKED_FIELDS = ("headshot", "position", "year", "height", "weight", "hometown", "bats_throws")


@dataclass(frozen=True)
class TeamCompleteness:
    team_id: str
    team_name: str
    conference: str | None
    total_pitchers: int
    present: dict[str, int]

    def missing(self, field_name: str) -> int:
        return self.total_pitchers - self.present.get(field_name, 0)

    @property
    def total_missing(self) -> int:
        return sum(self.missing(f) for f in TRACKED_FIELDS)

    @property
    def completeness_pct(self) -> float:
        possible = self.total_pitchers * len(TRACKED_FIELDS)
        if possible == 0:
            return 0.0
        return sum(self.present.get(f, 0) for f in TRACKED_FIELDS) / possible * 100
