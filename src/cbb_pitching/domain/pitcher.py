from dataclasses import dataclass

BIO_FIELDS = ("height", "weight", "year", "hometown", "high_school")


@dataclass(frozen=True)
class Pitcher:
    pitcher_id: str
    team_id: str
    name: str
    display_name: str | None = None
    number: str | None = None
    position: str | None = None
    year: str | None = None
    height: str | None = None
    weight: str | None = None
    hometown: str | None = None
    high_school: str | None = None
    bats_throws: str | None = None
    headshot: str | None = None
    espn_link: str | None = None
    ip: float | None = None
    era: float | None = None

    @property
    def label(self) -> str:
        return self.display_name or self.name
