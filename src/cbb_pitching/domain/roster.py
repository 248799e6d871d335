from dataclasses import dataclass, field


@dataclass(frozen=True)
class RosterEntry:
    """A player row already scraped from a school's roster page."""

    name: str
    height: str | None = None
    weight: str | None = None
    year: str | None = None
    hometown: str | None = None
    bats_throws: str | None = None


@dataclass(frozen=True)
class BioUpdate:
    pitcher_id: str
    name: str
    fields: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ParticipationLink:
    participation_id: int | None
    game_id: str
    pitcher_name: str
    pitcher_id: str
