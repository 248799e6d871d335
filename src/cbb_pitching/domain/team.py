from dataclasses import dataclass


@dataclass(frozen=True)
class Team:
    team_id: str
    name: str
    display_name: str | None = None
    conference: str | None = None
    logo: str | None = None

    @property
    def label(self) -> str:
        return self.display_name or self.name
