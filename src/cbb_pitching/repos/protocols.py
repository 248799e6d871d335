from typing import Protocol, runtime_checkable

from cbb_pitching.domain.game import Game, Participation
from cbb_pitching.domain.pitcher import Pitcher
from cbb_pitching.domain.team import Team


@runtime_checkable
class TeamRepo(Protocol):
    def upsert(self, team: Team) -> str: ...

    def get_by_id(self, team_id: str) -> Team | None: ...

    def get_by_conference(self, conference: str) -> list[Team]: ...

    def all(self) -> list[Team]: ...


@runtime_checkable
class PitcherRepo(Protocol):
    def upsert(self, pitcher: Pitcher) -> str: ...

    def get_by_id(self, pitcher_id: str) -> Pitcher | None: ...

    def get_by_team(self, team_id: str) -> list[Pitcher]: ...

    def all(self) -> list[Pitcher]: ...

    def update_fields(self, pitcher_id: str, fields: dict[str, str]) -> None: ...

    def delete(self, pitcher_id: str) -> None: ...


@runtime_checkable
class GameRepo(Protocol):
    def upsert(self, game: Game) -> str: ...

    def get_by_id(self, game_id: str) -> Game | None: ...

    def get_by_ids(self, game_ids: list[str]) -> list[Game]: ...

    def get_by_team(self, team_id: str, *, completed_only: bool = False) -> list[Game]: ...

    def all(self) -> list[Game]: ...


@runtime_checkable
class ParticipationRepo(Protocol):
    def upsert(self, participation: Participation) -> int: ...

    def get_by_pitcher(self, pitcher_id: str) -> list[Participation]: ...

    def get_by_team(self, team_id: str) -> list[Participation]: ...

    def get_unlinked(self) -> list[Participation]: ...

    def all(self) -> list[Participation]: ...

    def count_by_pitcher(self, pitcher_id: str) -> int: ...

    def repoint(self, from_pitcher_id: str, to_pitcher_id: str) -> int: ...

    def link(self, participation_id: int, pitcher_id: str) -> None: ...
