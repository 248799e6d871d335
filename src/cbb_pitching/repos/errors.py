from cbb_pitching.exceptions import CbbException


class RepoError(CbbException):
    """A store write on the merge or reconciliation path failed."""


class RepointError(RepoError):
    def __init__(self, from_pitcher_id: str, to_pitcher_id: str, cause: Exception | None = None) -> None:
        self.from_pitcher_id = from_pitcher_id
        self.to_pitcher_id = to_pitcher_id
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Could not re-point participation from {from_pitcher_id} to {to_pitcher_id}{detail}")


class PitcherDeleteError(RepoError):
    def __init__(self, pitcher_id: str, cause: Exception | None = None) -> None:
        self.pitcher_id = pitcher_id
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Could not delete pitcher {pitcher_id}{detail}")


class UnknownFieldError(RepoError):
    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Unknown pitcher field '{field_name}'")


class LinkError(RepoError):
    def __init__(self, participation_id: int, pitcher_id: str, cause: Exception | None = None) -> None:
        self.participation_id = participation_id
        self.pitcher_id = pitcher_id
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Could not link participation row {participation_id} to {pitcher_id}{detail}")
