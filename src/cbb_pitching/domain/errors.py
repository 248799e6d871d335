from dataclasses import dataclass


@dataclass(frozen=True)
class CbbError:
    message: str


@dataclass(frozen=True)
class MergeError(CbbError):
    group_key: str
    pitcher_ids: tuple[str, ...] = ()
    deleted: tuple[str, ...] = ()


@dataclass(frozen=True)
class NotFoundError(CbbError):
    entity: str
    key: str
