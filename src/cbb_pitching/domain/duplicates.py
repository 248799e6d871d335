from dataclasses import dataclass

from cbb_pitching.domain.errors import MergeError
from cbb_pitching.domain.pitcher import Pitcher


@dataclass(frozen=True)
class DuplicateGroup:
    key: str
    normalized_name: str
    team_id: str
    pitchers: tuple[Pitcher, ...]


@dataclass(frozen=True)
class MergePlan:
    group_key: str
    keep: Pitcher
    drop: tuple[Pitcher, ...]
    keep_score: int = 0
    drop_scores: tuple[int, ...] = ()

    @property
    def drop_ids(self) -> tuple[str, ...]:
        return tuple(p.pitcher_id for p in self.drop)


@dataclass(frozen=True)
class DuplicateAnalysis:
    groups: tuple[DuplicateGroup, ...] = ()
    merge_plans: tuple[MergePlan, ...] = ()

    @property
    def records_to_remove(self) -> int:
        return sum(len(plan.drop) for plan in self.merge_plans)


@dataclass(frozen=True)
class MergeFailure:
    pitcher_id: str
    name: str
    stage: str
    message: str


@dataclass(frozen=True)
class MergeResult:
    plan: MergePlan
    repointed_rows: int = 0
    deleted: tuple[str, ...] = ()
    failures: tuple[MergeFailure, ...] = ()

    @property
    def success(self) -> bool:
        return not self.failures

    @property
    def reason(self) -> str | None:
        if not self.failures:
            return None
        return "; ".join(f"{f.pitcher_id} ({f.stage}): {f.message}" for f in self.failures)


@dataclass(frozen=True)
class CleanupReport:
    dry_run: bool
    total_groups: int
    total_records: int
    merged: tuple[MergeResult, ...] = ()
    errors: tuple[MergeError, ...] = ()

    @property
    def deleted(self) -> int:
        return sum(len(r.deleted) for r in self.merged) + sum(len(e.deleted) for e in self.errors)
