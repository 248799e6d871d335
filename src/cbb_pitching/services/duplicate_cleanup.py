import logging
import sqlite3

from cbb_pitching.db.connection import transaction
from cbb_pitching.domain.duplicates import CleanupReport, DuplicateAnalysis, MergePlan, MergeResult
from cbb_pitching.domain.errors import MergeError
from cbb_pitching.domain.result import Err, Ok, Result, partition
from cbb_pitching.identity.merge import apply_merge
from cbb_pitching.identity.resolver import resolve_duplicates
from cbb_pitching.repos.protocols import ParticipationRepo, PitcherRepo

logger = logging.getLogger(__name__)


class DuplicateCleanupService:
    def __init__(
        self,
        pitcher_repo: PitcherRepo,
        participation_repo: ParticipationRepo,
        conn: sqlite3.Connection,
    ) -> None:
        self._pitcher_repo = pitcher_repo
        self._participation_repo = participation_repo
        self._conn = conn

    def analyze(self) -> DuplicateAnalysis:
        pitchers = self._pitcher_repo.all()
        analysis = resolve_duplicates(pitchers)
        logger.info(
            "Scanned %d pitchers: %d duplicate groups, %d records to remove",
            len(pitchers),
            len(analysis.groups),
            analysis.records_to_remove,
        )
        return analysis

    def apply(self, plan: MergePlan) -> Result[MergeResult, MergeError]:
        """Merge one group and commit what succeeded.

        Partial failures are committed too: moved rows stay moved and the
        losers that could not be cleared remain in place.
        """
        with transaction(self._conn):
            result = apply_merge(plan, self._pitcher_repo, self._participation_repo)
        if result.success:
            return Ok(result)
        return Err(
            MergeError(
                message=result.reason or "merge failed",
                group_key=plan.group_key,
                pitcher_ids=tuple(f.pitcher_id for f in result.failures),
                deleted=result.deleted,
            )
        )

    def run(self, *, dry_run: bool = True, analysis: DuplicateAnalysis | None = None) -> CleanupReport:
        if analysis is None:
            analysis = self.analyze()
        total_records = sum(len(g.pitchers) for g in analysis.groups)
        if dry_run:
            return CleanupReport(dry_run=True, total_groups=len(analysis.groups), total_records=total_records)

        merged, errors = partition(self.apply(plan) for plan in analysis.merge_plans)
        report = CleanupReport(
            dry_run=False,
            total_groups=len(analysis.groups),
            total_records=total_records,
            merged=tuple(merged),
            errors=tuple(errors),
        )
        logger.info("Cleanup deleted %d records; %d groups failed", report.deleted, len(report.errors))
        return report
