"""Two-phase merge of a duplicate group into its surviving record.

Phase one re-points every participation row owned by a losing record to the
survivor. Phase two deletes losers, but only those whose rows all moved: a
pitcher that still owns participation rows is never deleted. Failures are
collected per loser and returned, never raised, so a caller working through
many groups can carry on with the next one.
"""

import logging

from cbb_pitching.domain.duplicates import MergeFailure, MergePlan, MergeResult
from cbb_pitching.repos.errors import RepoError
from cbb_pitching.repos.protocols import ParticipationRepo, PitcherRepo

logger = logging.getLogger(__name__)

STAGE_REPOINT = "repoint"
STAGE_VERIFY = "verify"
STAGE_DELETE = "delete"


def apply_merge(
    plan: MergePlan,
    pitcher_repo: PitcherRepo,
    participation_repo: ParticipationRepo,
) -> MergeResult:
    keeper_id = plan.keep.pitcher_id
    failures: list[MergeFailure] = []
    repointed_rows = 0
    cleared = []

    for loser in plan.drop:
        try:
            moved = participation_repo.repoint(loser.pitcher_id, keeper_id)
        except RepoError as exc:
            logger.warning("Re-point %s -> %s failed: %s", loser.pitcher_id, keeper_id, exc)
            failures.append(MergeFailure(loser.pitcher_id, loser.name, STAGE_REPOINT, str(exc)))
            continue
        logger.debug("Re-pointed %d rows from %s to %s", moved, loser.pitcher_id, keeper_id)
        repointed_rows += moved
        cleared.append(loser)

    deleted: list[str] = []
    for loser in cleared:
        remaining = participation_repo.count_by_pitcher(loser.pitcher_id)
        if remaining:
            message = f"{remaining} participation rows still reference this pitcher"
            logger.warning("Not deleting %s: %s", loser.pitcher_id, message)
            failures.append(MergeFailure(loser.pitcher_id, loser.name, STAGE_VERIFY, message))
            continue
        try:
            pitcher_repo.delete(loser.pitcher_id)
        except RepoError as exc:
            logger.warning("Delete of %s failed: %s", loser.pitcher_id, exc)
            failures.append(MergeFailure(loser.pitcher_id, loser.name, STAGE_DELETE, str(exc)))
            continue
        deleted.append(loser.pitcher_id)

    logger.info(
        "Merged %s into %s: %d rows moved, %d deleted, %d failed",
        plan.group_key,
        keeper_id,
        repointed_rows,
        len(deleted),
        len(failures),
    )
    return MergeResult(
        plan=plan,
        repointed_rows=repointed_rows,
        deleted=tuple(deleted),
        failures=tuple(failures),
    )
