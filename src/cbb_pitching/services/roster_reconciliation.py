import logging
import sqlite3
from collections.abc import Sequence

from cbb_pitching.db.connection import transaction
from cbb_pitching.domain.roster import BioUpdate, ParticipationLink, RosterEntry
from cbb_pitching.identity.roster import link_participation, plan_bio_backfill
from cbb_pitching.repos.errors import LinkError
from cbb_pitching.repos.protocols import ParticipationRepo, PitcherRepo

logger = logging.getLogger(__name__)


class RosterReconciliationService:
    def __init__(
        self,
        pitcher_repo: PitcherRepo,
        participation_repo: ParticipationRepo,
        conn: sqlite3.Connection,
    ) -> None:
        self._pitcher_repo = pitcher_repo
        self._participation_repo = participation_repo
        self._conn = conn

    def backfill_bio(self, team_id: str, entries: Sequence[RosterEntry], *, dry_run: bool = False) -> list[BioUpdate]:
        pitchers = self._pitcher_repo.get_by_team(team_id)
        updates = plan_bio_backfill(pitchers, entries)
        logger.info("Team %s: %d of %d pitchers have bio data to add", team_id, len(updates), len(pitchers))
        if dry_run:
            return updates
        with transaction(self._conn):
            for update in updates:
                self._pitcher_repo.update_fields(update.pitcher_id, update.fields)
                logger.debug("Updated %s: %s", update.name, ", ".join(update.fields))
        return updates

    def link_unlinked_participation(self, *, dry_run: bool = False) -> list[ParticipationLink]:
        rows = self._participation_repo.get_unlinked()
        if not rows:
            return []
        links = link_participation(rows, self._pitcher_repo.all())
        logger.info("Matched %d of %d participation rows without a pitcher id", len(links), len(rows))
        if dry_run:
            return links
        applied: list[ParticipationLink] = []
        with transaction(self._conn):
            for link in links:
                if link.participation_id is None:
                    continue
                try:
                    self._participation_repo.link(link.participation_id, link.pitcher_id)
                except LinkError as exc:
                    # the game already holds a linked row for this pitcher and name
                    logger.warning("Skipping %s in game %s: %s", link.pitcher_name, link.game_id, exc)
                    continue
                applied.append(link)
        return applied
