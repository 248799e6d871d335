from cbb_pitching.services.completeness import CompletenessAuditService, audit_completeness
from cbb_pitching.services.duplicate_cleanup import DuplicateCleanupService
from cbb_pitching.services.roster_reconciliation import RosterReconciliationService
from cbb_pitching.services.season_stats import SeasonStatsService
from cbb_pitching.services.standings import StandingsService

__all__ = [
    "CompletenessAuditService",
    "DuplicateCleanupService",
    "RosterReconciliationService",
    "SeasonStatsService",
    "StandingsService",
    "audit_completeness",
]
