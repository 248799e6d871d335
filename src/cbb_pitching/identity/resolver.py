"""Duplicate pitcher detection and survivor selection.

Two records are duplicates when they share a name key and a team. Records
are never grouped across teams. Within a group the record with the most
complete data survives; on a tie the earliest record in input order wins.
"""

import logging
from collections.abc import Iterable

from cbb_pitching.domain.duplicates import DuplicateAnalysis, DuplicateGroup, MergePlan
from cbb_pitching.domain.pitcher import BIO_FIELDS, Pitcher
from cbb_pitching.identity.name_key import has_position_artifact, normalize_name

logger = logging.getLogger(__name__)

HEADSHOT_WEIGHT = 100
POSITION_WEIGHT = 50
BIO_FIELD_WEIGHT = 10
STAT_WEIGHT = 5
CLEAN_NAME_WEIGHT = 20


def group_key(pitcher: Pitcher) -> str:
    return f"{normalize_name(pitcher.name)}|{pitcher.team_id}"


def score_pitcher(pitcher: Pitcher) -> int:
    score = 0
    if pitcher.headshot:
        score += HEADSHOT_WEIGHT
    if pitcher.position:
        score += POSITION_WEIGHT
    score += BIO_FIELD_WEIGHT * sum(1 for f in BIO_FIELDS if getattr(pitcher, f))
    if pitcher.ip is not None:
        score += STAT_WEIGHT
    if pitcher.era is not None:
        score += STAT_WEIGHT
    if not has_position_artifact(pitcher.name):
        score += CLEAN_NAME_WEIGHT
    if not has_position_artifact(pitcher.display_name):
        score += CLEAN_NAME_WEIGHT
    return score


def find_duplicate_groups(pitchers: Iterable[Pitcher]) -> list[DuplicateGroup]:
    buckets: dict[str, list[Pitcher]] = {}
    for pitcher in pitchers:
        name_key = normalize_name(pitcher.name)
        if not name_key:
            logger.debug("Skipping pitcher %s with empty name key", pitcher.pitcher_id)
            continue
        buckets.setdefault(f"{name_key}|{pitcher.team_id}", []).append(pitcher)

    groups = [
        DuplicateGroup(
            key=key,
            normalized_name=key.split("|", 1)[0],
            team_id=members[0].team_id,
            pitchers=tuple(members),
        )
        for key, members in buckets.items()
        if len(members) > 1
    ]
    logger.debug("Found %d duplicate groups", len(groups))
    return groups


def resolve_group(group: DuplicateGroup) -> MergePlan:
    if not group.pitchers:
        raise ValueError(f"Duplicate group {group.key!r} has no pitchers")
    scores = [score_pitcher(p) for p in group.pitchers]
    # max() returns the first maximal element, so input order breaks ties
    keep_index = max(range(len(scores)), key=lambda i: scores[i])
    drop_indices = [i for i in range(len(scores)) if i != keep_index]
    drop_indices.sort(key=lambda i: scores[i], reverse=True)
    return MergePlan(
        group_key=group.key,
        keep=group.pitchers[keep_index],
        drop=tuple(group.pitchers[i] for i in drop_indices),
        keep_score=scores[keep_index],
        drop_scores=tuple(scores[i] for i in drop_indices),
    )


def resolve_duplicates(pitchers: Iterable[Pitcher]) -> DuplicateAnalysis:
    """Group duplicates and plan a merge for each group. Read-only."""
    groups = find_duplicate_groups(pitchers)
    plans = [resolve_group(g) for g in groups]
    return DuplicateAnalysis(groups=tuple(groups), merge_plans=tuple(plans))
