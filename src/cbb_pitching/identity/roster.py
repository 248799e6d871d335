import logging
import re
from collections.abc import Iterable, Sequence

from cbb_pitching.domain.game import Participation
from cbb_pitching.domain.pitcher import Pitcher
from cbb_pitching.domain.roster import BioUpdate, ParticipationLink, RosterEntry
from cbb_pitching.identity.name_key import keys_match, normalize_name

logger = logging.getLogger(__name__)

_HEIGHT_RE = re.compile(r"(\d+)[-'\s]+(\d+)")
_WEIGHT_RE = re.compile(r"(\d+)")

# Redshirt forms first: "r-fr" also contains "fr".
_CLASS_YEARS = (
    (("r-fr", "redshirt freshman"), "R-Fr."),
    (("r-so", "redshirt sophomore"), "R-So."),
    (("r-jr", "redshirt junior"), "R-Jr."),
    (("r-sr", "redshirt senior"), "R-Sr."),
    (("fr", "freshman"), "Fr."),
    (("so", "sophomore"), "So."),
    (("jr", "junior"), "Jr."),
    (("sr", "senior"), "Sr."),
    (("gr", "graduate"), "Gr."),
)


def parse_height(raw: str | None) -> str | None:
    """``6-2``, ``6'2"`` and ``6' 2"`` all become ``"6-2"``."""
    if not raw:
        return None
    match = _HEIGHT_RE.search(raw)
    if match:
        return f"{match.group(1)}-{match.group(2)}"
    return raw.strip() or None


def parse_weight(raw: str | None) -> str | None:
    if not raw:
        return None
    match = _WEIGHT_RE.search(raw)
    return match.group(1) if match else None


def normalize_class_year(raw: str | None) -> str | None:
    if not raw:
        return None
    lowered = raw.strip().lower()
    for needles, label in _CLASS_YEARS:
        if any(n in lowered for n in needles):
            return label
    return raw.strip() or None


def match_roster_entry(pitcher: Pitcher, entries: Sequence[RosterEntry]) -> RosterEntry | None:
    """Exact name-key match first; the loose match is used only if it is unique."""
    key = normalize_name(pitcher.name)
    if not key:
        return None
    keyed = [(normalize_name(e.name), e) for e in entries]
    for entry_key, entry in keyed:
        if entry_key == key:
            return entry
    loose = [entry for entry_key, entry in keyed if keys_match(key, entry_key)]
    if len(loose) == 1:
        return loose[0]
    if len(loose) > 1:
        logger.debug("Ambiguous roster match for %s: %d candidates", pitcher.name, len(loose))
    return None


def _bio_fields(entry: RosterEntry) -> dict[str, str | None]:
    return {
        "height": parse_height(entry.height),
        "weight": parse_weight(entry.weight),
        "year": normalize_class_year(entry.year),
        "hometown": entry.hometown.strip() if entry.hometown else None,
        "bats_throws": entry.bats_throws.strip() if entry.bats_throws else None,
    }


def plan_bio_backfill(pitchers: Iterable[Pitcher], entries: Sequence[RosterEntry]) -> list[BioUpdate]:
    """Fill empty biographical fields from roster rows. Existing values are never overwritten."""
    updates: list[BioUpdate] = []
    for pitcher in pitchers:
        entry = match_roster_entry(pitcher, entries)
        if entry is None:
            continue
        fields = {
            name: value
            for name, value in _bio_fields(entry).items()
            if value and not getattr(pitcher, name)
        }
        if fields:
            updates.append(BioUpdate(pitcher_id=pitcher.pitcher_id, name=pitcher.name, fields=fields))
    return updates


def link_participation(rows: Iterable[Participation], pitchers: Iterable[Pitcher]) -> list[ParticipationLink]:
    """Attach pitcher ids to box-score rows scraped without one.

    A row is linked only to a pitcher on the same team, and only when
    exactly one roster name matches.
    """
    by_team: dict[str, list[tuple[str, Pitcher]]] = {}
    for pitcher in pitchers:
        by_team.setdefault(pitcher.team_id, []).append((normalize_name(pitcher.name), pitcher))

    links: list[ParticipationLink] = []
    for row in rows:
        if row.pitcher_id:
            continue
        key = normalize_name(row.pitcher_name)
        candidates = by_team.get(row.team_id, [])
        exact = [p for k, p in candidates if key and k == key]
        matches = exact or [p for k, p in candidates if keys_match(key, k)]
        if len(matches) != 1:
            logger.debug("No unique roster match for %r on team %s", row.pitcher_name, row.team_id)
            continue
        links.append(
            ParticipationLink(
                participation_id=row.id,
                game_id=row.game_id,
                pitcher_name=row.pitcher_name,
                pitcher_id=matches[0].pitcher_id,
            )
        )
    return links
