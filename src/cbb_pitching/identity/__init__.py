from cbb_pitching.identity.merge import apply_merge
from cbb_pitching.identity.name_key import names_match, normalize_name
from cbb_pitching.identity.resolver import find_duplicate_groups, resolve_duplicates, resolve_group, score_pitcher

__all__ = [
    "apply_merge",
    "find_duplicate_groups",
    "names_match",
    "normalize_name",
    "resolve_duplicates",
    "resolve_group",
    "score_pitcher",
]
