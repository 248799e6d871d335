import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from cbb_pitching.exceptions import CbbException

_CONFIG_FILENAME = "cbb.toml"
_KNOWN_SECTIONS = frozenset({"database", "stats", "leaderboard"})


class ConfigError(CbbException):
    """Raised when cbb.toml is unreadable or holds invalid values."""


@dataclass(frozen=True)
class TrackerConfig:
    db_path: Path = Path("cbb.db")
    completed_only: bool = True
    recent_games: int = 3
    min_innings: float = 10.0
    leaderboard_limit: int = 10


# -- Parsing -----------------------------------------------------------------


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    raw = data.get(name, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{name}] must be a table")
    return raw


def _number(raw: dict[str, Any], key: str, default: float, context: str, *, integer: bool = False) -> Any:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{context}.{key}: expected a number, got {value!r}")
    if integer and not isinstance(value, int):
        raise ConfigError(f"{context}.{key}: expected an integer, got {value!r}")
    if value < 0:
        raise ConfigError(f"{context}.{key}: must be >= 0, got {value}")
    return value


def parse_config(data: dict[str, Any], *, base_dir: Path | None = None) -> TrackerConfig:
    unknown = sorted(set(data) - _KNOWN_SECTIONS)
    if unknown:
        raise ConfigError(f"Unrecognized sections in {_CONFIG_FILENAME}: {', '.join(unknown)}")

    defaults = TrackerConfig()
    database = _section(data, "database")
    stats = _section(data, "stats")
    leaderboard = _section(data, "leaderboard")

    db_path = Path(str(database.get("path", defaults.db_path))).expanduser()
    if base_dir is not None and not db_path.is_absolute():
        db_path = base_dir / db_path

    completed_only = stats.get("completed_only", defaults.completed_only)
    if not isinstance(completed_only, bool):
        raise ConfigError(f"stats.completed_only: expected true or false, got {completed_only!r}")

    return TrackerConfig(
        db_path=db_path,
        completed_only=completed_only,
        recent_games=_number(stats, "recent_games", defaults.recent_games, "stats", integer=True),
        min_innings=float(_number(leaderboard, "min_innings", defaults.min_innings, "leaderboard")),
        leaderboard_limit=_number(leaderboard, "limit", defaults.leaderboard_limit, "leaderboard", integer=True),
    )


# -- TOML loading ------------------------------------------------------------


def load_config(config_dir: Path | None = None, **overrides: Any) -> TrackerConfig:
    """Read ``cbb.toml`` from ``config_dir`` (defaults when absent), then apply non-None overrides."""
    config_dir = config_dir or Path.cwd()
    toml_path = config_dir / _CONFIG_FILENAME

    if toml_path.exists():
        try:
            with toml_path.open("rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid {_CONFIG_FILENAME}: {exc}") from exc
        config = parse_config(data, base_dir=config_dir)
    else:
        config = replace(TrackerConfig(), db_path=config_dir / TrackerConfig.db_path)

    applied = {k: v for k, v in overrides.items() if v is not None}
    return replace(config, **applied) if applied else config
