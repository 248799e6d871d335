import csv
from pathlib import Path
from typing import Annotated

import typer

from cbb_pitching.cli._logging import configure_logging
from cbb_pitching.cli._output import (
    console,
    print_bio_updates,
    print_cleanup_report,
    print_completeness,
    print_duplicate_analysis,
    print_error,
    print_game_log,
    print_leaders,
    print_links,
    print_season_stats,
    print_standings,
)
from cbb_pitching.cli.factory import build_tracker_context
from cbb_pitching.config import ConfigError, TrackerConfig, load_config
from cbb_pitching.domain.leaderboard import LeaderboardCategory
from cbb_pitching.domain.result import Err, Ok
from cbb_pitching.domain.roster import RosterEntry
from cbb_pitching.stats.leaderboards import get_leaders

app = typer.Typer(name="cbb", help="College baseball pitcher tracker: season stats, leaderboards and roster cleanup")

_ConfigDirOpt = Annotated[Path | None, typer.Option("--config-dir", help="Directory containing cbb.toml")]
_DbOpt = Annotated[Path | None, typer.Option("--db", help="Path to the SQLite database")]
_TeamOpt = Annotated[str | None, typer.Option("--team", help="Team id")]
_DryRunOpt = Annotated[bool, typer.Option("--dry-run", help="Report what would change without writing")]


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """College baseball pitcher tracker."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


def _config(config_dir: Path | None, db: Path | None, **overrides: object) -> TrackerConfig:
    try:
        return load_config(config_dir, db_path=db, **overrides)
    except ConfigError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from exc


@app.command()
def leaders(
    category: Annotated[LeaderboardCategory, typer.Argument(help="Stat category to rank")],
    limit: Annotated[int | None, typer.Option("--limit", "-n", help="Number of pitchers to show")] = None,
    min_innings: Annotated[float | None, typer.Option("--min-innings", help="Qualifying innings pitched")] = None,
    team: _TeamOpt = None,
    config_dir: _ConfigDirOpt = None,
    db: _DbOpt = None,
) -> None:
    """Show qualified leaders in one category."""
    config = _config(config_dir, db, leaderboard_limit=limit, min_innings=min_innings)
    with build_tracker_context(config) as tc:
        pool = tc.season_stats.compute_season_stats(team_id=team)
        entries = get_leaders(pool, category, limit=config.leaderboard_limit, min_innings=config.min_innings)
        print_leaders(entries, category, config.min_innings)


@app.command()
def season(
    pitcher: Annotated[str | None, typer.Option("--pitcher", help="Pitcher id")] = None,
    team: _TeamOpt = None,
    config_dir: _ConfigDirOpt = None,
    db: _DbOpt = None,
) -> None:
    """Season totals for a pitcher, a team, or every pitcher."""
    if pitcher is not None and team is not None:
        print_error("Pass --pitcher or --team, not both")
        raise typer.Exit(code=1)
    config = _config(config_dir, db)
    with build_tracker_context(config) as tc:
        stats = tc.season_stats.compute_season_stats(pitcher_id=pitcher, team_id=team)
        if pitcher is not None and not stats:
            print_error(f"No pitching data for pitcher '{pitcher}'")
            raise typer.Exit(code=1)
        print_season_stats(stats)


@app.command()
def recent(
    pitcher_id: Annotated[str, typer.Argument(help="Pitcher id")],
    games: Annotated[int | None, typer.Option("--games", "-n", help="Number of games")] = None,
    config_dir: _ConfigDirOpt = None,
    db: _DbOpt = None,
) -> None:
    """Most recent game lines for a pitcher."""
    config = _config(config_dir, db, recent_games=games)
    with build_tracker_context(config) as tc:
        print_game_log(tc.season_stats.recent_stats(pitcher_id, config.recent_games))


@app.command()
def duplicates(
    apply: Annotated[bool, typer.Option("--apply", help="Merge duplicates instead of only reporting them")] = False,
    config_dir: _ConfigDirOpt = None,
    db: _DbOpt = None,
) -> None:
    """Find same-team duplicate pitchers and optionally merge them."""
    config = _config(config_dir, db)
    with build_tracker_context(config) as tc:
        analysis = tc.duplicates.analyze()
        print_duplicate_analysis(analysis)
        report = tc.duplicates.run(dry_run=not apply, analysis=analysis)
        print_cleanup_report(report)
        if report.errors:
            raise typer.Exit(code=1)


@app.command()
def standings(
    conference: Annotated[str, typer.Argument(help="Conference name")],
    config_dir: _ConfigDirOpt = None,
    db: _DbOpt = None,
) -> None:
    """Conference standings from completed games."""
    config = _config(config_dir, db)
    with build_tracker_context(config) as tc:
        print_standings(conference, tc.standings.conference_standings(conference))


@app.command()
def record(
    team_id: Annotated[str, typer.Argument(help="Team id")],
    config_dir: _ConfigDirOpt = None,
    db: _DbOpt = None,
) -> None:
    """Win-loss record for one team."""
    config = _config(config_dir, db)
    with build_tracker_context(config) as tc:
        match tc.standings.team_record(team_id):
            case Ok(team_record):
                print_standings(team_record.conference or "Independent", [team_record])
            case Err(error):
                print_error(error.message)
                raise typer.Exit(code=1)


@app.command()
def audit(
    limit: Annotated[int, typer.Option("--limit", "-n", help="Number of teams to show")] = 20,
    config_dir: _ConfigDirOpt = None,
    db: _DbOpt = None,
) -> None:
    """Teams with the most missing biographical data."""
    config = _config(config_dir, db)
    with build_tracker_context(config) as tc:
        print_completeness(tc.completeness.audit(), limit)


@app.command("link-participation")
def link_participation_cmd(
    dry_run: _DryRunOpt = False,
    config_dir: _ConfigDirOpt = None,
    db: _DbOpt = None,
) -> None:
    """Attach pitcher ids to box-score rows scraped without one."""
    config = _config(config_dir, db)
    with build_tracker_context(config) as tc:
        print_links(tc.roster.link_unlinked_participation(dry_run=dry_run), dry_run=dry_run)


def _read_roster_csv(path: Path) -> list[RosterEntry]:
    with path.open(newline="") as f:
        reader = csv.DictReader(f)
        entries = []
        for raw in reader:
            row = {(k or "").strip().lower(): (v or "").strip() for k, v in raw.items()}
            if not row.get("name"):
                continue
            entries.append(
                RosterEntry(
                    name=row["name"],
                    height=row.get("height") or None,
                    weight=row.get("weight") or None,
                    year=row.get("year") or None,
                    hometown=row.get("hometown") or None,
                    bats_throws=row.get("bats_throws") or None,
                )
            )
    return entries


@app.command("backfill-bio")
def backfill_bio(
    roster_csv: Annotated[Path, typer.Argument(help="CSV of scraped roster rows", exists=True, dir_okay=False)],
    team: Annotated[str, typer.Option("--team", help="Team id the roster belongs to")],
    dry_run: _DryRunOpt = False,
    config_dir: _ConfigDirOpt = None,
    db: _DbOpt = None,
) -> None:
    """Fill empty height, weight, class, hometown and bats/throws from a roster CSV."""
    entries = _read_roster_csv(roster_csv)
    console.print(f"Read {len(entries)} roster rows from {roster_csv}")
    config = _config(config_dir, db)
    with build_tracker_context(config) as tc:
        print_bio_updates(tc.roster.backfill_bio(team, entries, dry_run=dry_run), dry_run=dry_run)
