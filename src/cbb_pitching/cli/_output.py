from rich.console import Console
from rich.table import Table

from cbb_pitching.domain.completeness import TRACKED_FIELDS, TeamCompleteness
from cbb_pitching.domain.duplicates import CleanupReport, DuplicateAnalysis
from cbb_pitching.domain.leaderboard import LeaderboardCategory, LeaderboardEntry
from cbb_pitching.domain.pitching_stats import GameStats, SeasonStats
from cbb_pitching.domain.roster import BioUpdate, ParticipationLink
from cbb_pitching.domain.team_record import TeamRecord
from cbb_pitching.stats.innings import format_innings
from cbb_pitching.stats.rates import format_k_bb, format_rate

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def print_leaders(entries: list[LeaderboardEntry], category: LeaderboardCategory, min_innings: float) -> None:
    if not entries:
        console.print(f"No pitchers qualify for {category.value} (min {min_innings:g} IP).")
        return
    console.print(f"[bold]{category.value.upper()} leaders[/bold] (min {min_innings:g} IP)")
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Pitcher")
    table.add_column("Team")
    table.add_column("G", justify="right")
    table.add_column("IP", justify="right")
    table.add_column("ERA", justify="right")
    table.add_column("WHIP", justify="right")
    table.add_column("K", justify="right")
    table.add_column("K/9", justify="right")
    table.add_column("K:BB", justify="right")
    for entry in entries:
        s = entry.stats
        table.add_row(
            str(entry.rank),
            s.pitcher_name,
            s.team_id,
            str(s.games_played),
            format_innings(s.innings_pitched),
            format_rate(s.era),
            format_rate(s.whip),
            str(s.strikeouts),
            format_rate(s.k_per_9, 1),
            format_k_bb(s.k_bb_ratio),
        )
    console.print(table)


def print_season_stats(stats: list[SeasonStats]) -> None:
    if not stats:
        console.print("No pitching data found.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Pitcher")
    table.add_column("ID")
    table.add_column("Team")
    for column in ("G", "IP", "H", "R", "ER", "BB", "K", "HR", "ERA", "WHIP", "K/9", "BB/9", "K:BB"):
        table.add_column(column, justify="right")
    for s in sorted(stats, key=lambda x: x.innings_pitched, reverse=True):
        table.add_row(
            s.pitcher_name,
            s.pitcher_id,
            s.team_id,
            str(s.games_played),
            format_innings(s.innings_pitched),
            str(s.hits),
            str(s.runs),
            str(s.earned_runs),
            str(s.walks),
            str(s.strikeouts),
            str(s.home_runs),
            format_rate(s.era),
            format_rate(s.whip),
            format_rate(s.k_per_9, 1),
            format_rate(s.bb_per_9, 1),
            format_k_bb(s.k_bb_ratio),
        )
    console.print(table)


def print_game_log(games: list[GameStats]) -> None:
    if not games:
        console.print("No games found.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Date")
    table.add_column("Opponent")
    for column in ("IP", "H", "R", "ER", "BB", "K", "HR", "PC", "ERA"):
        table.add_column(column, justify="right")
    for g in games:
        table.add_row(
            g.date[:10],
            g.opponent_name or g.opponent_id,
            format_innings(g.innings_pitched),
            str(g.hits),
            str(g.runs),
            str(g.earned_runs),
            str(g.walks),
            str(g.strikeouts),
            str(g.home_runs),
            str(g.pitch_count),
            format_rate(g.era),
        )
    console.print(table)


def print_duplicate_analysis(analysis: DuplicateAnalysis) -> None:
    if not analysis.merge_plans:
        console.print("[bold green]No duplicate pitchers found.[/bold green]")
        return
    console.print(
        f"[bold]{len(analysis.groups)}[/bold] duplicate groups, "
        f"[bold]{analysis.records_to_remove}[/bold] records to remove"
    )
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Team")
    table.add_column("Name key")
    table.add_column("Keep")
    table.add_column("Score", justify="right")
    table.add_column("Drop")
    for plan in analysis.merge_plans:
        drops = ", ".join(f"{p.pitcher_id} ({score})" for p, score in zip(plan.drop, plan.drop_scores, strict=True))
        table.add_row(
            plan.keep.team_id,
            plan.group_key.split("|", 1)[0],
            f"{plan.keep.label} ({plan.keep.pitcher_id})",
            str(plan.keep_score),
            drops,
        )
    console.print(table)


def print_cleanup_report(report: CleanupReport) -> None:
    if report.dry_run:
        console.print("[yellow]Dry run[/yellow]: no changes made. Re-run with --apply to merge.")
        return
    console.print(f"[bold green]Merged[/bold green] {report.total_groups} groups, deleted {report.deleted} records")
    for error in report.errors:
        err_console.print(f"  [red]{error.group_key}[/red]: {error.message}")


def print_standings(conference: str, records: list[TeamRecord]) -> None:
    if not records:
        console.print(f"No teams found in conference '{conference}'.")
        return
    table = Table(title=conference, show_edge=False, pad_edge=False)
    table.add_column("Team")
    table.add_column("W", justify="right")
    table.add_column("L", justify="right")
    table.add_column("Pct", justify="right")
    table.add_column("Conf", justify="right")
    table.add_column("Home", justify="right")
    table.add_column("Away", justify="right")
    table.add_column("L10", justify="right")
    table.add_column("Strk", justify="right")
    for r in records:
        table.add_row(
            r.team_name,
            str(r.wins),
            str(r.losses),
            f"{r.win_pct:.3f}",
            f"{r.conference_wins}-{r.conference_losses}",
            r.home_record,
            r.away_record,
            r.last_ten,
            r.streak or "-",
        )
    console.print(table)


def print_completeness(audits: list[TeamCompleteness], limit: int) -> None:
    if not audits:
        console.print("No teams found.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Team")
    table.add_column("Conf")
    table.add_column("Pitchers", justify="right")
    for name in TRACKED_FIELDS:
        table.add_column(f"-{name}", justify="right")
    table.add_column("Complete", justify="right")
    for a in audits[:limit]:
        table.add_row(
            a.team_name,
            a.conference or "N/A",
            str(a.total_pitchers),
            *(str(a.missing(name)) for name in TRACKED_FIELDS),
            f"{a.completeness_pct:.1f}%",
        )
    console.print(table)


def print_bio_updates(updates: list[BioUpdate], *, dry_run: bool) -> None:
    verb = "Would update" if dry_run else "Updated"
    if not updates:
        console.print("No new bio data to add.")
        return
    for update in updates:
        console.print(f"  {verb} {update.name}: {', '.join(update.fields)}")
    console.print(f"[bold]{len(updates)}[/bold] pitchers")


def print_links(links: list[ParticipationLink], *, dry_run: bool) -> None:
    verb = "Would link" if dry_run else "Linked"
    console.print(f"{verb} [bold]{len(links)}[/bold] participation rows")
    for link in links:
        console.print(f"  {link.game_id}: {link.pitcher_name} -> {link.pitcher_id}")
