from cbb_pitching.domain.team import Team
from cbb_pitching.repos.team_repo import SqliteTeamRepo


class TestSqliteTeamRepo:
    def test_upsert_and_get(self, conn) -> None:
        repo = SqliteTeamRepo(conn)
        repo.upsert(Team(team_id="t1", name="Tigers", display_name="LSU Tigers", conference="SEC", logo="l.png"))

        team = repo.get_by_id("t1")

        assert team == Team(team_id="t1", name="Tigers", display_name="LSU Tigers", conference="SEC", logo="l.png")
        assert team.label == "LSU Tigers"

    def test_upsert_updates(self, conn) -> None:
        repo = SqliteTeamRepo(conn)
        repo.upsert(Team(team_id="t1", name="Tigers", conference="SEC"))
        repo.upsert(Team(team_id="t1", name="Tigers", conference="Big 12"))

        assert len(repo.all()) == 1
        assert repo.get_by_id("t1").conference == "Big 12"

    def test_get_missing(self, conn) -> None:
        assert SqliteTeamRepo(conn).get_by_id("nope") is None

    def test_get_by_conference_sorted_by_name(self, conn) -> None:
        repo = SqliteTeamRepo(conn)
        repo.upsert(Team(team_id="t1", name="Tigers", conference="SEC"))
        repo.upsert(Team(team_id="t2", name="Gators", conference="SEC"))
        repo.upsert(Team(team_id="t3", name="Owls", conference="AAC"))

        assert [t.name for t in repo.get_by_conference("SEC")] == ["Gators", "Tigers"]
