from cbb_pitching.domain.duplicates import CleanupReport, MergeFailure, MergePlan, MergeResult
from cbb_pitching.domain.errors import MergeError
from tests.helpers import make_pitcher


def _plan() -> MergePlan:
    return MergePlan(group_key="john doe|t1", keep=make_pitcher("a"), drop=(make_pitcher("b"), make_pitcher("c")))


class TestMergeResult:
    def test_success_without_failures(self) -> None:
        result = MergeResult(plan=_plan(), repointed_rows=3, deleted=("b", "c"))
        assert result.success
        assert result.reason is None

    def test_reason_lists_failures(self) -> None:
        result = MergeResult(
            plan=_plan(),
            deleted=("c",),
            failures=(MergeFailure(pitcher_id="b", name="John Doe", stage="repoint", message="locked"),),
        )
        assert not result.success
        assert result.reason == "b (repoint): locked"


class TestCleanupReport:
    def test_deleted_counts_partial_failures(self) -> None:
        report = CleanupReport(
            dry_run=False,
            total_groups=2,
            total_records=5,
            merged=(MergeResult(plan=_plan(), deleted=("b", "c")),),
            errors=(MergeError(message="x", group_key="sam roe|t2", pitcher_ids=("e",), deleted=("f",)),),
        )
        assert report.deleted == 3

    def test_plan_drop_ids(self) -> None:
        assert _plan().drop_ids == ("b", "c")
