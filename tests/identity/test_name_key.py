import pytest

from cbb_pitching.identity.name_key import has_position_artifact, keys_match, names_match, normalize_name


class TestNormalizeName:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("John Doe", "john doe"),
            ("John Doe - P", "john doe"),
            ("John Doe -P", "john doe"),
            ("JOHN  DOE", "john doe"),
            ("  John   Doe  ", "john doe"),
            ("J.T. O'Brien", "jt obrien"),
            ("Luis Pérez", "luis prez"),
            ("Smith Jr.", "smith jr"),
        ],
    )
    def test_keys(self, raw: str, expected: str) -> None:
        assert normalize_name(raw) == expected

    def test_artifact_and_clean_forms_share_a_key(self) -> None:
        assert normalize_name("John Doe - P") == normalize_name("John Doe")

    @pytest.mark.parametrize("raw", [None, "", "   ", "123", "- P"])
    def test_empty_keys(self, raw: str | None) -> None:
        assert normalize_name(raw) == ""

    def test_idempotent(self) -> None:
        key = normalize_name("Mc-Donald, Ray - P")
        assert normalize_name(key) == key


class TestKeysMatch:
    def test_equal(self) -> None:
        assert keys_match("john doe", "john doe")

    def test_token_run(self) -> None:
        assert keys_match("doe", "john doe")
        assert keys_match("john michael doe", "michael doe")

    def test_partial_token_does_not_match(self) -> None:
        assert not keys_match("lee", "leeroy jenkins")

    def test_non_contiguous_does_not_match(self) -> None:
        assert not keys_match("john doe", "john michael doe")

    def test_empty_never_matches(self) -> None:
        assert not keys_match("", "")
        assert not keys_match("", "john doe")


class TestNamesMatch:
    def test_raw_names(self) -> None:
        assert names_match("John Doe - P", "JOHN DOE")
        assert not names_match("John Doe", "Jane Doe")


class TestHasPositionArtifact:
    def test_detects(self) -> None:
        assert has_position_artifact("John Doe - P")
        assert not has_position_artifact("John Doe")
        assert not has_position_artifact(None)


class TestNoPhoneticFuzziness:
    def test_similar_first_names_differ(self) -> None:
        assert normalize_name("John Smith") != normalize_name("Jon Smith")
        assert normalize_name("Smith - P") == normalize_name("Smith")
