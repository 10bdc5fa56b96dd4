from __future__ import annotations

from typing import Any, Callable, Dict

import pytest

from upgradepick.core.classifier import is_actionable, matches
from upgradepick.models import Bump, DependencyRecord

MakeRecord = Callable[..., DependencyRecord]


@pytest.mark.unit
class TestMatches:
    """Tests for exact-match group filtering."""

    def test_empty_filter_matches_everything(self, make_record: MakeRecord) -> None:
        """Test a filter naming no attributes matches any record."""
        assert matches(make_record(), {})
        assert matches(make_record(mismatch=True, bump=Bump.MAJOR), {})

    def test_single_attribute(self, make_record: MakeRecord) -> None:
        """Test a named attribute must equal the expected value."""
        assert matches(make_record(bump=Bump.PATCH), {"bump": Bump.PATCH})
        assert not matches(make_record(bump=Bump.MINOR), {"bump": Bump.PATCH})
        assert not matches(make_record(), {"bump": Bump.PATCH})

    def test_none_requires_absence(self, make_record: MakeRecord) -> None:
        """Test an expected None only matches records without the value."""
        mismatch_only = make_record(mismatch=True)
        mismatch_with_bump = make_record(mismatch=True, bump=Bump.MINOR)
        rule = {"mismatch": True, "bump": None}

        assert matches(mismatch_only, rule)
        assert not matches(mismatch_with_bump, rule)

    def test_omitted_key_is_not_checked(self, make_record: MakeRecord) -> None:
        """Test leaving bump out of the filter ignores it."""
        record = make_record(mismatch=True, bump=Bump.MINOR)

        assert matches(record, {"mismatch": True})

    @pytest.mark.parametrize(
        "overrides",
        [
            {"mismatch": True, "not_installed": True, "bump": Bump.PATCH},
            {"mismatch": True, "not_installed": False, "bump": None},
            {"mismatch": False, "not_installed": True, "bump": None},
        ],
        ids=["wrong-bump", "wrong-not-installed", "wrong-mismatch"],
    )
    def test_two_of_three_is_not_enough(
        self, make_record: MakeRecord, overrides: Dict[str, Any]
    ) -> None:
        """Test a record matching two of three constraints is excluded."""
        rule = {"mismatch": True, "not_installed": True, "bump": None}

        assert not matches(make_record(**overrides), rule)

    def test_all_three_match(self, make_record: MakeRecord) -> None:
        """Test a record satisfying every constraint is included."""
        rule = {"mismatch": True, "not_installed": True, "bump": None}

        assert matches(make_record(mismatch=True, not_installed=True), rule)

    def test_false_flag_constraint(self, make_record: MakeRecord) -> None:
        """Test False is an ordinary expected value, not 'absent'."""
        assert matches(make_record(), {"mismatch": False})
        assert not matches(make_record(mismatch=True), {"mismatch": False})

    def test_plain_string_bump(self, make_record: MakeRecord) -> None:
        """Test filters may spell the bump as its report string."""
        assert matches(make_record(bump=Bump.NON_SEMVER), {"bump": "nonSemver"})


@pytest.mark.unit
class TestIsActionable:
    """Tests for deciding whether a record belongs in the menu."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"mismatch": True},
            {"not_installed": True},
            {"bump": Bump.PATCH},
            {"bump": Bump.NON_SEMVER},
        ],
        ids=["mismatch", "missing", "patch", "non-semver"],
    )
    def test_flagged_records(self, make_record: MakeRecord, overrides: Dict[str, Any]) -> None:
        """Test any attention flag makes a record actionable."""
        assert is_actionable(make_record(**overrides))

    def test_up_to_date_record(self, make_record: MakeRecord) -> None:
        """Test a record without flags is not actionable."""
        assert not is_actionable(make_record())

    def test_dev_dependency_alone(self, make_record: MakeRecord) -> None:
        """Test the dev dependency tag does not make a record actionable."""
        assert not is_actionable(make_record(dev_dependency=True))
