"""Tests for the Success/Failure result type."""

import pytest

from medicine_reminder.modules.auth.domain.failures import InfrastructureFailure
from medicine_reminder.shared.core.result import UNIT, Failure, Success


class TestResult:

    def test_success_fold_calls_success_branch(self):
        result = Success(3)
        assert result.fold(lambda f: f"failed {f}", lambda v: v * 2) == 6
        assert result.is_success and not result.is_failure

    def test_failure_fold_calls_failure_branch(self):
        result = Failure(InfrastructureFailure.NOT_FOUND)
        assert result.fold(lambda f: f.value, lambda v: v) == "notFound"
        assert result.is_failure and not result.is_success

    def test_map_only_touches_success(self):
        assert Success(2).map(lambda v: v + 1) == Success(3)
        failure = Failure(InfrastructureFailure.SERVER_ERROR)
        assert failure.map(lambda v: v + 1) is failure

    def test_get_or_none(self):
        assert Success("x").get_or_none() == "x"
        assert Failure(InfrastructureFailure.SERVER_ERROR).get_or_none() is None

    def test_equality_and_unit(self):
        assert Success(UNIT) == Success(UNIT)
        assert Failure(InfrastructureFailure.INVALID_DATA) == Failure(InfrastructureFailure.INVALID_DATA)
        assert Success(UNIT) != Failure(InfrastructureFailure.INVALID_DATA)
        assert repr(UNIT) == "unit"

    def test_results_are_frozen(self):
        result = Success(1)
        with pytest.raises(AttributeError):
            result.value = 2
