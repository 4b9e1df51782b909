"""Unit tests for the value-less Result."""

from __future__ import annotations

import pytest

from resultant import Error, Result, RootErrorAccessError, ValueResult

pytestmark = pytest.mark.unit

E1 = Error("first", 1)
E2 = Error("second", 2)
E3 = Error("third", 3)


class TestFactories:
    def test_success(self) -> None:
        res = Result.success()

        assert res.is_success is True
        assert res.is_faulted is False
        assert res.errors == ()
        assert bool(res) is True

    def test_default_failure_carries_default_error(self) -> None:
        res = Result.failure()

        assert res.is_faulted is True
        assert res.errors == (Error.DEFAULT,)
        assert bool(res) is False

    def test_failure_from_message(self) -> None:
        res = Result.failure("disk full")

        assert res.errors == (Error("disk full"),)
        assert res.root_error.code == 0

    def test_failure_from_single_error(self) -> None:
        assert Result.failure(E1).errors == (E1,)

    def test_failure_from_error_list_keeps_order(self) -> None:
        assert Result.failure([E2, E1, E2]).errors == (E2, E1, E2)

    def test_failure_from_empty_list_is_legal(self) -> None:
        res = Result.failure([])

        assert res.is_faulted is True
        assert res.errors == ()

    def test_failure_rejects_non_error_items(self) -> None:
        with pytest.raises(TypeError, match="errors"):
            Result.failure([E1, "not an error"])  # type: ignore[list-item]


class TestConversions:
    def test_from_true_equals_success(self) -> None:
        assert Result.from_bool(True) == Result.success()

    def test_from_false_equals_default_failure(self) -> None:
        res = Result.from_bool(False)

        assert res == Result.failure()
        assert res.errors == (Error.DEFAULT,)

    def test_from_error(self) -> None:
        assert Result.from_error(E1) == Result.failure(E1)

    def test_from_errors(self) -> None:
        assert Result.from_errors([E1, E2]).errors == (E1, E2)

    def test_from_errors_rejects_a_lone_error(self) -> None:
        with pytest.raises(TypeError):
            Result.from_errors(E1)  # type: ignore[arg-type]

    def test_from_exception_wraps_exception(self) -> None:
        exc = RuntimeError("socket closed")

        res = Result.from_exception(exc)

        assert res.is_faulted
        assert res.root_error.message == "socket closed"
        assert res.root_error.cause is exc


class TestRootError:
    def test_first_error_of_faulted_result(self) -> None:
        assert Result.failure([E2, E1]).root_error is E2

    def test_falls_back_to_default_when_no_errors(self) -> None:
        assert Result.failure([]).root_error is Error.DEFAULT

    def test_raises_on_success(self) -> None:
        with pytest.raises(RootErrorAccessError):
            _ = Result.success().root_error


class TestMutation:
    def test_add_errors_on_success_then_add_error(self) -> None:
        res = Result.success()

        returned = res.add_errors([E1, E2])

        assert returned is res
        assert res.is_faulted
        assert res.errors == (E1, E2)

        res.add_error(E3)
        assert res.errors == (E1, E2, E3)

    def test_add_error_never_removes_prior_errors(self) -> None:
        res = Result.failure(E1).add_error(E1)
        assert res.errors == (E1, E1)

    def test_add_error_rejects_non_error(self) -> None:
        res = Result.success()

        with pytest.raises(TypeError):
            res.add_error("oops")  # type: ignore[arg-type]
        assert res.is_success

    def test_add_empty_errors_still_faults(self) -> None:
        res = Result.success().add_errors([])

        assert res.is_faulted
        assert res.root_error is Error.DEFAULT

    def test_errors_snapshot_is_read_only(self) -> None:
        res = Result.failure(E1)
        snapshot = res.errors

        res.add_error(E2)

        assert snapshot == (E1,)
        assert isinstance(snapshot, tuple)


class TestCombine:
    def test_faulted_and_successful(self) -> None:
        r1 = Result.failure(E1)
        r2 = Result.success()

        combined = Result.success().combine(r1, r2)

        assert combined.is_faulted
        assert combined.errors == (E1,)

    def test_both_faulted_in_argument_order(self) -> None:
        combined = Result.success().combine(Result.failure(E1), Result.failure(E2))
        assert combined.errors == (E1, E2)

    def test_appends_after_existing_errors(self) -> None:
        res = Result.failure(E3)
        res.combine(Result.failure([E1, E2]))
        assert res.errors == (E3, E1, E2)

    def test_all_successful_leaves_result_untouched(self) -> None:
        res = Result.success()

        res.combine(Result.success(), ValueResult.success(1))

        assert res.is_success
        assert res.errors == ()

    def test_accepts_value_results(self) -> None:
        res = Result.success().combine(ValueResult.failure(E2))
        assert res.errors == (E2,)

    def test_does_not_mutate_arguments(self) -> None:
        other = Result.failure(E1)

        Result.success().combine(other).add_error(E2)

        assert other.errors == (E1,)


class TestDunder:
    def test_equality_requires_same_kind(self) -> None:
        assert Result.success() != ValueResult.success(None)

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(Result.success())

    def test_repr(self) -> None:
        assert repr(Result.success()) == "Result.success()"
        assert repr(Result.failure("x")).startswith("Result.failure([Error(")


class TestSharedDefaultError:
    def test_metadata_on_one_default_failure_does_not_leak(self) -> None:
        Result.failure().root_error.add_metadata("request_id", 1)

        fresh = Result.failure()

        assert fresh.root_error.metadata == {}
        assert Result.from_bool(False).errors == (Error.DEFAULT,)
        fresh.root_error.add_metadata("request_id", 2)
        assert fresh.root_error.metadata == {"request_id": 2}

    def test_default_singleton_metadata_is_read_only(self) -> None:
        with pytest.raises(TypeError, match="read-only"):
            Error.DEFAULT.add_metadata("k", 1)
        assert dict(Error.DEFAULT.metadata) == {}

    def test_empty_failure_falls_back_to_untouched_singleton(self) -> None:
        assert Result.failure([]).root_error.metadata == {}


class TestErrorListOwnership:
    def test_constructor_copies_caller_list(self) -> None:
        errors = [E1]

        res = Result(False, errors)
        errors.append(E2)
        res.add_error(E3)

        assert res.errors == (E1, E3)
        assert errors == [E1, E2]

    def test_factory_copies_caller_list(self) -> None:
        errors = [E1]

        res = Result.failure(errors)
        errors.clear()

        assert res.errors == (E1,)
