from unittest.mock import Mock, patch

import pytest
from django.db import OperationalError

from utils.transaction_utils import DeadlockError, is_deadlock, is_lock_timeout, retry_on_deadlock


class FakePgError(Exception):
    def __init__(self, pgcode):
        super().__init__(pgcode)
        self.pgcode = pgcode


def operational_error(pgcode=None, message="database error"):
    error = OperationalError(message)
    if pgcode:
        error.__cause__ = FakePgError(pgcode)
    return error


@pytest.mark.unit
class TestErrorClassification:
    def test_deadlock_by_sqlstate(self):
        assert is_deadlock(operational_error("40P01"))
        assert not is_deadlock(operational_error("55P03"))

    def test_deadlock_by_message(self):
        assert is_deadlock(OperationalError("deadlock detected\nDETAIL: Process 1 waits for ShareLock"))

    def test_lock_timeout_by_sqlstate(self):
        assert is_lock_timeout(operational_error("55P03"))
        assert not is_lock_timeout(operational_error("40P01"))


@pytest.mark.unit
@patch("utils.transaction_utils.time.sleep")
class TestRetryOnDeadlock:
    def test_retries_then_succeeds(self, mock_sleep):
        func = Mock(side_effect=[operational_error("40P01"), operational_error("40P01"), "done"])
        func.__name__ = "create_purchase"

        assert retry_on_deadlock(max_retries=3, delay=0.1, backoff=2.0)(func)() == "done"
        assert func.call_count == 3
        assert [c.args[0] for c in mock_sleep.call_args_list] == [0.1, 0.2]

    def test_gives_up_after_max_retries(self, mock_sleep):
        func = Mock(side_effect=operational_error("40P01"))
        func.__name__ = "create_purchase"

        with pytest.raises(DeadlockError):
            retry_on_deadlock(max_retries=2)(func)()
        assert func.call_count == 3

    def test_other_operational_errors_propagate(self, mock_sleep):
        func = Mock(side_effect=operational_error("55P03", "canceling statement due to lock timeout"))
        func.__name__ = "confirm_payment"

        with pytest.raises(OperationalError):
            retry_on_deadlock(max_retries=3)(func)()
        func.assert_called_once()
        mock_sleep.assert_not_called()
