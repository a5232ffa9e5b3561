"""Tests for environment-overridable timeouts."""

from unittest.mock import patch

from vpc_share_source.timeout_config import Timeouts, _get_timeout, log_timeout_event


class TestGetTimeout:
    def test_default_when_unset(self):
        with patch.dict("os.environ", {}, clear=True):
            assert _get_timeout("VPC_SHARE_TIMEOUT_TEST", 42) == 42

    def test_value_from_environment(self):
        with patch.dict("os.environ", {"VPC_SHARE_TIMEOUT_TEST": "7.5"}):
            assert _get_timeout("VPC_SHARE_TIMEOUT_TEST", 42) == 7.5

    def test_negative_falls_back(self):
        with patch.dict("os.environ", {"VPC_SHARE_TIMEOUT_TEST": "-1"}):
            assert _get_timeout("VPC_SHARE_TIMEOUT_TEST", 42) == 42

    def test_garbage_falls_back(self):
        with patch.dict("os.environ", {"VPC_SHARE_TIMEOUT_TEST": "soon"}):
            assert _get_timeout("VPC_SHARE_TIMEOUT_TEST", 42) == 42


def test_timeouts_are_positive():
    assert Timeouts.SHARE_FETCH > 0
    assert Timeouts.TAG_LOOKUP > 0
    assert Timeouts.HTTP > 0


@patch("vpc_share_source.timeout_config.logger")
def test_log_timeout_event(mock_logger):
    log_timeout_event("get_share_source", 60)
    message = mock_logger.warning.call_args.args[0]
    assert "get_share_source" in message and "60" in message
