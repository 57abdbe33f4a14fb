"""Tests for the client-side rate limiter."""

from unittest.mock import patch

import pytest

from gitlab_client.api.rate_limiter import RateLimiter


class TestRateLimiter:
    """Test token bucket behaviour."""

    def test_rejects_non_positive_rate(self):
        """Test that a zero rate is rejected."""
        with pytest.raises(ValueError):
            RateLimiter(0)

    @patch('gitlab_client.api.rate_limiter.time')
    def test_acquire_without_waiting(self, mock_time):
        """Test that available tokens are handed out immediately."""
        mock_time.monotonic.return_value = 100.0
        limiter = RateLimiter(2)

        limiter.acquire()
        limiter.acquire()

        mock_time.sleep.assert_not_called()
        assert limiter.tokens == 0

    @patch('gitlab_client.api.rate_limiter.time')
    def test_acquire_sleeps_when_empty(self, mock_time):
        """Test that acquire blocks until the next token."""
        mock_time.monotonic.return_value = 100.0
        limiter = RateLimiter(4)
        limiter.tokens = 0

        limiter.acquire()

        mock_time.sleep.assert_called_once_with(0.25)
        assert limiter.tokens == 0

    @patch('gitlab_client.api.rate_limiter.time')
    def test_tokens_refill_over_time(self, mock_time):
        """Test refilling and the wait estimate."""
        mock_time.monotonic.return_value = 100.0
        limiter = RateLimiter(2)
        limiter.tokens = 0

        assert limiter.can_proceed() is False
        assert limiter.time_until_next_request() == 0.5

        mock_time.monotonic.return_value = 101.0
        assert limiter.can_proceed() is True
        assert limiter.time_until_next_request() == 0.0

    @patch('gitlab_client.api.rate_limiter.time')
    def test_wait_estimate_counts_partial_refill(self, mock_time):
        """Test the wait shrinks as the bucket refills."""
        mock_time.monotonic.return_value = 100.0
        limiter = RateLimiter(2)
        limiter.tokens = 0

        mock_time.monotonic.return_value = 100.25

        assert limiter.time_until_next_request() == 0.25
