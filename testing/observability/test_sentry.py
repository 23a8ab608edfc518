"""Tests for Sentry initialisation."""

import os
import unittest
from unittest.mock import MagicMock, patch

from plantcare.observability.sentry import DEFAULT_TRACES_SAMPLE_RATE, init_sentry


class TestInitSentry(unittest.TestCase):
    """Tests for init_sentry."""

    @patch("plantcare.observability.sentry.sentry_sdk.init")
    def test_disabled_without_dsn(self, mock_init: MagicMock) -> None:
        """Test that nothing is initialised without SENTRY_DSN."""
        with patch.dict(os.environ, {}, clear=True):
            self.assertFalse(init_sentry())

        mock_init.assert_not_called()

    @patch("plantcare.observability.sentry.sentry_sdk.init")
    def test_initialises_with_dsn(self, mock_init: MagicMock) -> None:
        """Test that Sentry is initialised with the DSN and sample rate."""
        env = {"SENTRY_DSN": "https://key@sentry.test/1", "SENTRY_TRACES_SAMPLE_RATE": "0.5"}
        with patch.dict(os.environ, env, clear=True):
            self.assertTrue(init_sentry())

        call_kwargs = mock_init.call_args.kwargs
        self.assertEqual(call_kwargs["dsn"], "https://key@sentry.test/1")
        self.assertEqual(call_kwargs["traces_sample_rate"], 0.5)
        self.assertFalse(call_kwargs["send_default_pii"])

    @patch("plantcare.observability.sentry.sentry_sdk.init")
    def test_invalid_sample_rate_uses_default(self, mock_init: MagicMock) -> None:
        """Test that an invalid sample rate falls back to the default."""
        env = {"SENTRY_DSN": "https://key@sentry.test/1", "SENTRY_TRACES_SAMPLE_RATE": "lots"}
        with patch.dict(os.environ, env, clear=True):
            init_sentry()

        self.assertEqual(
            mock_init.call_args.kwargs["traces_sample_rate"], DEFAULT_TRACES_SAMPLE_RATE
        )


if __name__ == "__main__":
    unittest.main()
