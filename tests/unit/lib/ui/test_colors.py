"""Unit tests for appconfigr.lib.ui.colors module."""

from unittest.mock import patch

import pytest

from appconfigr.lib.ui.colors import status_label


@pytest.mark.unit
class TestStatusLabel:
    """Tests for status_label function."""

    def test_resolved_label_is_green_when_tty(self) -> None:
        """Test the ok label is wrapped in green when force_tty=True."""
        assert status_label(True, force_tty=True) == "\033[92mok\033[0m"

    def test_missing_label_is_red_when_tty(self) -> None:
        """Test the missing label is wrapped in red when force_tty=True."""
        assert status_label(False, force_tty=True) == "\033[91mmissing\033[0m"

    def test_plain_labels_when_not_tty(self) -> None:
        """Test labels carry no escape codes when force_tty=False."""
        assert status_label(True, force_tty=False) == "ok"
        assert status_label(False, force_tty=False) == "missing"

    def test_auto_detection_uses_is_tty(self) -> None:
        """Test that TTY detection decides when force_tty is None."""
        with patch("appconfigr.lib.ui.colors.is_tty", return_value=False):
            assert status_label(True) == "ok"
