"""
Tests for blkls.core.logging module.
"""

from unittest.mock import Mock

import pytest

from blkls.core.logging import OperationLogger


class TestOperationLogger:
    """Tests for OperationLogger."""

    def test_success_logs_start_and_completion(self) -> None:
        logger = Mock()
        with OperationLogger("block device scan", logger, root="/sys/block") as op:
            op.update(device_count=3)

        assert logger.debug.call_count == 2
        args, kwargs = logger.debug.call_args
        assert args == ("Completed block device scan",)
        assert kwargs["device_count"] == 3
        assert kwargs["root"] == "/sys/block"

    def test_failure_logged_at_debug_and_propagates(self) -> None:
        logger = Mock()
        with pytest.raises(RuntimeError):
            with OperationLogger("block device scan", logger):
                raise RuntimeError("boom")

        args, kwargs = logger.debug.call_args
        assert args == ("Failed block device scan",)
        assert kwargs["error_type"] == "RuntimeError"
        assert kwargs["error"] == "boom"
        logger.error.assert_not_called()
