"""Tests for provisioning/service.py."""

from unittest.mock import patch

import pytest

from enums import StepStatus
from errors import ProvisioningError
from models import CommandResult
from provisioning.service import log_service_status, restart_service


@patch("provisioning.service.time.sleep")
class TestRestartService:
    """Tests for restart_service function."""

    @patch("provisioning.service.execute")
    def test_enable_and_restart(self, mock_execute, _mock_sleep, ok_result) -> None:
        """Test enable, restart and status in order."""
        mock_execute.return_value = ok_result

        assert restart_service("pptpd") == StepStatus.DONE

        commands = [c.args[0] for c in mock_execute.call_args_list]
        assert commands == [
            ["systemctl", "enable", "pptpd"],
            ["systemctl", "restart", "pptpd"],
            ["systemctl", "--no-pager", "--full", "status", "pptpd"],
        ]

    @patch("provisioning.service.execute")
    def test_enable_failure_is_warning(self, mock_execute, _mock_sleep, ok_result, failed_result, caplog) -> None:
        """Test enable failure does not stop the restart."""
        mock_execute.side_effect = [failed_result, ok_result, ok_result]

        assert restart_service("pptpd") == StepStatus.FAILED
        assert "Could not enable pptpd" in caplog.text

    @patch("provisioning.service.execute")
    def test_restart_failure_is_fatal(self, mock_execute, _mock_sleep, ok_result) -> None:
        """Test restart failure raises."""
        mock_execute.side_effect = [
            ok_result,
            CommandResult(returncode=1, stderr="Job for pptpd.service failed"),
        ]

        with pytest.raises(ProvisioningError, match="Failed to restart pptpd"):
            restart_service("pptpd")


class TestLogServiceStatus:
    """Tests for log_service_status function."""

    @patch("provisioning.service.execute")
    def test_status_truncated(self, mock_execute, caplog) -> None:
        """Test only the first 15 lines are logged."""
        mock_execute.return_value = CommandResult(
            returncode=0,
            stdout="\n".join(f"line{i}" for i in range(30)),
        )

        with caplog.at_level("DEBUG"):
            log_service_status("pptpd")

        assert "line14" in caplog.text
        assert "line15" not in caplog.text

    @patch("provisioning.service.execute")
    def test_status_failure_ignored(self, mock_execute, failed_result) -> None:
        """Test status failure does not raise."""
        mock_execute.return_value = failed_result

        log_service_status("pptpd")
