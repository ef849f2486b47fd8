"""Test the command line entry point."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from price_alert.app import main

GET = "price_alert.services.price_check.pipeline.requests.get"
DESKTOP_NOTIFICATION = "price_alert.services.notifications.desktop_notifier.notification"


def _config(tmp_path: Path) -> Path:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "products": [
                    {
                        "price": 3500.0,
                        "product_name": "Sofa",
                        "product_url": "https://thebrick.example/sofa",
                        "store_key": "thebrick",
                    }
                ],
                "stores": [{"store_key": "thebrick", "selector": "#productPrice"}],
            }
        ),
        encoding="utf-8",
    )
    return path


def _response() -> MagicMock:
    response = MagicMock()
    response.status_code = 200
    response.text = '<span id="productPrice">$3,499.97</span>'
    return response


def test_main_returns_1_when_config_missing(tmp_path: Path) -> None:
    """Test that configuration errors end the process with status 1."""
    assert main(["--config", str(tmp_path / "absent.json")]) == 1


def test_main_shows_desktop_notification(tmp_path: Path) -> None:
    """Test a full run that alerts through the desktop backend."""
    with patch(GET, return_value=_response()), patch(DESKTOP_NOTIFICATION) as mock_notification:
        status = main(["--config", str(_config(tmp_path))])

    assert status == 0
    mock_notification.notify.assert_called_once()
    assert "3499.97" in mock_notification.notify.call_args.kwargs["message"]


def test_main_dry_run_skips_desktop(tmp_path: Path) -> None:
    """Test that --dry-run never touches the desktop backend."""
    with patch(GET, return_value=_response()), patch(DESKTOP_NOTIFICATION) as mock_notification:
        status = main(["--config", str(_config(tmp_path)), "--dry-run"])

    assert status == 0
    mock_notification.notify.assert_not_called()


def test_invalid_log_level_is_rejected_by_argparse(tmp_path: Path, capsys) -> None:
    """Test that an unknown level is a usage error, not a traceback."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(_config(tmp_path)), "--log-level", "LOUD"])

    assert exc_info.value.code == 2
    assert "--log-level" in capsys.readouterr().err


def test_log_level_is_case_insensitive(tmp_path: Path) -> None:
    """Test that lowercase level names are accepted."""
    with patch(GET, return_value=_response()), patch(DESKTOP_NOTIFICATION):
        assert main(["--config", str(_config(tmp_path)), "--dry-run", "--log-level", "debug"]) == 0
