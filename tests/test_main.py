"""Tests for the application entry point."""

from unittest.mock import patch

from lavender_stays import main as entry_point
from lavender_stays.config import settings


class TestMain:
    def test_serves_initialized_back_office(self, monkeypatch):
        monkeypatch.setattr(settings.storage, "backend", "memory")

        with patch("lavender_stays.main.uvicorn.run") as mock_run:
            exit_code = entry_point.main()

        assert exit_code == 0
        app = mock_run.call_args.args[0]
        assert len(app.state.office.list_rooms()) == 4
        assert mock_run.call_args.kwargs["port"] == settings.api.port

    def test_incomplete_s3_config_exits_early(self, monkeypatch):
        monkeypatch.setattr(settings.storage, "backend", "s3")
        monkeypatch.setattr(settings.storage, "s3_bucket", "")

        with patch("lavender_stays.main.uvicorn.run") as mock_run:
            assert entry_point.main() == 1

        mock_run.assert_not_called()

    def test_startup_failure_returns_error_code(self, monkeypatch):
        monkeypatch.setattr(settings.storage, "backend", "memory")

        with patch("lavender_stays.main.uvicorn.run", side_effect=OSError("port in use")):
            assert entry_point.main() == 1
