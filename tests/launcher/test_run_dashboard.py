"""
Tests for the dashboard launcher command line.
"""

import sys

from scripts.run_dashboard import APP_PATH, build_command


class TestBuildCommand:
    """Test the streamlit invocation."""

    def test_app_path_exists(self):
        assert APP_PATH.exists()
        assert APP_PATH.name == "app.py"

    def test_runs_streamlit_module(self):
        cmd = build_command(8600, headless=False)

        assert cmd[:5] == [sys.executable, "-m", "streamlit", "run", str(APP_PATH)]
        assert cmd[-2:] == ["--server.port", "8600"]
        assert "--server.headless" not in cmd

    def test_headless(self):
        cmd = build_command(8501, headless=True)

        assert cmd[-2:] == ["--server.headless", "true"]
