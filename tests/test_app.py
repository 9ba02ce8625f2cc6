"""
Tests for the command line interface.
"""

import pytest

from jobboard.app import main


class TestCli:
    """Test CLI commands against a temporary database."""

    def test_version(self, capsys):
        main(["--version"])
        assert capsys.readouterr().out.strip() == "0.1.0"

    def test_init_db(self, tmp_path, capsys):
        db_path = tmp_path / "cli" / "jobs.db"

        main(["--db-url", f"sqlite:///{db_path}", "init-db"])

        assert db_path.exists()
        assert "Initialized database" in capsys.readouterr().out

    def test_create_and_get(self, db_url, companies, capsys):
        main(["--db-url", db_url, "create", "--title", "Engineer",
              "--company-handle", "c1", "--salary", "1000", "--equity", "0.2"])
        out = capsys.readouterr().out
        assert '"title": "Engineer"' in out
        assert '"equity": "0.2"' in out

        main(["--db-url", db_url, "get", "1"])
        out = capsys.readouterr().out
        assert '"companyHandle": "c1"' in out
        assert '"salary": 1000' in out

    def test_create_invalid_input(self, db_url, companies, capsys):
        """Validation errors should exit with status 2."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--db-url", db_url, "create", "--title", "Engineer",
                  "--company-handle", "c1", "--equity", "3"])

        assert exc_info.value.code == 2
        assert "equity" in capsys.readouterr().out

    def test_create_unknown_company(self, db_url, companies):
        with pytest.raises(SystemExit) as exc_info:
            main(["--db-url", db_url, "create", "--title", "Engineer",
                  "--company-handle", "no-such-co"])

        assert "Company does not exist: no-such-co" in str(exc_info.value.code)

    def test_list_empty(self, db_url, capsys):
        main(["--db-url", db_url, "list"])
        assert "No jobs." in capsys.readouterr().out

    def test_update_and_remove(self, db_url, companies, capsys):
        main(["--db-url", db_url, "create", "--title", "Engineer", "--company-handle", "c1"])
        main(["--db-url", db_url, "update", "1", "--salary", "500"])
        assert '"salary": 500' in capsys.readouterr().out

        main(["--db-url", db_url, "remove", "1"])
        assert '"deleted": 1' in capsys.readouterr().out

        with pytest.raises(SystemExit) as exc_info:
            main(["--db-url", db_url, "get", "1"])
        assert "No job: 1" in str(exc_info.value.code)

    def test_update_without_fields(self, db_url, companies):
        with pytest.raises(SystemExit) as exc_info:
            main(["--db-url", db_url, "update", "1"])
        assert exc_info.value.code == 2


class TestCliEnv:
    """Test that settings from .env reach the CLI."""

    def test_log_settings_from_env_file(self, db_url, tmp_path, monkeypatch):
        """LOG_DIR and LOG_LEVEL in .env should configure the logger."""
        monkeypatch.delenv("LOG_DIR", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        log_dir = tmp_path / "logs"
        (tmp_path / ".env").write_text(f"LOG_DIR={log_dir}\nLOG_LEVEL=DEBUG\n")
        monkeypatch.chdir(tmp_path)

        with pytest.raises(SystemExit):
            main(["--db-url", db_url, "get", "0"])

        log_files = list(log_dir.glob("*.log"))
        assert len(log_files) == 1
        assert "No job: 0" in log_files[0].read_text()
