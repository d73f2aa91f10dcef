from pathlib import Path

import yaml
from typer.testing import CliRunner

from tibia_crawler.app import app


def _quiet_logging(monkeypatch):
    monkeypatch.setattr("tibia_crawler.app.configure_logging", lambda verbose=False, log_dir=None: None)


def test_cli_config_init_and_show(tmp_path, monkeypatch):
    monkeypatch.setenv("TIBIA_CRAWLER_HOME", str(tmp_path))
    _quiet_logging(monkeypatch)
    monkeypatch.delenv("TIBIA_CRAWLER_BASE_URL", raising=False)
    runner = CliRunner()

    result = runner.invoke(app, ["config", "init"])
    assert result.exit_code == 0, result.stdout
    assert "Configuration written to" in result.stdout

    config_path = Path(tmp_path) / "config.yaml"
    assert config_path.exists()
    payload = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    assert payload["base_url"] == "https://www.tibia.com/"
    assert payload["server_save"] == {"start": "07:58:00", "end": "09:00:00"}

    result = runner.invoke(app, ["config", "init"])
    assert result.exit_code == 1
    assert "already exists" in result.stdout

    result = runner.invoke(app, ["config", "init", "--force"])
    assert result.exit_code == 0, result.stdout

    result = runner.invoke(app, ["config", "show"])
    assert result.exit_code == 0, result.stdout
    assert "base_url: https://www.tibia.com/" in result.stdout
    assert "maintenance_host: maintenance.tibia.com" in result.stdout


def test_cli_config_show_applies_base_url_override(tmp_path, monkeypatch):
    monkeypatch.setenv("TIBIA_CRAWLER_HOME", str(tmp_path))
    _quiet_logging(monkeypatch)
    monkeypatch.setenv("TIBIA_CRAWLER_BASE_URL", "http://127.0.0.1:8080/")

    result = CliRunner().invoke(app, ["config", "show"])

    assert result.exit_code == 0, result.stdout
    assert "base_url: http://127.0.0.1:8080/" in result.stdout


def test_cli_config_commands_open_no_http_client(tmp_path, monkeypatch):
    monkeypatch.setenv("TIBIA_CRAWLER_HOME", str(tmp_path))
    _quiet_logging(monkeypatch)

    def no_parser(*args, **kwargs):
        raise AssertionError("config commands must not build a parser")

    monkeypatch.setattr("tibia_crawler.app.BoostableBossesParser", no_parser)
    runner = CliRunner()

    assert runner.invoke(app, ["config", "init"]).exit_code == 0
    assert runner.invoke(app, ["config", "show"]).exit_code == 0


def test_cli_rejects_invalid_config(tmp_path, monkeypatch):
    monkeypatch.setenv("TIBIA_CRAWLER_HOME", str(tmp_path))
    monkeypatch.delenv("TIBIA_CRAWLER_BASE_URL", raising=False)
    _quiet_logging(monkeypatch)
    (Path(tmp_path) / "config.yaml").write_text("retries: -3\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["config", "show"])

    assert result.exit_code == 1
    assert "Invalid configuration at" in result.stdout
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_cli_rejects_unparseable_config(tmp_path, monkeypatch):
    monkeypatch.setenv("TIBIA_CRAWLER_HOME", str(tmp_path))
    _quiet_logging(monkeypatch)
    (Path(tmp_path) / "config.yaml").write_text("retries: [1,\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["boosted"])

    assert result.exit_code == 1
    assert "Invalid configuration at" in result.stdout
