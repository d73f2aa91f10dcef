from __future__ import annotations

from structlog.testing import capture_logs

from tibia_crawler.logging_conf import component_logger, logging_dict


def test_component_logger_binds_component() -> None:
    with capture_logs() as captured:
        component_logger("boostable_bosses").info("cache_refreshed", bosses=91)

    assert captured == [
        {"component": "boostable_bosses", "bosses": 91, "event": "cache_refreshed", "log_level": "info"}
    ]


def test_logging_dict_without_log_dir_is_console_only() -> None:
    config = logging_dict("INFO")

    assert list(config["handlers"]) == ["console"]
    assert config["loggers"]["tibia_crawler"]["handlers"] == ["console"]


def test_logging_dict_routes_file_pair(tmp_path) -> None:
    config = logging_dict("DEBUG", tmp_path)
    handlers = config["handlers"]

    assert config["loggers"]["tibia_crawler"] == {
        "handlers": ["console", "crawler", "error"],
        "level": "DEBUG",
        "propagate": False,
    }
    assert handlers["crawler"]["filename"] == str(tmp_path / "crawler.log")
    assert handlers["crawler"]["level"] == "INFO"
    assert handlers["error"]["filename"] == str(tmp_path / "error.log")
    assert handlers["error"]["level"] == "ERROR"
