"""
Tests for infrastructure components (config loading, logging setup).
"""

import logging

import pytest
import yaml


class TestConfigLoading:
    """Tests for configuration loading."""

    def test_load_project_config(self):
        """Test the project's config.yaml loads."""
        from snake_overlay.utils.config_loader import load_config

        config = load_config()

        assert config.display.cell_size > 0
        assert config.display.render_fps > 0
        assert config.logging.level == "INFO"

    def test_missing_file_uses_defaults(self, tmp_path):
        from snake_overlay.utils.config_loader import Config, load_config

        config = load_config(str(tmp_path / "missing.yaml"))

        assert config == Config()

    def test_empty_file_uses_defaults(self, tmp_path):
        from snake_overlay.utils.config_loader import Config, load_config

        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_config(str(path)) == Config()

    def test_values_and_unknown_keys(self, tmp_path):
        """Test known keys are read and unknown keys are ignored."""
        from snake_overlay.utils.config_loader import load_config

        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({
            "display": {"cell_size": 30, "title": "Snek", "grid_size": 40},
            "logging": {"level": "DEBUG", "log_file": "logs/snake.log"},
            "sound": {"enabled": True},
        }))

        config = load_config(str(path))

        assert config.display.cell_size == 30
        assert config.display.title == "Snek"
        assert config.display.padding == 40
        assert not hasattr(config.display, "grid_size")
        assert config.logging.level == "DEBUG"
        assert config.logging.log_file == "logs/snake.log"

    @pytest.mark.parametrize("section,values", [
        ("display", {"cell_size": 0}),
        ("display", {"render_fps": -5}),
        ("display", {"padding": -1}),
        ("display", {"cell_size": "big"}),
        ("logging", {"level": "LOUD"}),
    ])
    def test_invalid_values_raise(self, tmp_path, section, values):
        from snake_overlay.utils.config_loader import load_config

        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({section: values}))

        with pytest.raises(ValueError):
            load_config(str(path))

    def test_save_then_load(self, tmp_path):
        from snake_overlay.utils.config_loader import Config, load_config, save_config

        config = Config()
        config.display.cell_size = 18
        config.logging.level = "WARNING"
        path = tmp_path / "saved.yaml"

        save_config(config, str(path))

        assert load_config(str(path)) == config


class TestLoggingSetup:
    """Tests for setup_logging."""

    def test_rich_handler_installed(self):
        from rich.logging import RichHandler
        from snake_overlay.utils.config_loader import LoggingConfig
        from snake_overlay.utils.logging_setup import setup_logging

        logger = setup_logging(LoggingConfig(level="debug"))

        assert logger.name == "snake_overlay"
        assert logger.level == logging.DEBUG
        assert [type(h) for h in logger.handlers] == [RichHandler]

    def test_repeat_setup_replaces_handlers(self):
        from snake_overlay.utils.logging_setup import setup_logging

        setup_logging()
        logger = setup_logging()

        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        """Test package log records reach the configured file."""
        from snake_overlay.game.snake_game import SnakeGame
        from snake_overlay.utils.config_loader import LoggingConfig
        from snake_overlay.utils.logging_setup import setup_logging

        log_file = tmp_path / "logs" / "snake.log"
        logger = setup_logging(LoggingConfig(level="INFO", log_file=str(log_file)))

        SnakeGame().reset()
        for handler in logger.handlers:
            handler.flush()

        assert "Game reset" in log_file.read_text()

        setup_logging()


class TestConfigShapes:
    """Tests for malformed config sections and values."""

    @pytest.mark.parametrize("display", [5, [1], "big"])
    def test_non_mapping_section_raises(self, tmp_path, display):
        """Test a section that is not a mapping is reported as a bad value."""
        from snake_overlay.utils.config_loader import load_config

        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"display": display}))

        with pytest.raises(ValueError, match="mapping"):
            load_config(str(path))

    @pytest.mark.parametrize("values", [
        {"cell_size": True},
        {"render_fps": True},
        {"padding": False},
    ])
    def test_boolean_numbers_rejected(self, tmp_path, values):
        from snake_overlay.utils.config_loader import load_config

        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"display": values}))

        with pytest.raises(ValueError):
            load_config(str(path))

    def test_validate_log_level(self):
        from snake_overlay.utils.config_loader import validate_log_level

        assert validate_log_level("debug") == "DEBUG"
        with pytest.raises(ValueError):
            validate_log_level("LOUD")


class TestPlayScript:
    """Tests for the play.py command line."""

    def test_bad_log_level_exits_with_error(self, mock_pygame_module, capsys):
        """Test an unknown --log-level is reported instead of raising."""
        import play

        assert play.main(["--log-level", "LOUD"]) == 2
        assert "error:" in capsys.readouterr().err

    def test_bad_config_exits_with_error(self, mock_pygame_module, tmp_path, capsys):
        import play

        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"display": {"cell_size": 0}}))

        assert play.main(["--config", str(path)]) == 2
        assert "cell_size" in capsys.readouterr().err
