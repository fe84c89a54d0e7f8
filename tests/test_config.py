"""Tests for menu settings and the configuration loader."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from structmenu import ConfigError, MenuSettings, load_settings


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_default_settings():
    """Settings should have usable defaults."""
    settings = MenuSettings()

    assert settings.nav_cursor_marker == "> "
    assert settings.edit_cursor_marker == ">>"
    assert settings.caret_symbol == "|"
    assert settings.advance_on_commit is True
    assert settings.header_text == ""
    assert settings.marker_width == 2


@pytest.mark.parametrize("name", ["nav_cursor_marker", "edit_cursor_marker", "caret_symbol"])
def test_empty_markers_rejected(name):
    """Markers and caret must not be empty."""
    with pytest.raises(ValidationError):
        MenuSettings(**{name: ""})


def test_assignment_validated():
    """Assignments are validated too."""
    settings = MenuSettings()
    with pytest.raises(ValidationError):
        settings.caret_symbol = ""


def test_marker_width_uses_widest_marker():
    settings = MenuSettings(nav_cursor_marker=">", edit_cursor_marker="-->")
    assert settings.marker_width == 3


def test_marker_width_counts_terminal_cells():
    """Double-width characters take two cells."""
    settings = MenuSettings(nav_cursor_marker="都", edit_cursor_marker=">")
    assert settings.marker_width == 2


def test_unknown_keys_ignored():
    """Extra keys in a config file do not break loading."""
    settings = MenuSettings(caret_symbol="_", theme="dark")
    assert settings.caret_symbol == "_"


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_file_gives_defaults(self, tmp_path):
        """A missing config file falls back to defaults."""
        settings = load_settings(tmp_path / "missing.yaml", tmp_path / ".env")
        assert settings == MenuSettings()

    def test_empty_file_gives_defaults(self, tmp_path):
        config = _write(tmp_path / "menu.yaml", "")
        assert load_settings(config, tmp_path / ".env") == MenuSettings()

    def test_top_level_keys(self, tmp_path):
        """Settings may sit at the top level of the file."""
        config = _write(
            tmp_path / "menu.yaml",
            "caret_symbol: _\nadvance_on_commit: false\n",
        )
        settings = load_settings(config, tmp_path / ".env")
        assert settings.caret_symbol == "_"
        assert settings.advance_on_commit is False
        assert settings.nav_cursor_marker == "> "

    def test_menu_section(self, tmp_path):
        """Settings may sit under a menu: key."""
        config = _write(
            tmp_path / "menu.yaml",
            'menu:\n  header_text: "Edit profile"\n  edit_cursor_marker: "=>"\n',
        )
        settings = load_settings(config, tmp_path / ".env")
        assert settings.header_text == "Edit profile"
        assert settings.edit_cursor_marker == "=>"

    def test_env_var_expansion_from_dotenv(self, tmp_path, monkeypatch):
        """${VAR} values are read from the environment after loading .env."""
        # Registered so teardown removes whatever load_dotenv sets.
        monkeypatch.setenv("STRUCTMENU_TEST_HEADER", "placeholder")
        monkeypatch.delenv("STRUCTMENU_TEST_HEADER")

        env_file = _write(tmp_path / ".env", "STRUCTMENU_TEST_HEADER=Hello there\n")
        config = _write(
            tmp_path / "menu.yaml",
            "menu:\n  header_text: ${STRUCTMENU_TEST_HEADER}\n",
        )
        settings = load_settings(config, env_file)
        assert settings.header_text == "Hello there"

    def test_unset_env_var_expands_to_empty(self, tmp_path, monkeypatch):
        monkeypatch.delenv("STRUCTMENU_TEST_UNSET", raising=False)
        config = _write(tmp_path / "menu.yaml", "header_text: ${STRUCTMENU_TEST_UNSET}\n")
        assert load_settings(config, tmp_path / ".env").header_text == ""

    def test_invalid_yaml(self, tmp_path):
        """Malformed YAML raises ConfigError."""
        config = _write(tmp_path / "menu.yaml", "menu: [unclosed\n")
        with pytest.raises(ConfigError) as exc_info:
            load_settings(config, tmp_path / ".env")
        assert exc_info.value.path == str(config)

    def test_non_mapping_file(self, tmp_path):
        config = _write(tmp_path / "menu.yaml", "- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_settings(config, tmp_path / ".env")

    def test_invalid_value(self, tmp_path):
        """Values that fail validation raise ConfigError."""
        config = _write(tmp_path / "menu.yaml", 'caret_symbol: ""\n')
        with pytest.raises(ConfigError, match="caret_symbol"):
            load_settings(config, tmp_path / ".env")
