from __future__ import annotations

from pathlib import Path
from typing import Any, Dict
from unittest.mock import patch

import pytest

from upgradepick.config import (
    UpgradePickConfig,
    _parse_section,
    _pyproject_has_section,
    _read_toml,
    discover_config_file,
    load_config,
)
from upgradepick.exceptions import ConfigError


@pytest.mark.unit
class TestUpgradePickConfig:
    """Tests for UpgradePickConfig dataclass."""

    def test_default_initialization(self) -> None:
        """Test defaults match the standard layout."""
        config = UpgradePickConfig()

        assert config.page_margin == 2
        assert config.column_widths == (50, 10, 3, 10, 100)
        assert config.source_path is None

    def test_to_log_dict(self) -> None:
        """Test to_log_dict omits the source path."""
        config = UpgradePickConfig(
            page_margin=4,
            column_widths=(40, 10, 3, 10, 80),
            source_path=Path("/test/upgradepick.toml"),
        )

        assert config.to_log_dict() == {
            "page_margin": 4,
            "column_widths": [40, 10, 3, 10, 80],
        }


@pytest.mark.unit
class TestDiscoverConfigFile:
    """Tests for discover_config_file."""

    def test_explicit_path_priority(self, tmp_path: Path) -> None:
        """Test an explicit path wins over discoverable files."""
        config_file = tmp_path / "custom.toml"
        config_file.write_text("[upgradepick]\n", encoding="utf-8")
        (tmp_path / "upgradepick.toml").write_text("[upgradepick]\n", encoding="utf-8")

        with patch("upgradepick.config.Path.cwd", return_value=tmp_path):
            result = discover_config_file(config_file)

        assert result == config_file.resolve()

    def test_explicit_path_not_found(self, tmp_path: Path) -> None:
        """Test a missing explicit path raises ConfigError."""
        with pytest.raises(ConfigError, match="not found"):
            discover_config_file(tmp_path / "nonexistent.toml")

    def test_discovers_own_file(self, tmp_path: Path) -> None:
        """Test upgradepick.toml in the working directory is found."""
        config_file = tmp_path / "upgradepick.toml"
        config_file.write_text("[upgradepick]\n", encoding="utf-8")

        with patch("upgradepick.config.Path.cwd", return_value=tmp_path):
            assert discover_config_file() == config_file

    def test_discovers_pyproject_with_section(self, tmp_path: Path) -> None:
        """Test pyproject.toml with [tool.upgradepick] is found."""
        config_file = tmp_path / "pyproject.toml"
        config_file.write_text("[tool.upgradepick]\npage_margin = 3\n", encoding="utf-8")

        with patch("upgradepick.config.Path.cwd", return_value=tmp_path):
            assert discover_config_file() == config_file

    def test_ignores_pyproject_without_section(self, tmp_path: Path) -> None:
        """Test pyproject.toml without our section is skipped."""
        (tmp_path / "pyproject.toml").write_text("[tool.other]\nkey = 'v'\n", encoding="utf-8")

        with patch("upgradepick.config.Path.cwd", return_value=tmp_path):
            assert discover_config_file() is None

    def test_precedence_order(self, tmp_path: Path) -> None:
        """Test upgradepick.toml is preferred over pyproject.toml."""
        own = tmp_path / "upgradepick.toml"
        own.write_text("[upgradepick]\n", encoding="utf-8")
        (tmp_path / "pyproject.toml").write_text("[tool.upgradepick]\n", encoding="utf-8")

        with patch("upgradepick.config.Path.cwd", return_value=tmp_path):
            assert discover_config_file() == own


@pytest.mark.unit
class TestPyprojectHasSection:
    """Tests for _pyproject_has_section."""

    def test_true_when_present(self, tmp_path: Path) -> None:
        """Test returns True when the section exists."""
        config_file = tmp_path / "pyproject.toml"
        config_file.write_text("[tool.upgradepick]\n", encoding="utf-8")

        assert _pyproject_has_section(config_file) is True

    def test_false_on_errors(self, tmp_path: Path) -> None:
        """Test invalid or missing files count as having no section."""
        config_file = tmp_path / "pyproject.toml"
        config_file.write_text("invalid ][[", encoding="utf-8")

        assert _pyproject_has_section(config_file) is False
        assert _pyproject_has_section(tmp_path / "nonexistent.toml") is False


@pytest.mark.unit
class TestReadToml:
    """Tests for _read_toml."""

    def test_reads_valid_toml(self, tmp_path: Path) -> None:
        """Test valid TOML is parsed to a dictionary."""
        toml_file = tmp_path / "test.toml"
        toml_file.write_text("[upgradepick]\npage_margin = 1\n", encoding="utf-8")

        assert _read_toml(toml_file) == {"upgradepick": {"page_margin": 1}}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test invalid TOML raises ConfigError."""
        toml_file = tmp_path / "invalid.toml"
        toml_file.write_text("invalid ][[ toml", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            _read_toml(toml_file)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test an unreadable file raises ConfigError."""
        with pytest.raises(ConfigError, match="Cannot read"):
            _read_toml(tmp_path / "nonexistent.toml")


@pytest.mark.unit
class TestParseSection:
    """Tests for _parse_section validation."""

    def test_empty_section(self) -> None:
        """Test an empty section gives defaults."""
        result = _parse_section({}, config_path="test.toml")

        assert result == UpgradePickConfig()

    def test_all_options(self) -> None:
        """Test every option is applied."""
        result = _parse_section(
            {"page_margin": 0, "column_widths": [30, 8, 3, 8, 60]},
            config_path="test.toml",
        )

        assert result.page_margin == 0
        assert result.column_widths == (30, 8, 3, 8, 60)

    def test_unknown_keys(self) -> None:
        """Test unknown keys are rejected by name."""
        with pytest.raises(ConfigError, match="Unknown configuration keys: bar, foo"):
            _parse_section({"foo": 1, "bar": 2}, config_path="test.toml")

    @pytest.mark.parametrize(
        "value",
        [-1, "2", 1.5, True],
        ids=["negative", "string", "float", "bool"],
    )
    def test_invalid_page_margin(self, value: Any) -> None:
        """Test page_margin must be a non-negative integer."""
        with pytest.raises(ConfigError, match="page_margin must be") as exc_info:
            _parse_section({"page_margin": value}, config_path="test.toml")

        assert exc_info.value.option == "page_margin"

    @pytest.mark.parametrize(
        "section",
        [
            {"column_widths": [50, 10, 3, 10]},
            {"column_widths": "50,10,3,10,100"},
            {"column_widths": [50, 10, 2, 10, 100]},
            {"column_widths": [50, 10, "3", 10, 100]},
        ],
        ids=["too-short", "not-a-list", "too-narrow", "non-integer"],
    )
    def test_invalid_column_widths(self, section: Dict[str, Any]) -> None:
        """Test column_widths must be five integers of at least 3."""
        with pytest.raises(ConfigError, match="column_widths") as exc_info:
            _parse_section(section, config_path="test.toml")

        assert exc_info.value.option == "column_widths"


@pytest.mark.unit
class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_when_no_config(self, tmp_path: Path) -> None:
        """Test defaults are returned when nothing is found."""
        with patch("upgradepick.config.Path.cwd", return_value=tmp_path):
            result = load_config()

        assert result == UpgradePickConfig()
        assert result.source_path is None

    def test_loads_own_file(self, tmp_path: Path) -> None:
        """Test settings are read from upgradepick.toml."""
        config_file = tmp_path / "upgradepick.toml"
        config_file.write_text("[upgradepick]\npage_margin = 5\n", encoding="utf-8")

        with patch("upgradepick.config.Path.cwd", return_value=tmp_path):
            result = load_config()

        assert result.page_margin == 5
        assert result.source_path == config_file

    def test_loads_pyproject(self, tmp_path: Path) -> None:
        """Test settings are read from [tool.upgradepick]."""
        config_file = tmp_path / "pyproject.toml"
        config_file.write_text(
            "[tool.upgradepick]\ncolumn_widths = [20, 8, 3, 8, 40]\n",
            encoding="utf-8",
        )

        with patch("upgradepick.config.Path.cwd", return_value=tmp_path):
            result = load_config()

        assert result.column_widths == (20, 8, 3, 8, 40)
        assert result.source_path == config_file

    def test_loads_explicit_path(self, tmp_path: Path) -> None:
        """Test an explicit path is loaded and resolved."""
        config_file = tmp_path / "custom.toml"
        config_file.write_text("[upgradepick]\npage_margin = 9\n", encoding="utf-8")

        result = load_config(config_file)

        assert result.page_margin == 9
        assert result.source_path == config_file.resolve()

    def test_empty_section(self, tmp_path: Path) -> None:
        """Test a file with an empty section keeps defaults but records its path."""
        config_file = tmp_path / "upgradepick.toml"
        config_file.write_text("[upgradepick]\n", encoding="utf-8")

        with patch("upgradepick.config.Path.cwd", return_value=tmp_path):
            result = load_config()

        assert result.page_margin == 2
        assert result.source_path == config_file

    def test_invalid_values(self, tmp_path: Path) -> None:
        """Test validation errors propagate."""
        config_file = tmp_path / "upgradepick.toml"
        config_file.write_text("[upgradepick]\npage_margin = 'x'\n", encoding="utf-8")

        with patch("upgradepick.config.Path.cwd", return_value=tmp_path):
            with pytest.raises(ConfigError):
                load_config()
