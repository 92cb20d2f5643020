"""Unit tests for the configuration loader."""

from pathlib import Path

import pytest

from doorpanels.application.config import (
    ConfigError,
    DoorPanelConfiguration,
    load_config,
    load_config_from_dict,
)
from doorpanels.application.config.loader import _format_json_path
from doorpanels.domain.value_objects import ProportionType

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


class TestLoadConfig:
    """Tests for load_config."""

    def test_valid_minimal(self) -> None:
        config = load_config(FIXTURES_PATH / "valid_minimal.json")

        assert isinstance(config, DoorPanelConfiguration)
        assert config.door.width == 103.0
        assert config.door.height == 201.0

    def test_valid_full(self) -> None:
        config = load_config(FIXTURES_PATH / "valid_full.json")

        assert config.schema_version == "1.1"
        assert config.proportion.type == ProportionType.CLASSIC
        assert config.proportion.panel_count == 3
        assert config.peephole is not None
        assert config.peephole.auto_center is True
        assert config.output.format == "json"

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")

        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_invalid_json(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "invalid_json.json")

        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 3
        assert "Invalid JSON" in str(error)

    def test_unknown_field(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "unknown_field.json")

        error = exc_info.value
        assert error.error_type == "validation"
        assert any(d["path"] == "handle" for d in error.details)
        assert error.path == FIXTURES_PATH / "unknown_field.json"

    def test_invalid_values_report_every_field(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "invalid_values.json")

        paths = {d["path"] for d in exc_info.value.details}
        assert "door.width" in paths
        assert "proportion.panel_count" in paths
        assert "proportion.type" in paths
        assert "door.width" in str(exc_info.value)

    def test_unsupported_version(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "unsupported_version.json")

        assert exc_info.value.details[0]["path"] == "schema_version"

    def test_directory_is_a_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)

        assert exc_info.value.error_type in ("file_read_error", "permission_denied")


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict."""

    def test_valid(self) -> None:
        config = load_config_from_dict(
            {"schema_version": "1.0", "door": {"width": 90, "height": 210}}
        )
        assert config.door.width == 90.0

    def test_missing_door(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "1.0"})

        assert exc_info.value.error_type == "validation"
        assert exc_info.value.path is None
        assert exc_info.value.details[0]["path"] == "door"

    def test_cross_field_error_reported_at_root(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(
                {
                    "schema_version": "1.0",
                    "door": {"width": 103, "height": 201},
                    "peephole": {"distance_from_top": 199},
                }
            )

        assert exc_info.value.details[0]["path"] == ""
        assert "(root)" in str(exc_info.value)


class TestFormatJsonPath:
    """Tests for JSON path formatting."""

    def test_nested(self) -> None:
        assert _format_json_path(("door", "width")) == "door.width"

    def test_index(self) -> None:
        assert _format_json_path(("items", 0, "height")) == "items[0].height"

    def test_empty(self) -> None:
        assert _format_json_path(()) == ""
