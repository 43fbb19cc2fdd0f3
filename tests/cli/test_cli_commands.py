"""Tests for the scriptimport command line interface."""

import json
import logging

import pytest
import yaml

from scriptimport import __version__


@pytest.fixture(autouse=True)
def restore_root_handlers():
    """Undo logging reconfiguration done by --config, --verbose and --debug."""
    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_handlers = root_logger.handlers.copy()
    yield
    for handler in root_logger.handlers.copy():
        root_logger.removeHandler(handler)
    root_logger.setLevel(original_level)
    for handler in original_handlers:
        root_logger.addHandler(handler)


@pytest.fixture
def empty_script(tmp_path):
    """A text file with no screenplay structure."""
    path = tmp_path / "notes.txt"
    path.write_text("Remember to buy milk.\nCall the agent.\n", encoding="utf-8")
    return path


class TestParseCommand:
    """Test scriptimport parse."""

    def test_json_output(self, cli_invoke, script_copy):
        """Test --json prints the parsed script."""
        result = cli_invoke("parse", str(script_copy("coffee_shop.fountain")), "--json")
        result.assert_success()

        data = result.parse_json()
        assert data["characters"] == ["JOHN", "SARAH"]
        assert [s["sceneNumber"] for s in data["scenes"]] == ["1", "2"]
        assert data["scenes"][0]["intExt"] == "INT"
        assert data["scenes"][1]["characterNames"] == ["SARAH"]

    def test_fdx_json_output(self, cli_invoke, script_copy):
        """Test Final Draft files parse from the command line."""
        result = cli_invoke("parse", str(script_copy("coffee_shop.fdx")), "-f", "json")
        result.assert_success()

        data = result.parse_json()
        assert data["characters"] == ["JOHN", "Sarah"]
        assert [s["sceneNumber"] for s in data["scenes"]] == ["1", "2", "12A"]

    def test_table_output(self, cli_invoke, script_copy):
        """Test the default table view."""
        result = cli_invoke("parse", str(script_copy("numbered.txt")))
        result.assert_success()
        result.assert_contains("Scenes (3)", "Characters (2)", "DELIA", "MARCUS")

    def test_csv_output(self, cli_invoke, script_copy):
        """Test CSV output starts with the header row."""
        result = cli_invoke(
            "parse", str(script_copy("numbered.txt")), "--format", "csv"
        )
        result.assert_success()

        lines = result.stdout.strip().splitlines()
        assert lines[0] == "#,Int/Ext,Location,Time,Characters,Description"
        assert lines[1].startswith("12A,INT,WAREHOUSE,NIGHT,")

    def test_markdown_output(self, cli_invoke, script_copy):
        """Test Markdown output lists the characters."""
        result = cli_invoke(
            "parse", str(script_copy("coffee_shop.fountain")), "-f", "markdown"
        )
        result.assert_success()
        result.assert_contains("| # | Int/Ext |", "**Characters:** JOHN, SARAH")

    def test_empty_script_warns(self, cli_invoke, empty_script):
        """Test a script with no structure still exits cleanly."""
        result = cli_invoke("parse", str(empty_script))
        result.assert_success()
        result.assert_contains("No scenes or characters found")

    def test_missing_file(self, cli_invoke, tmp_path):
        """Test a missing file is reported."""
        result = cli_invoke("parse", str(tmp_path / "absent.fountain"))
        result.assert_failure(exit_code=1)
        result.assert_contains("File does not exist")

    def test_unsupported_extension(self, cli_invoke, tmp_path):
        """Test unsupported files are refused before parsing."""
        path = tmp_path / "script.pdf"
        path.write_bytes(b"%PDF-1.4")

        result = cli_invoke("parse", str(path))
        result.assert_failure(exit_code=1)
        result.assert_contains("Invalid file extension: .pdf")

    def test_malformed_fdx_json_error(self, cli_invoke, tmp_path):
        """Test unreadable markup gives a JSON error response."""
        path = tmp_path / "broken.fdx"
        path.write_text("<FinalDraft><Content>", encoding="utf-8")

        result = cli_invoke("parse", str(path), "--json")
        result.assert_failure(exit_code=1)

        error = result.parse_json()
        assert error["success"] is False
        assert error["error"] == "Failed to parse Final Draft document"
        assert "hint" in error

    def test_malformed_fdx_text_error(self, cli_invoke, tmp_path):
        """Test unreadable markup shows the error and its hint."""
        path = tmp_path / "broken.fdx"
        path.write_text("not xml at all", encoding="utf-8")

        result = cli_invoke("parse", str(path))
        result.assert_failure(exit_code=1)
        result.assert_contains("Error: Failed to parse Final Draft document", "Hint:")


class TestConvertCommand:
    """Test scriptimport convert."""

    def test_full_payload(self, cli_invoke, script_copy):
        """Test every scene and character is converted by default."""
        result = cli_invoke("convert", str(script_copy("coffee_shop.fountain")))
        result.assert_success()

        payload = result.parse_json()
        assert payload["characters"] == [
            {"name": "JOHN", "gender": "Other", "castType": "C"},
            {"name": "SARAH", "gender": "Other", "castType": "C"},
        ]
        assert payload["scenes"][0]["scriptLocation"] == "INT. COFFEE SHOP"
        assert payload["scenes"][1]["scriptLocation"] == "EXT. ROOFTOP"
        assert payload["scenes"][0]["shootDay"] is None
        assert payload["characterSceneMap"] == {"1": ["JOHN"], "2": ["SARAH"]}

    def test_selection(self, cli_invoke, script_copy):
        """Test --scene and --character narrow the payload."""
        result = cli_invoke(
            "convert",
            str(script_copy("numbered.txt")),
            "--scene",
            "12A",
            "--character",
            "DELIA",
        )
        result.assert_success()

        payload = result.parse_json()
        assert [s["sceneNumber"] for s in payload["scenes"]] == ["12A"]
        assert [c["name"] for c in payload["characters"]] == ["DELIA"]
        assert payload["characterSceneMap"] == {"12A": ["DELIA"]}

    def test_output_file(self, cli_invoke, script_copy, tmp_path):
        """Test --output writes the payload to disk."""
        target = tmp_path / "payload.json"
        result = cli_invoke(
            "convert", str(script_copy("coffee_shop.fdx")), "--output", str(target)
        )
        result.assert_success()
        result.assert_contains("Wrote 3 scenes")

        payload = json.loads(target.read_text(encoding="utf-8"))
        assert [s["scriptLocation"] for s in payload["scenes"]] == [
            "INT. COFFEE SHOP",
            "THE ROOFTOP",
            "EXT. ALLEY",
        ]

    def test_unknown_scene_warns(self, cli_invoke, script_copy, tmp_path):
        """Test scene numbers missing from the script are reported."""
        target = tmp_path / "payload.json"
        result = cli_invoke(
            "convert",
            str(script_copy("numbered.txt")),
            "-s",
            "2",
            "-s",
            "99",
            "-o",
            str(target),
        )
        result.assert_success()
        result.assert_contains("scenes not found: 99")

        payload = json.loads(target.read_text(encoding="utf-8"))
        assert [s["sceneNumber"] for s in payload["scenes"]] == ["2"]

    def test_empty_script_fails(self, cli_invoke, empty_script):
        """Test nothing to import is an error."""
        result = cli_invoke("convert", str(empty_script))
        result.assert_failure(exit_code=1)
        result.assert_contains("No scenes or characters found")

    def test_missing_file_json_error(self, cli_invoke, tmp_path):
        """Test errors are JSON when the payload goes to stdout."""
        result = cli_invoke("convert", str(tmp_path / "absent.fdx"))
        result.assert_failure(exit_code=1)
        assert "File does not exist" in result.parse_json()["error"]

    def test_config_defaults(self, cli_invoke, script_copy, tmp_path):
        """Test --config changes the character defaults."""
        config = tmp_path / "import.yaml"
        config.write_text(
            yaml.safe_dump({"default_cast_type": "A", "default_gender": "Female"})
        )

        result = cli_invoke(
            "--config", str(config), "convert", str(script_copy("numbered.txt"))
        )
        result.assert_success()

        characters = result.parse_json()["characters"]
        assert {c["castType"] for c in characters} == {"A"}
        assert {c["gender"] for c in characters} == {"Female"}

    def test_config_description_limit(self, cli_invoke, script_copy, tmp_path):
        """Test the payload description limit comes from settings."""
        config = tmp_path / "import.toml"
        config.write_text("import_description_limit = 5\n")

        result = cli_invoke(
            "-c", str(config), "convert", str(script_copy("coffee_shop.fountain"))
        )
        result.assert_success()
        assert result.parse_json()["scenes"][0]["description"] == "John "


class TestGlobalOptions:
    """Test options handled by the main callback."""

    def test_version(self, cli_invoke):
        """Test the plain version line."""
        result = cli_invoke("version")
        result.assert_success()
        result.assert_contains(f"scriptimport v{__version__}")

    def test_version_json(self, cli_invoke):
        """Test version as JSON."""
        result = cli_invoke("version", "--json")
        result.assert_success()
        assert result.parse_json()["version"] == __version__

    def test_missing_config_file(self, cli_invoke, tmp_path):
        """Test a missing --config file stops the command."""
        result = cli_invoke("--config", str(tmp_path / "absent.yaml"), "version")
        result.assert_failure(exit_code=1)
        result.assert_contains("File does not exist")

    def test_invalid_config_value(self, cli_invoke, tmp_path):
        """Test invalid settings in a config file stop the command."""
        config = tmp_path / "bad.yaml"
        config.write_text(yaml.safe_dump({"default_cast_type": "Z"}))

        result = cli_invoke("--config", str(config), "version")
        result.assert_failure(exit_code=1)

    def test_verbose_and_debug(self, cli_invoke):
        """Test logging flags are accepted."""
        cli_invoke("--verbose", "version").assert_success()
        cli_invoke("--debug", "version").assert_success()
