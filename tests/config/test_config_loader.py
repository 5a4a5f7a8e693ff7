"""Tests for finding and parsing locator configuration files."""

import json

import pytest

from uilocator.config import (
    ConfigurationStore,
    UILocatorSettings,
    candidate_paths,
    find_config_file,
    load_config,
    load_configuration,
    parse_config,
    reset_settings,
)
from uilocator.config_exceptions import ConfigSourceMalformed, ConfigSourceMissing

MINIMAL_YAML = """\
Demo:
  bundleId: {bundle_id}
  elements:
    searchBox:
      role: AXTextField
"""


def _write_config(directory, bundle_id, filename="ui_config.yaml"):
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(MINIMAL_YAML.format(bundle_id=bundle_id), encoding="utf-8")
    return path


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Isolated cwd and home directory so only test files are found."""
    cwd = tmp_path / "cwd"
    home = tmp_path / "home"
    cwd.mkdir()
    home.mkdir()
    monkeypatch.chdir(cwd)
    monkeypatch.setenv("HOME", str(home))
    return tmp_path


class TestParseConfig:
    """Test building a model from a parsed document."""

    def test_parse_demo(self, demo_config_data):
        """Test that every application and element is loaded."""
        model = parse_config(demo_config_data)

        app = model.get_app("Demo")
        assert app.app_name == "Demo"
        assert app.process_identifier == "com.example.demo"
        assert list(app.elements) == ["searchBox", "playButton", "lastMessage", "settingsButton"]
        assert app.elements["lastMessage"].children[0].index == -1

    def test_several_apps(self):
        """Test a document with more than one application."""
        model = parse_config(
            {
                "QQMusic": {"bundleId": "com.tencent.QQMusicMac", "elements": {}},
                "Soul": {"bundleId": "com.soul.macapp"},
            }
        )

        assert model.app_names() == ["QQMusic", "Soul"]
        assert model.element_names("Soul") == []

    @pytest.mark.parametrize(
        "data,reason",
        [
            (None, "document is empty"),
            (["Demo"], "top level must map"),
            ({1: {"bundleId": "x"}}, "application name must be a string"),
            ({"Demo": "com.example.demo"}, "config for 'Demo' must be a mapping"),
        ],
    )
    def test_wrong_shape(self, data, reason):
        """Test that structural problems are reported with a reason."""
        with pytest.raises(ConfigSourceMalformed) as exc_info:
            parse_config(data, source="test.yaml")

        assert reason in exc_info.value.reason
        assert exc_info.value.source == "test.yaml"

    def test_missing_bundle_id(self):
        """Test that validation errors name the offending field."""
        with pytest.raises(ConfigSourceMalformed) as exc_info:
            parse_config({"Demo": {"elements": {}}})

        assert "Demo.bundleId" in exc_info.value.reason

    def test_app_name_key_rejected(self):
        """Test that a record cannot override the name it is stored under."""
        with pytest.raises(ConfigSourceMalformed, match="must not set app_name") as exc_info:
            parse_config({"Demo": {"bundleId": "com.example.demo", "app_name": "Other"}})

        assert exc_info.value.context["app_name"] == "Demo"

    def test_invalid_element_reports_path(self):
        """Test that a bad element record is located by app and element name."""
        with pytest.raises(ConfigSourceMalformed) as exc_info:
            parse_config(
                {
                    "Demo": {
                        "bundleId": "com.example.demo",
                        "elements": {"searchBox": {"role": "AXTextField", "matchType": "fuzzy"}},
                    }
                }
            )

        assert "Demo.elements.searchBox.matchType" in exc_info.value.reason
        assert exc_info.value.context["app_name"] == "Demo"

    def test_invalid_regex_rejected_at_load(self):
        """Test that regex patterns are checked when the file is loaded."""
        with pytest.raises(ConfigSourceMalformed, match="invalid regex"):
            parse_config(
                {
                    "Demo": {
                        "bundleId": "com.example.demo",
                        "elements": {
                            "history": {
                                "role": "AXScrollArea",
                                "identifier": "chat(",
                                "matchType": "regex",
                            }
                        },
                    }
                }
            )


class TestLoadConfig:
    """Test loading a single configuration file."""

    def test_load_file(self, demo_config_file):
        """Test loading the demo file."""
        model = load_config(demo_config_file)

        assert model.get_process_identifier("Demo") == "com.example.demo"

    def test_missing_file(self, tmp_path):
        """Test that a missing file is reported as missing, not malformed."""
        with pytest.raises(ConfigSourceMissing) as exc_info:
            load_config(tmp_path / "absent.yaml")

        assert exc_info.value.searched == [tmp_path / "absent.yaml"]

    def test_invalid_yaml(self, tmp_path):
        """Test that a YAML syntax error is reported as malformed."""
        path = tmp_path / "ui_config.yaml"
        path.write_text("Demo: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigSourceMalformed, match="invalid YAML"):
            load_config(path)

    def test_empty_file(self, tmp_path):
        """Test that an empty file is malformed."""
        path = tmp_path / "ui_config.yaml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ConfigSourceMalformed, match="document is empty"):
            load_config(path)

    def test_unicode_labels(self, tmp_path):
        """Test that non-ASCII labels survive loading."""
        path = tmp_path / "ui_config.yaml"
        path.write_text(
            "QQMusic:\n"
            "  bundleId: com.tencent.QQMusicMac\n"
            "  elements:\n"
            "    mainWindow:\n"
            "      role: AXWindow\n"
            "      label: QQ音乐\n",
            encoding="utf-8",
        )

        assert load_config(path).require_pattern("QQMusic", "mainWindow").label == "QQ音乐"


class TestConfigSearch:
    """Test configuration file search precedence."""

    def test_working_directory_first(self, workspace):
        """Test that the working directory beats extra search paths."""
        _write_config(workspace / "cwd", "com.example.cwd")
        _write_config(workspace / "extra", "com.example.extra")

        path = find_config_file(search_paths=[workspace / "extra"])

        assert path == workspace / "cwd" / "ui_config.yaml"

    def test_search_paths_in_order(self, workspace):
        """Test that extra directories are tried in the order given."""
        _write_config(workspace / "first", "com.example.first")
        _write_config(workspace / "second", "com.example.second")

        search_paths = [workspace / "missing", workspace / "second", workspace / "first"]

        model = load_configuration(search_paths=search_paths)

        assert model.get_process_identifier("Demo") == "com.example.second"

    def test_yaml_before_yml(self, workspace):
        """Test that .yaml wins over .yml in the same directory."""
        _write_config(workspace / "cwd", "com.example.yml", filename="ui_config.yml")
        _write_config(workspace / "cwd", "com.example.yaml")

        assert find_config_file().name == "ui_config.yaml"

    def test_yml_accepted(self, workspace):
        """Test that a .yml file is found when no .yaml exists."""
        _write_config(workspace / "cwd", "com.example.yml", filename="ui_config.yml")

        assert find_config_file().name == "ui_config.yml"

    def test_user_config_directory_last(self, workspace):
        """Test the per-user fallback directory."""
        _write_config(workspace / "home" / ".config" / "uilocator", "com.example.home")

        model = load_configuration(search_paths=[workspace / "extra"])

        assert model.get_process_identifier("Demo") == "com.example.home"

    def test_explicit_file_first(self, workspace):
        """Test that a configured file path beats every search directory."""
        _write_config(workspace / "cwd", "com.example.cwd")
        explicit = _write_config(
            workspace / "elsewhere", "com.example.explicit", filename="apps.yaml"
        )

        path = find_config_file(settings=UILocatorSettings(config_file=explicit))

        assert path == explicit

    def test_explicit_file_from_environment(self, workspace, monkeypatch):
        """Test UILOCATOR_CONFIG_FILE."""
        explicit = _write_config(workspace / "elsewhere", "com.example.env", filename="apps.yaml")
        monkeypatch.setenv("UILOCATOR_CONFIG_FILE", str(explicit))
        reset_settings()

        assert load_configuration().get_process_identifier("Demo") == "com.example.env"

    def test_search_paths_from_environment(self, workspace, monkeypatch):
        """Test UILOCATOR_CONFIG_SEARCH_PATHS."""
        _write_config(workspace / "extra", "com.example.extra")
        monkeypatch.setenv("UILOCATOR_CONFIG_SEARCH_PATHS", json.dumps([str(workspace / "extra")]))
        reset_settings()

        assert load_configuration().get_process_identifier("Demo") == "com.example.extra"

    def test_config_name(self, workspace):
        """Test searching for a differently named file."""
        _write_config(workspace / "cwd", "com.example.apps", filename="apps.yaml")

        assert load_configuration("apps").get_process_identifier("Demo") == "com.example.apps"

    def test_nothing_found(self, workspace):
        """Test that a fruitless search lists every location tried."""
        with pytest.raises(ConfigSourceMissing) as exc_info:
            find_config_file(search_paths=[workspace / "extra"])

        searched = exc_info.value.searched
        assert len(searched) == 6
        assert searched == candidate_paths(search_paths=[workspace / "extra"])
        assert exc_info.value.error_code == "CONFIG_SOURCE_MISSING"

    def test_store_from_source_reloads_file(self, workspace):
        """Test that a store re-reads the file it was loaded from."""
        path = _write_config(workspace / "cwd", "com.example.v1")
        store = ConfigurationStore.from_source()
        assert store.current.get_process_identifier("Demo") == "com.example.v1"

        path.write_text(MINIMAL_YAML.format(bundle_id="com.example.v2"), encoding="utf-8")
        store.reload()

        assert store.current.get_process_identifier("Demo") == "com.example.v2"

    def test_store_keeps_model_when_file_breaks(self, workspace):
        """Test that a broken edit does not replace a working configuration."""
        path = _write_config(workspace / "cwd", "com.example.v1")
        store = ConfigurationStore.from_source()
        previous = store.current

        path.write_text("Demo: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigSourceMalformed):
            store.reload()

        assert store.current is previous
