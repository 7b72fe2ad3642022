import json

import pytest
from pydantic import ValidationError

from launchbar.core.launch_config import LaunchConfig, Option, load_launch_config


def write_config(tmp_path, data) -> str:
    path = tmp_path / "launch_config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_camel_case_wire_names_are_accepted() -> None:
    config = LaunchConfig(
        intents=[
            {
                "triggers": ["BUY"],
                "triggerField": "side",
                "ignoreCase": False,
                "action": "trade",
                "subDomain": "spot",
                "fields": [{"name": "when", "type": "date", "dateFormats": ["%Y"], "matchPattern": "^2"}],
            }
        ],
        interests=[{"topic": "news", "list": "headlines"}],
    )

    intent = config.intents[0]
    assert intent.trigger_field == "side"
    assert intent.ignore_case is False
    assert intent.sub_domain == "spot"
    assert intent.fields[0].date_formats == ["%Y"]
    assert intent.fields[0].match_pattern == "^2"
    assert config.interests[0].list_key == "headlines"


def test_bare_strings_in_lists_become_options() -> None:
    config = LaunchConfig(lists={"pairs": ["USD/GBP", {"value": "EUR/USD", "display": "Euro"}]})
    assert config.lists["pairs"] == [Option(value="USD/GBP"), Option(value="EUR/USD", display="Euro")]
    assert config.lists["pairs"][1].label == "Euro"


def test_find_choice_is_case_insensitive() -> None:
    config = LaunchConfig(choices=[{"key": "Pair", "list": "pairs"}])
    assert config.find_choice("pair").key == "Pair"
    assert config.find_choice("desk") is None


def test_intent_requires_triggers() -> None:
    with pytest.raises(ValidationError):
        LaunchConfig(intents=[{"triggers": [], "action": "trade"}])


def test_load_from_path(tmp_path) -> None:
    path = write_config(tmp_path, {"applications": [{"url": "https://mail", "title": "Mail"}]})
    config = load_launch_config(path)
    assert config.applications[0].label == "Mail"


def test_load_from_environment(tmp_path, monkeypatch) -> None:
    path = write_config(tmp_path, {"intents": [{"triggers": ["go"], "action": "go"}]})
    monkeypatch.setenv("LAUNCHBAR_CONFIG", path)
    assert load_launch_config().find_intent("go") is not None


def test_packaged_default_config_loads(monkeypatch) -> None:
    monkeypatch.delenv("LAUNCHBAR_CONFIG", raising=False)
    config = load_launch_config()
    assert config.find_intent("trade") is not None


def test_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_launch_config(tmp_path / "absent.json")


def test_invalid_json(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_launch_config(path)


def test_invalid_structure(tmp_path) -> None:
    path = write_config(tmp_path, {"applications": [{"title": "no url"}]})
    with pytest.raises(ValidationError):
        load_launch_config(path)
