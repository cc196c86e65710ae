import json

from config import DEFAULT_TITLE, load_config


def test_missing_file_returns_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("DESIGN_PATTERNS_LOG_LEVEL", raising=False)

    config = load_config(str(tmp_path / "missing.json"))

    assert config == {"log_level": "WARNING", "clear_screen": True, "title": DEFAULT_TITLE}


def test_none_path_returns_defaults():
    assert load_config(None)["title"] == DEFAULT_TITLE


def test_user_values_override_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"clear_screen": False, "title": "Patterns"}), encoding="utf-8")

    config = load_config(str(path))

    assert config["clear_screen"] is False
    assert config["title"] == "Patterns"
    assert "log_level" in config


def test_invalid_json_falls_back_with_warning(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    config = load_config(str(path))

    assert config["title"] == DEFAULT_TITLE
    assert "使用默認配置" in capsys.readouterr().out


def test_non_object_json_is_rejected(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert load_config(str(path))["clear_screen"] is True
    assert "警告" in capsys.readouterr().out


def test_log_level_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("DESIGN_PATTERNS_LOG_LEVEL", "DEBUG")

    assert load_config(str(tmp_path / "missing.json"))["log_level"] == "DEBUG"
