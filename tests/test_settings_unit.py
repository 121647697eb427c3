import json
from pathlib import Path

import pytest

from linsys import settings


def _configure_tmp_db(monkeypatch, tmp_path: Path) -> Path:
    data_dir = tmp_path / "data"
    data_file = data_dir / "linsys.json"
    monkeypatch.setattr(settings, "_DATA_DIR", str(data_dir))
    monkeypatch.setattr(settings, "_DATA_FILE", str(data_file))
    return data_file


def test_defaults_when_nothing_is_stored(monkeypatch, tmp_path: Path) -> None:
    data_file = _configure_tmp_db(monkeypatch, tmp_path)

    assert settings.get_settings() == settings.DEFAULT_SETTINGS
    assert not data_file.exists()


def test_save_and_get(monkeypatch, tmp_path: Path) -> None:
    data_file = _configure_tmp_db(monkeypatch, tmp_path)

    settings.save_settings({"compute_mode": "numerical", "decimal_places": 4})
    stored = settings.get_settings()
    assert stored["compute_mode"] == "numerical"
    assert stored["decimal_places"] == 4
    assert stored["log_level"] == "WARNING"

    on_disk = json.loads(data_file.read_text(encoding="utf-8"))
    assert on_disk["settings"]["compute_mode"] == "numerical"

    settings.save_settings({"log_level": "DEBUG"})
    assert settings.get_settings()["compute_mode"] == "numerical"
    assert settings.get_settings()["log_level"] == "DEBUG"


def test_reset(monkeypatch, tmp_path: Path) -> None:
    _configure_tmp_db(monkeypatch, tmp_path)

    settings.save_settings({"compute_mode": "numerical"})
    settings.reset_settings()
    assert settings.get_settings() == settings.DEFAULT_SETTINGS


@pytest.mark.parametrize(
    "bad,match",
    [
        ({"theme": "dark"}, "Unknown setting"),
        ({"compute_mode": "fast"}, "compute_mode"),
        ({"decimal_places": -1}, "decimal_places"),
        ({"decimal_places": "4"}, "decimal_places"),
        ({"log_level": "LOUD"}, "log_level"),
    ],
)
def test_invalid_settings_are_rejected(monkeypatch, tmp_path: Path, bad, match) -> None:
    data_file = _configure_tmp_db(monkeypatch, tmp_path)

    with pytest.raises(ValueError, match=match):
        settings.save_settings(bad)
    assert not data_file.exists()


def test_corrupt_file_falls_back_to_defaults(monkeypatch, tmp_path: Path, caplog) -> None:
    data_file = _configure_tmp_db(monkeypatch, tmp_path)
    data_file.parent.mkdir(parents=True)
    data_file.write_text("{not json", encoding="utf-8")

    assert settings.get_settings() == settings.DEFAULT_SETTINGS
    assert "unreadable settings file" in caplog.text


def test_invalid_stored_values_fall_back_to_defaults(monkeypatch, tmp_path: Path, caplog) -> None:
    data_file = _configure_tmp_db(monkeypatch, tmp_path)
    data_file.parent.mkdir(parents=True)
    data_file.write_text(json.dumps({"settings": {
        "compute_mode": "bogus",
        "decimal_places": 4,
        "log_level": "LOUD",
    }}), encoding="utf-8")

    stored = settings.get_settings()
    assert stored["compute_mode"] == "symbolic"
    assert stored["decimal_places"] == 4
    assert stored["log_level"] == "WARNING"
    assert "Ignoring stored setting 'compute_mode'" in caplog.text

    settings.save_settings({"decimal_places": 2})
    on_disk = json.loads(data_file.read_text(encoding="utf-8"))
    assert on_disk["settings"] == {
        "compute_mode": "symbolic",
        "decimal_places": 2,
        "log_level": "WARNING",
    }


def test_malformed_file_falls_back_to_defaults(monkeypatch, tmp_path: Path) -> None:
    data_file = _configure_tmp_db(monkeypatch, tmp_path)
    data_file.parent.mkdir(parents=True)
    data_file.write_text("[1, 2]", encoding="utf-8")

    assert settings.get_settings() == settings.DEFAULT_SETTINGS
