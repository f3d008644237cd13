from __future__ import annotations

import logging
from pathlib import Path

import pytest

import ishango.logging_setup as logging_setup
from ishango.config import APP_NAME, default_data_dir, load_config


def test_env_var_sets_data_dir(data_dir: Path):
    cfg = load_config()
    assert cfg.data_dir == data_dir


def test_explicit_option_beats_env(tmp_path: Path):
    cfg = load_config(data_dir=tmp_path / "explicit", log_level="DEBUG")
    assert cfg.data_dir == tmp_path / "explicit"
    assert cfg.log_level == "DEBUG"


def test_platform_default_when_unset(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("ISHANGO_DATA_DIR")
    cfg = load_config()
    assert cfg.data_dir == default_data_dir()
    assert cfg.data_dir.name == APP_NAME


def test_dotenv_in_cwd_is_loaded_without_overriding(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.delenv("ISHANGO_DATA_DIR")
    (tmp_path / ".env").write_text(f"ISHANGO_DATA_DIR={tmp_path / 'from-dotenv'}\n")

    cfg = load_config()
    assert cfg.data_dir == tmp_path / "from-dotenv"

    monkeypatch.setenv("ISHANGO_DATA_DIR", str(tmp_path / "from-env"))
    assert load_config().data_dir == tmp_path / "from-env"


@pytest.mark.parametrize(
    ("level", "env", "expected"),
    [
        ("debug", None, logging.DEBUG),
        (logging.ERROR, "DEBUG", logging.ERROR),
        ("15", None, 15),
        (None, "info", logging.INFO),
        (None, "nonsense", logging.WARNING),
        ("nonsense", None, logging.WARNING),
        (None, None, logging.WARNING),
    ],
)
def test_parse_level(
    monkeypatch: pytest.MonkeyPatch, level: int | str | None, env: str | None, expected: int
):
    if env is None:
        monkeypatch.delenv("ISHANGO_LOG_LEVEL", raising=False)
    else:
        monkeypatch.setenv("ISHANGO_LOG_LEVEL", env)
    assert logging_setup._parse_level(level) == expected


def test_default_data_dir_windows_uses_roaming_data_subdir(monkeypatch: pytest.MonkeyPatch):
    import ishango.config as config_mod

    calls: list[dict[str, object]] = []

    def _fake_user_data_dir(appname: str, **kw: object) -> str:
        calls.append({"appname": appname, **kw})
        return r"C:\Users\me\AppData\Roaming\ishango"

    monkeypatch.setattr(config_mod, "_is_windows", lambda: True)
    monkeypatch.setattr(config_mod, "user_data_dir", _fake_user_data_dir)

    result = default_data_dir()

    assert result == Path(r"C:\Users\me\AppData\Roaming\ishango") / "data"
    assert calls == [{"appname": "ishango", "appauthor": False, "roaming": True}]


def test_default_data_dir_elsewhere_has_no_data_subdir(monkeypatch: pytest.MonkeyPatch):
    import ishango.config as config_mod

    monkeypatch.setattr(config_mod, "_is_windows", lambda: False)
    monkeypatch.setattr(config_mod, "user_data_dir", lambda appname, **kw: f"/xdg/{appname}")

    assert default_data_dir() == Path("/xdg/ishango")
