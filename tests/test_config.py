from authtui import config


def test_default_secrets_path_under_home(monkeypatch, tmp_path):
    monkeypatch.delenv("AUTHTUI_FILE", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert config.default_secrets_path() == str(tmp_path / ".auth-tui")


def test_default_secrets_path_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("AUTHTUI_FILE", str(tmp_path / "codes"))
    assert config.default_secrets_path() == str(tmp_path / "codes")


def test_empty_env_override_is_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv("AUTHTUI_FILE", "")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert config.default_secrets_path() == str(tmp_path / ".auth-tui")


def test_default_secrets_path_without_home(monkeypatch):
    monkeypatch.delenv("AUTHTUI_FILE", raising=False)

    def no_home():
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(config.Path, "home", staticmethod(no_home))
    assert config.default_secrets_path() == ".auth-tui"
