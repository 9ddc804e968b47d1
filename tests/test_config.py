from wordmonster.config import _env_int


def test_env_int_parses_value(monkeypatch):
    monkeypatch.setenv("WORDMONSTER_TEST_SEED", "42")
    assert _env_int("WORDMONSTER_TEST_SEED", None) == 42


def test_env_int_unset_or_blank_uses_default(monkeypatch):
    monkeypatch.delenv("WORDMONSTER_TEST_SEED", raising=False)
    assert _env_int("WORDMONSTER_TEST_SEED", 7) == 7
    monkeypatch.setenv("WORDMONSTER_TEST_SEED", "  ")
    assert _env_int("WORDMONSTER_TEST_SEED", 7) == 7


def test_env_int_bad_value_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("WORDMONSTER_TEST_SEED", "lucky")
    assert _env_int("WORDMONSTER_TEST_SEED", None) is None
