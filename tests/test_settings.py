import pytest

from credstore.core.settings import Settings


def test_dev_allows_low_bcrypt_cost():
    Settings(ENV="dev", BCRYPT_ROUNDS=4).validate_for_runtime()


def test_prod_rejects_low_bcrypt_cost():
    with pytest.raises(RuntimeError):
        Settings(ENV="prod", BCRYPT_ROUNDS=4).validate_for_runtime()


def test_prod_accepts_default_cost():
    cfg = Settings(ENV="prod")

    cfg.validate_for_runtime()
    assert cfg.BCRYPT_ROUNDS == 12


def test_rounds_outside_bcrypt_range_are_rejected():
    with pytest.raises(ValueError):
        Settings(BCRYPT_ROUNDS=3)


def test_values_come_from_environment(monkeypatch):
    monkeypatch.setenv("BCRYPT_ROUNDS", "10")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    cfg = Settings()

    assert cfg.BCRYPT_ROUNDS == 10
    assert cfg.LOG_LEVEL == "DEBUG"
