import pytest

from config import StoreSettings, load_store_settings


def test_defaults_match_reference_behaviour(monkeypatch):
    for key in ("STORAGE_BACKEND", "API_MIN_DELAY_MS", "API_MAX_DELAY_MS", "COURSE_FAILURE_RATE",
                "STUDENT_FAILURE_RATE", "STUDENTS_STORAGE_KEY"):
        monkeypatch.delenv(key, raising=False)
    settings = load_store_settings()
    assert settings.backend == "file"
    assert settings.storage_key == "students_dashboard_data"
    assert (settings.min_delay_ms, settings.max_delay_ms) == (500, 1500)
    assert settings.course_failure_rate == 0.1
    assert settings.student_failure_rate == 0.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "MONGO")
    monkeypatch.setenv("API_MIN_DELAY_MS", "0")
    monkeypatch.setenv("API_MAX_DELAY_MS", "10")
    monkeypatch.setenv("STUDENT_FAILURE_RATE", "0.25")
    settings = load_store_settings()
    assert settings.backend == "mongo"
    assert settings.max_delay_ms == 10
    assert settings.student_failure_rate == 0.25


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_delay_ms": -1},
        {"min_delay_ms": 20, "max_delay_ms": 10},
        {"course_failure_rate": 1.5},
        {"student_failure_rate": -0.1},
    ],
)
def test_invalid_settings_rejected(kwargs):
    with pytest.raises(ValueError):
        StoreSettings(**kwargs)
