import pytest

from config import Settings


def test_defaults_with_empty_environment():
    s = Settings.from_env({})
    assert s == Settings()
    assert s.flask_config() == {
        "MAX_VERTICES": 100_000,
        "MAX_TRACE_VERTICES": 1_000,
        "TRACK_PATHS_DEFAULT": True,
    }


def test_values_from_environment():
    s = Settings.from_env({
        "SSSP_MAX_VERTICES": "50",
        "SSSP_MAX_TRACE_VERTICES": "10",
        "SSSP_TRACK_PATHS": "off",
        "SSSP_LOG_LEVEL": "debug",
        "SSSP_HOST": "0.0.0.0",
        "SSSP_PORT": "8080",
    })
    assert s.max_vertices == 50
    assert s.max_trace_vertices == 10
    assert s.track_paths is False
    assert s.log_level == "DEBUG"
    assert s.host == "0.0.0.0"
    assert s.port == 8080


@pytest.mark.parametrize("env", [
    {"SSSP_TRACK_PATHS": "maybe"},
    {"SSSP_MAX_VERTICES": "-5"},
    {"SSSP_MAX_TRACE_VERTICES": "-1"},
    {"SSSP_PORT": "http"},
])
def test_bad_values_raise(env):
    with pytest.raises(ValueError):
        Settings.from_env(env)
