import pytest

from binomial_decomposition import Settings, get_settings


def test_defaults_from_empty_environment():
    s = Settings.from_env({})
    assert s.markov_backend == "auto"
    assert s.groebner_method == "buchberger"
    assert s.fourti2_markov is None
    assert s.oracle_timeout is None


def test_environment_values_are_parsed():
    s = Settings.from_env(
        {
            "BINOMIAL_MARKOV_BACKEND": " 4TI2 ",
            "BINOMIAL_4TI2_MARKOV": "/opt/4ti2/markov",
            "BINOMIAL_GROEBNER_METHOD": "f5b",
            "BINOMIAL_ORACLE_TIMEOUT": "2.5",
        }
    )
    assert s.markov_backend == "4ti2"
    assert s.fourti2_markov == "/opt/4ti2/markov"
    assert s.fourti2_groebner is None
    assert s.groebner_method == "f5b"
    assert s.oracle_timeout == 2.5


def test_invalid_values_are_rejected():
    with pytest.raises(ValueError):
        Settings(markov_backend="magma")
    with pytest.raises(ValueError):
        Settings(groebner_method="magic")
    with pytest.raises(ValueError):
        Settings(oracle_timeout=0)
    with pytest.raises(ValueError):
        Settings.from_env({"BINOMIAL_ORACLE_TIMEOUT": "soon"})


def test_get_settings_reads_process_environment(monkeypatch):
    monkeypatch.setenv("BINOMIAL_GROEBNER_METHOD", "f5b")
    get_settings.cache_clear()
    assert get_settings().groebner_method == "f5b"
    assert get_settings().markov_backend == "saturation"
