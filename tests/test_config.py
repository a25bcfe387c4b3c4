from config import Settings


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("POWERCAST_SEASONAL_PERIOD", "24")
    monkeypatch.setenv("POWERCAST_UNIT", "MWh")
    s = Settings()
    assert s.seasonal_period == 24
    assert s.unit == "MWh"


def test_defaults():
    s = Settings()
    assert (s.smoothing_alpha, s.smoothing_beta, s.smoothing_gamma) == (0.3, 0.1, 0.1)
    assert s.confidence_z == 1.96
    assert s.seasonal_factor_bounds == (0.5, 2.0)
