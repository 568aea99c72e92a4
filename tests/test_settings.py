from jobsim.settings import Settings


def test_defaults_when_unset():
    s = Settings.from_env({})
    assert s.node_env == "development"
    assert s.database_url == "no definida"


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("NODE_ENV", "production")
    monkeypatch.setenv("DATABASE_URL", "postgres://db/app")
    s = Settings.from_env()
    assert s.node_env == "production"
    assert s.database_url == "postgres://db/app"


def test_empty_value_uses_default():
    s = Settings.from_env({"NODE_ENV": "", "DATABASE_URL": ""})
    assert s.as_dict() == {"NODE_ENV": "development", "DATABASE_URL": "no definida"}
