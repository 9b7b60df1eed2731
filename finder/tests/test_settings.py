from finder_api.config.settings import FinderApiSettings, FinderSettings, environment_label


def test_finder_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("FINDER_SEARCH_MAX_CONCURRENCY", "1")
    monkeypatch.setenv("FINDER_GROUP_AMBIGUITY", "error")
    monkeypatch.setenv("FINDER_GRAPH_BASE_URL", "https://graph.example.test/beta")

    settings = FinderSettings()

    assert settings.search_max_concurrency == 1
    assert settings.group_ambiguity == "error"
    assert settings.graph_base_url == "https://graph.example.test/beta"


def test_api_settings_defaults(monkeypatch):
    monkeypatch.delenv("FINDER_API_PORT", raising=False)

    settings = FinderApiSettings()

    assert settings.port == 3000
    assert settings.static_dir is None


def test_environment_label(monkeypatch):
    monkeypatch.delenv("WEBSITE_INSTANCE_ID", raising=False)
    assert environment_label() == "Local Development"

    monkeypatch.setenv("WEBSITE_INSTANCE_ID", "instance-1")
    assert environment_label() == "Azure App Service"
