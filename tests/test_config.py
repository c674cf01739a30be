from limited_hangout.config import (
    DEFAULT_RANGE,
    DEFAULT_TIMEOUT,
    PUBLISHED_SHEET_ID,
    URL_TEMPLATES,
    SourceConfig,
    load_config,
)


def test_defaults():
    config = load_config({})
    assert config == SourceConfig(encoding="csv", url_template=None, timeout=DEFAULT_TIMEOUT, demo=False)
    assert config.resolved_url_template == URL_TEMPLATES["csv"]
    assert config.published_id == PUBLISHED_SHEET_ID
    assert config.range == DEFAULT_RANGE
    assert config.url_for("Pat").endswith(f"/{PUBLISHED_SHEET_ID}/pub?output=csv&sheet=Pat")


def test_from_env():
    config = load_config({
        "SHOWS_SOURCE": " GVIZ ",
        "SHOWS_URL_TEMPLATE": "https://example.test/{tab}.json",
        "SHOWS_TIMEOUT": "2.5",
        "DEMO_MODE": "TRUE",
    })
    assert config.encoding == "gviz"
    assert config.resolved_url_template == "https://example.test/{tab}.json"
    assert config.timeout == 2.5
    assert config.demo is True


def test_bad_timeout_falls_back():
    assert load_config({"SHOWS_TIMEOUT": "soon"}).timeout == DEFAULT_TIMEOUT


def test_sheet_id_comes_from_the_given_env():
    config = load_config({"SHOWS_SOURCE": "gviz", "GOOGLE_SHEETS_SHEET_ID": "abc123"})
    assert config.url_for("Devin") == (
        "https://docs.google.com/spreadsheets/d/abc123/gviz/tq?tqx=out:json&sheet=Devin"
    )


def test_process_env_is_read_at_call_time(monkeypatch):
    monkeypatch.setenv("SHOWS_SOURCE", "api")
    monkeypatch.setenv("GOOGLE_SHEETS_SHEET_ID", "late-id")
    assert load_config().url_for("Matt") == "https://opensheet.elk.sh/late-id/Matt"


def test_values_url_uses_key_and_range():
    config = load_config({
        "SHOWS_SOURCE": "values",
        "GOOGLE_SHEETS_SHEET_ID": "abc123",
        "GOOGLE_SHEETS_API_KEY": "secret",
    })
    expected = "https://sheets.googleapis.com/v4/spreadsheets/abc123/values/Shows%21A%3AE?key=secret"
    assert config.url_for("Devin") == config.url_for("Pat") == expected

    config = load_config({"SHOWS_SOURCE": "values", "GOOGLE_SHEETS_RANGE": "Gigs!A1:E99"})
    assert "/values/Gigs%21A1%3AE99?" in config.url_for("Devin")


def test_per_tab_templates_name_the_tab():
    for encoding in ("csv", "gviz", "api"):
        assert "{tab}" in SourceConfig(encoding=encoding).resolved_url_template
    assert "{range}" in SourceConfig(encoding="values").resolved_url_template
