import pytest

from blog_list.config import DEFAULT_BLOG_DATA_URL, load_settings

_VARS = ("BLOG_DATA_URL", "BLOG_FETCH_TIMEOUT", "BLOG_PAGE_SIZE", "BLOG_SEARCH_DEBOUNCE", "DISCORD_BOT_TOKEN")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # set-then-delete so monkeypatch also removes whatever load_dotenv writes
    for name in _VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)


def test_defaults(tmp_path):
    settings = load_settings(str(tmp_path / "missing.env"))

    assert settings.blog_data_url == DEFAULT_BLOG_DATA_URL
    assert settings.fetch_timeout == 10.0
    assert settings.page_size == 10
    assert settings.search_debounce == 0.25
    assert settings.discord_token is None


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("BLOG_DATA_URL", "https://example.com/feed.json")
    monkeypatch.setenv("BLOG_PAGE_SIZE", "5")
    monkeypatch.setenv("BLOG_SEARCH_DEBOUNCE", "0.5")

    settings = load_settings(str(tmp_path / "missing.env"))

    assert settings.blog_data_url == "https://example.com/feed.json"
    assert settings.page_size == 5
    assert settings.search_debounce == 0.5


def test_reads_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("DISCORD_BOT_TOKEN=abc123\nBLOG_FETCH_TIMEOUT=2.5\n")

    settings = load_settings(str(env_file))

    assert settings.discord_token == "abc123"
    assert settings.fetch_timeout == 2.5


@pytest.mark.parametrize("value", ["ten", "0", "-3"])
def test_invalid_numbers_name_the_variable(monkeypatch, tmp_path, value):
    monkeypatch.setenv("BLOG_PAGE_SIZE", value)

    with pytest.raises(ValueError, match="BLOG_PAGE_SIZE"):
        load_settings(str(tmp_path / "missing.env"))
