"""Pytest fixtures for tagmark tests."""

import pytest

import tagmark.config


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Isolate each test from the caller's environment and .env file."""
    for name in (
        "TAGMARK_AUTO_LINK",
        "TAGMARK_FUZZY_LINKS",
        "TAGMARK_FUZZY_EMAIL",
        "TAGMARK_MESSAGE_CHAR_LIMIT",
        "TAGMARK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(tagmark.config, "_settings", None)
    yield


@pytest.fixture
def sample_markup() -> str:
    """Markup exercising escapes, out-of-order closing and links."""
    return (
        "<bold>Foo\\<T> <italic>bar</bold> buzz</italic> fee "
        "<spoiler>far <link:papermc.io>*klick*"
    )


@pytest.fixture
def sample_plain_text() -> str:
    """Plain text with a link and characters that look like markup."""
    return "see https://x.io/ now, a <b> isn't \\ a tag"
