"""Tests for structural schema matching."""

import json

import pytest

from news_parser.core.storage import FullArticleStorage, SimpleArticleStorage
from news_parser.core.types import Article, FullArticle, Source
from news_parser.input.schemas import (
    ARTICLE_SCHEMAS,
    STORAGE_SCHEMAS,
    NewsDecodeError,
    decode_article,
    decode_storage,
)


def test_schema_priority_is_explicit():
    assert [name for name, _ in STORAGE_SCHEMAS] == ["full", "simple"]
    assert [name for name, *_ in ARTICLE_SCHEMAS] == ["full", "base"]


def test_full_envelope_decodes_to_full_storage(fixture_text):
    storage = decode_storage(fixture_text("example.json"))

    assert isinstance(storage, FullArticleStorage)
    assert storage.status == "ok"
    assert storage.total_results == 10
    assert len(storage.articles) == 10
    assert all(isinstance(a, FullArticle) for a in storage.articles)
    assert all(a.source is not None for a in storage.articles)


def test_simple_envelope_decodes_to_simple_storage(fixture_text):
    storage = decode_storage(fixture_text("simple.json"))

    assert isinstance(storage, SimpleArticleStorage)
    assert storage.article == Article(
        title="Assignment #2",
        description="Extend Assignment #1 to support multiple sources and to introduce source processor.",
        published_at="2021-04-16 09:53:23.709229",
        url="https://example/274503",
    )


def test_envelope_with_articles_and_base_keys_is_full():
    text = json.dumps(
        {
            "status": "ok",
            "totalResults": 0,
            "articles": [],
            "title": "t",
            "description": "d",
            "publishedAt": "p",
            "url": "u",
        }
    )
    storage = decode_storage(text)
    assert isinstance(storage, FullArticleStorage)
    assert storage.articles == ()


def test_articles_key_never_falls_back_to_simple():
    # articles present but envelope incomplete: the simple schema must not claim it
    text = json.dumps({"articles": [], "title": "t", "url": "u"})
    with pytest.raises(NewsDecodeError):
        decode_storage(text)


def test_simple_envelope_tolerates_extra_keys():
    text = json.dumps({"title": "t", "url": "u", "score": 3, "tags": ["a"]})
    storage = decode_storage(text)
    assert isinstance(storage, SimpleArticleStorage)
    assert storage.article == Article(title="t", url="u")


def test_element_without_extended_keys_is_base_article():
    article = decode_article({"title": "t", "description": "d", "publishedAt": "p", "url": "u"})
    assert type(article) is Article


@pytest.mark.parametrize("key", ["author", "urlToImage", "content", "source"])
def test_any_extended_key_selects_full_article(key):
    article = decode_article({"title": "t", key: None})
    assert isinstance(article, FullArticle)


def test_full_article_fields_are_mapped():
    article = decode_article(
        {
            "source": {"id": "cnn", "name": "CNN", "extra": 1},
            "author": "Ralph Ellis, CNN",
            "title": "t",
            "description": "d",
            "url": "u",
            "publishedAt": "p",
            "urlToImage": "i",
            "content": "c",
        }
    )
    assert article == FullArticle(
        title="t",
        description="d",
        published_at="p",
        url="u",
        author="Ralph Ellis, CNN",
        url_to_image="i",
        content="c",
        source=Source(id="cnn", name="CNN"),
    )


def test_wrongly_typed_element_rejects_full_envelope():
    text = json.dumps(
        {"status": "ok", "totalResults": 2, "articles": [{"title": "t"}, {"title": 42}]}
    )
    with pytest.raises(NewsDecodeError):
        decode_storage(text)


def test_non_object_element_rejects_full_envelope():
    text = json.dumps({"status": "ok", "totalResults": 1, "articles": ["not an article"]})
    with pytest.raises(NewsDecodeError):
        decode_storage(text)


def test_source_must_be_object():
    assert decode_article({"title": "t", "source": "CNN"}) is None


_MISTYPED_EXTENDED = [
    ("author", 5),
    ("urlToImage", ["https://example.com/a.jpg"]),
    ("content", {"text": "c"}),
    ("source", "CNN"),
]


@pytest.mark.parametrize("key, value", _MISTYPED_EXTENDED)
def test_mistyped_extended_field_is_not_downgraded_to_base(key, value):
    element = {"title": "t", "description": "d", "publishedAt": "p", "url": "u", key: value}
    assert decode_article(element) is None


@pytest.mark.parametrize("key, value", _MISTYPED_EXTENDED)
def test_mistyped_extended_field_rejects_full_envelope(key, value):
    element = {"title": "t", "description": "d", "publishedAt": "p", "url": "u", key: value}
    text = json.dumps({"status": "ok", "totalResults": 1, "articles": [element]})
    with pytest.raises(NewsDecodeError):
        decode_storage(text)


def test_deeply_nested_json_raises_decode_error():
    with pytest.raises(NewsDecodeError, match="Malformed JSON"):
        decode_storage("[" * 100000 + "]" * 100000)


@pytest.mark.parametrize(
    "payload",
    [
        {"status": "ok", "articles": []},
        {"totalResults": 1, "articles": []},
        {"status": "ok", "totalResults": "10", "articles": []},
        {"status": "ok", "totalResults": True, "articles": []},
        {"status": 200, "totalResults": 1, "articles": []},
    ],
)
def test_full_envelope_metadata_shape(payload):
    with pytest.raises(NewsDecodeError):
        decode_storage(json.dumps(payload))


@pytest.mark.parametrize("text", ["", "{", "not json", "[1, 2]", "42", "{}", '{"foo": "bar"}'])
def test_malformed_or_unknown_content_raises(text):
    with pytest.raises(NewsDecodeError):
        decode_storage(text)


def test_truncated_file_raises(fixture_text):
    with pytest.raises(NewsDecodeError, match="Malformed JSON"):
        decode_storage(fixture_text("truncated.json"))


def test_news_api_error_body_is_described():
    text = json.dumps(
        {"status": "error", "code": "apiKeyInvalid", "message": "Your API key is invalid."}
    )
    with pytest.raises(NewsDecodeError, match="apiKeyInvalid"):
        decode_storage(text)
