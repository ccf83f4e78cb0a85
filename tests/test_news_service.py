"""
Health news tests. requests.get is patched so nothing reaches NewsData.
"""

from unittest.mock import Mock, patch

import pytest
import requests

from services.news_service import fetch_health_news


def _response(status_code=200, payload=None):
    return Mock(ok=200 <= status_code < 300, status_code=status_code, json=lambda: payload)


def _article(i):
    return {
        "title": f"Story {i}",
        "description": f"About story {i}",
        "image_url": f"https://img.example/{i}.jpg",
        "source_id": "healthwire",
        "link": f"https://news.example/{i}",
    }


def test_request_parameters(notifier, monkeypatch):
    monkeypatch.setenv("NEWSDATA_API_KEY", "secret-key")
    with patch("services.news_service.requests.get", return_value=_response(payload={"results": [_article(1)]})) as get:
        fetch_health_news(notifier)

    assert get.call_args.args[0] == "https://newsdata.io/api/1/news"
    assert get.call_args.kwargs["params"] == {"apikey": "secret-key", "category": "health", "language": "en"}


def test_rate_limit_returns_empty_with_one_warning(notifier):
    with patch("services.news_service.requests.get", return_value=_response(429)):
        articles = fetch_health_news(notifier)

    assert articles == []
    assert len(notifier.history) == 1
    assert notifier.history[0].severity == "warning"
    assert notifier.history[0].message == "News API rate limit reached. Please try again later."


def test_forbidden_reports_invalid_key(notifier):
    with patch("services.news_service.requests.get", return_value=_response(403)):
        assert fetch_health_news(notifier) == []

    assert [(t.severity, t.message) for t in notifier.history] == [
        ("error", "Invalid API key. Please check your configuration.")
    ]


@pytest.mark.parametrize("status_code", [400, 401, 500, 503])
def test_other_failures_report_generic_error(notifier, status_code):
    with patch("services.news_service.requests.get", return_value=_response(status_code)):
        assert fetch_health_news(notifier) == []

    assert [(t.severity, t.message) for t in notifier.history] == [("error", "Failed to load health news.")]


def test_empty_results_show_info(notifier):
    with patch("services.news_service.requests.get", return_value=_response(payload={"results": []})):
        assert fetch_health_news(notifier) == []

    assert [(t.severity, t.message) for t in notifier.history] == [
        ("info", "No health news available at this time.")
    ]


def test_truncates_to_five_articles(notifier):
    payload = {"results": [_article(i) for i in range(9)]}
    with patch("services.news_service.requests.get", return_value=_response(payload=payload)):
        articles = fetch_health_news(notifier)

    assert [a.title for a in articles] == [f"Story {i}" for i in range(5)]
    assert articles[0].source_id == "healthwire"
    assert articles[0].link == "https://news.example/0"
    assert notifier.history == []


def test_network_failure_is_silent(notifier):
    with patch("services.news_service.requests.get", side_effect=requests.Timeout("slow")):
        assert fetch_health_news(notifier) == []

    assert notifier.history == []
