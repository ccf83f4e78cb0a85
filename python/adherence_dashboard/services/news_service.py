"""
Health news service for the Patient Adherence Dashboard

Loads the latest English health headlines from the NewsData API. HTTP
failures are reported with a toast matched to the status code; all failures
end in an empty list so the dashboard simply shows no news.
"""

import logging
from typing import List

import requests

from services.models import NewsArticle
from services.notifications import Notifier
from utils import config

logger = logging.getLogger(__name__)

MAX_ARTICLES = 5

STATUS_TOASTS = {
    429: ('News API rate limit reached. Please try again later.', 'warning'),
    403: ('Invalid API key. Please check your configuration.', 'error'),
}
DEFAULT_FAILURE_TOAST = ('Failed to load health news.', 'error')

def fetch_health_news(notifier: Notifier) -> List[NewsArticle]:
    """
    Fetch up to five health news articles

    Args:
        notifier: Receives rate-limit, key and empty-feed toasts

    Returns:
        Articles in API order; empty on any failure
    """
    api_config = config.get_api_config()
    params = {
        'apikey': api_config['newsdata_api_key'],
        'category': 'health',
        'language': 'en',
    }

    try:
        response = requests.get(
            api_config['newsdata_api_url'],
            params=params,
            timeout=api_config['request_timeout']
        )

        if not response.ok:
            message, severity = STATUS_TOASTS.get(response.status_code, DEFAULT_FAILURE_TOAST)
            notifier.show_toast(message, severity)
            logger.error(f"News API request failed: HTTP {response.status_code}")
            return []

        data = response.json()

    except (requests.RequestException, ValueError) as e:
        logger.error(f"Error fetching health news: {e}")
        return []

    results = data.get('results') if isinstance(data, dict) else None
    if not results:
        notifier.show_toast('No health news available at this time.', 'info')
        return []

    articles = [NewsArticle.from_api(item) for item in results[:MAX_ARTICLES]]
    logger.info(f"Loaded {len(articles)} health news article(s)")
    return articles
