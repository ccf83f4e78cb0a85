"""
News Cards Component for the Patient Adherence Dashboard

Renders the health news feed on the dashboard.
"""

import streamlit as st
from html import escape
from typing import List, Optional
import logging

from services.models import NewsArticle

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = "https://via.placeholder.com/300x150?text=Health+News"
LOADING_MESSAGE = "Loading health news..."
UNAVAILABLE_MESSAGE = "Unable to load health news at this time."

def _centered_note(text: str) -> str:
    return f'<p style="text-align: center; color: #6B7280;">{text}</p>'

def build_news_card_html(article: NewsArticle) -> str:
    """Markup for one news article"""
    return f"""
        <div class="news-card" style="display: flex; gap: 12px; margin-bottom: 12px; border: 1px solid #E5E7EB; border-radius: 8px; overflow: hidden;">
            <img src="{escape(article.image_url or PLACEHOLDER_IMAGE, quote=True)}" alt="News image" class="news-image" style="width: 180px; object-fit: cover;">
            <div class="news-content" style="padding: 10px;">
                <h4 class="news-title">{escape(article.title)}</h4>
                <p class="news-description">{escape(article.description or 'No description available.')}</p>
                <div class="news-footer">
                    <span class="news-source">{escape(article.source_id or 'Unknown')}</span>
                    <a href="{escape(article.link or '#', quote=True)}" target="_blank" class="news-link">Read More →</a>
                </div>
            </div>
        </div>
    """

def build_news_feed_html(articles: Optional[List[NewsArticle]]) -> str:
    """
    Markup for the news section

    Args:
        articles: None while loading, otherwise the fetched articles
    """
    if articles is None:
        return _centered_note(LOADING_MESSAGE)
    if not articles:
        return _centered_note(UNAVAILABLE_MESSAGE)
    return "".join(build_news_card_html(a) for a in articles)

def render_news_feed(articles: Optional[List[NewsArticle]]) -> None:
    try:
        st.markdown(build_news_feed_html(articles), unsafe_allow_html=True)
    except Exception as e:
        logger.error(f"Error rendering news feed: {e}")
        st.error("Error displaying health news")
