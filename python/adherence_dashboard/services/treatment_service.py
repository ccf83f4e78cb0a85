"""
Treatment lookup service for the Patient Adherence Dashboard

Queries the openFDA drug label API for labels whose indications mention a
patient's condition. Suggestions are hints only. Every failure is absorbed
and logged; callers get None and carry on without treatment data.
"""

import logging
from typing import List, Optional

import requests

from services.models import Treatment
from utils import config

logger = logging.getLogger(__name__)

CONDITION_SEARCH_TERMS = {
    'diabetes': 'diabetes OR diabetic OR glucose OR insulin',
    'hypertension': 'hypertension OR "high blood pressure" OR "blood pressure" OR antihypertensive',
    'asthma': 'asthma OR bronchial OR bronchodilator OR respiratory',
    'cardiovascular': 'cardiovascular OR cardiac OR heart OR coronary OR angina',
}

RESULT_LIMIT = 5

def build_search_query(condition: str) -> str:
    """Expand a known condition into synonyms; anything else passes through"""
    return CONDITION_SEARCH_TERMS.get(condition, condition)

def fetch_treatment_info(condition: str) -> Optional[List[Treatment]]:
    """
    Fetch treatment suggestions for a condition

    Args:
        condition: Condition key selected for the patient

    Returns:
        Up to five suggestions, or None when the request failed or found nothing
    """
    api_config = config.get_api_config()
    params = {
        'search': f"indications_and_usage:{build_search_query(condition)}",
        'limit': RESULT_LIMIT,
    }

    try:
        response = requests.get(
            api_config['openfda_api_url'],
            params=params,
            timeout=api_config['request_timeout']
        )

        if not response.ok:
            logger.error(f"Treatment lookup failed for '{condition}': HTTP {response.status_code}")
            return None

        data = response.json()

    except (requests.RequestException, ValueError) as e:
        logger.error(f"Error fetching treatment info: {e}")
        return None

    results = data.get('results') if isinstance(data, dict) else None
    if not results:
        logger.info(f"No treatment labels found for '{condition}'")
        return None

    treatments = [Treatment.from_label(result) for result in results[:RESULT_LIMIT]]
    logger.info(f"Found {len(treatments)} treatment suggestion(s) for '{condition}'")
    return treatments
