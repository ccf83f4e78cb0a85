import pytest

from components.news_cards import PLACEHOLDER_IMAGE, build_news_card_html, build_news_feed_html
from components.patient_cards import adherence_class, build_patient_card_html, build_patient_list_html
from conftest import make_patient
from services.models import NewsArticle, Treatment


@pytest.mark.parametrize("adherence, expected", [
    (100, "adherence-high"), (80, "adherence-high"),
    (79, "adherence-medium"), (50, "adherence-medium"),
    (49.5, "adherence-low"), (0, "adherence-low"),
])
def test_adherence_class(adherence, expected):
    assert adherence_class(adherence) == expected


def test_card_shows_core_fields():
    html = build_patient_card_html(make_patient("314", adherence=85, condition="hypertension", name="Nina"))

    assert "<h3>Nina</h3>" in html
    assert "ID: 314" in html
    assert "Hypertension" in html
    assert 'class="adherence-level adherence-high">Adherence: 85%' in html
    assert "✔ Stable" in html
    assert "Recommended Treatment" not in html


def test_card_flags_attention_and_shows_first_treatment(metformin):
    other = Treatment(brand_name="Zestril", generic_name="LISINOPRIL")
    html = build_patient_card_html(make_patient("7", adherence=20, treatments=[metformin, other]))

    assert "⚠ Needs Attention" in html
    assert "adherence-low" in html
    assert "Recommended Treatment:" in html
    assert "Glucophage" in html
    assert "METFORMIN HYDROCHLORIDE" in html
    assert "Zestril" not in html


def test_card_escapes_user_text():
    html = build_patient_card_html(make_patient("8", name="<script>x</script>"))
    assert "<script>" not in html


def test_whole_number_float_adherence_prints_like_integer():
    assert "Adherence: 70%" in build_patient_card_html(make_patient("9", adherence=70.0))
    assert "Adherence: 70.5%" in build_patient_card_html(make_patient("9", adherence=70.5))


def test_empty_list_placeholder():
    assert "No patients available." in build_patient_list_html([])


def test_list_renders_one_card_per_patient():
    html = build_patient_list_html([make_patient("1"), make_patient("2"), make_patient("3")])
    assert html.count('class="patient-card"') == 3


def test_news_card_defaults():
    html = build_news_card_html(NewsArticle(title="Flu season", link="https://news.example/flu"))

    assert PLACEHOLDER_IMAGE in html
    assert "No description available." in html
    assert "Unknown" in html
    assert 'href="https://news.example/flu"' in html
    assert "Read More →" in html


def test_news_feed_states():
    assert "Loading health news..." in build_news_feed_html(None)
    assert "Unable to load health news at this time." in build_news_feed_html([])
    html = build_news_feed_html([NewsArticle(title="A"), NewsArticle(title="B")])
    assert html.count('class="news-card"') == 2
