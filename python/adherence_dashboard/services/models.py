"""
Domain records for the Patient Adherence Dashboard

Patients, treatment suggestions and news articles. Patients and treatments
serialize to the same camelCase JSON layout the browser dashboard keeps in
local storage, so existing saved data loads unchanged.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Union

from utils.helpers import format_date, truncate_text

PLACEHOLDER = "N/A"
NEED_ATTENTION_THRESHOLD = 50
PURPOSE_MAX_LENGTH = 200


def _first(values: Any) -> Optional[str]:
    """First entry of an openFDA list field, or None"""
    if isinstance(values, list) and values:
        return values[0] or None
    return None


@dataclass
class Treatment:
    """A drug label record shown as a treatment hint"""
    brand_name: str = PLACEHOLDER
    generic_name: str = PLACEHOLDER
    manufacturer: str = PLACEHOLDER
    purpose: str = PLACEHOLDER

    @classmethod
    def from_label(cls, result: Dict[str, Any]) -> "Treatment":
        """Build a suggestion from one openFDA drug label result"""
        openfda = result.get('openfda') or {}

        indications = _first(result.get('indications_and_usage'))
        purpose = _first(result.get('purpose'))
        if not purpose and indications:
            purpose = truncate_text(indications, PURPOSE_MAX_LENGTH, suffix="")

        return cls(
            brand_name=_first(openfda.get('brand_name')) or PLACEHOLDER,
            generic_name=_first(openfda.get('generic_name')) or PLACEHOLDER,
            manufacturer=_first(openfda.get('manufacturer_name')) or PLACEHOLDER,
            purpose=purpose or PLACEHOLDER,
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            'brandName': self.brand_name,
            'genericName': self.generic_name,
            'manufacturer': self.manufacturer,
            'purpose': self.purpose,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Treatment":
        return cls(
            brand_name=data.get('brandName', PLACEHOLDER),
            generic_name=data.get('genericName', PLACEHOLDER),
            manufacturer=data.get('manufacturer', PLACEHOLDER),
            purpose=data.get('purpose', PLACEHOLDER),
        )


@dataclass
class Patient:
    """A tracked patient. need_attention is a creation-time snapshot."""
    name: str
    id: str
    condition: str
    adherence: Union[int, float]
    need_attention: bool
    treatments: Optional[List[Treatment]] = None
    date_added: str = field(default_factory=format_date)

    @classmethod
    def create(cls, name: str, patient_id: str, condition: str,
               adherence: Union[int, float],
               treatments: Optional[List[Treatment]] = None,
               added_on: Optional[date] = None) -> "Patient":
        """
        Create a new patient record, deriving the attention flag

        Args:
            name: Patient name
            patient_id: Digits-only identifier
            condition: Condition key (e.g. 'diabetes')
            adherence: Adherence percentage
            treatments: Suggestions from the drug-label lookup, if any
            added_on: Creation date (default: today)

        Returns:
            Patient with need_attention set to adherence < 50
        """
        return cls(
            name=name,
            id=patient_id,
            condition=condition,
            adherence=adherence,
            need_attention=adherence < NEED_ATTENTION_THRESHOLD,
            treatments=treatments or None,
            date_added=format_date(added_on),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'id': self.id,
            'condition': self.condition,
            'adherence': self.adherence,
            'needAttention': self.need_attention,
            'treatments': [t.to_dict() for t in self.treatments] if self.treatments is not None else None,
            'dateAdded': self.date_added,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Patient":
        """Restore a stored record. The attention flag is taken as stored."""
        treatments = data.get('treatments')
        return cls(
            name=data['name'],
            id=str(data['id']),
            condition=data['condition'],
            adherence=data['adherence'],
            need_attention=bool(data['needAttention']),
            treatments=[Treatment.from_dict(t) for t in treatments] if treatments is not None else None,
            date_added=data.get('dateAdded', ''),
        )


@dataclass
class NewsArticle:
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    source_id: Optional[str] = None
    link: Optional[str] = None

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "NewsArticle":
        """Map a NewsData result entry"""
        return cls(
            title=item.get('title') or '',
            description=item.get('description'),
            image_url=item.get('image_url'),
            source_id=item.get('source_id'),
            link=item.get('link'),
        )
