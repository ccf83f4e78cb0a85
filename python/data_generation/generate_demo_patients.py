#!/usr/bin/env python3
"""
Patient Adherence Dashboard - Demo Patient Generator

Seeds the dashboard's local storage with synthetic patients so the
dashboard, filters and statistics have something to show. Treatment lookups
are skipped; generated patients carry no treatment suggestions.
"""

import os
import sys
import argparse
import logging
import random
from datetime import date, timedelta
from typing import List, Optional

import numpy as np
from faker import Faker

# Add the app directory to the path to import its modules
sys.path.append(os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'adherence_dashboard'))

from services.local_storage import LocalStorage
from services.models import Patient
from services.notifications import Notifier
from services.patient_store import PatientStore
from components.search_widgets import CONDITIONS
from utils import config

logger = logging.getLogger(__name__)

class DemoPatientGenerator:
    """Generate synthetic dashboard patients"""

    def __init__(self, seed: int = 42):
        """Initialize generator with consistent seed for reproducible data."""
        random.seed(seed)
        self.rng = np.random.default_rng(seed)
        self.fake = Faker()
        Faker.seed(seed)

    def generate_adherence(self) -> int:
        """Adherence skewed towards good compliance, clipped to 0-100"""
        return int(np.clip(self.rng.normal(loc=72, scale=18), 0, 100))

    def generate_patients(self, count: int, existing_ids: Optional[List[str]] = None) -> List[Patient]:
        """
        Generate patients with unique numeric IDs

        Args:
            count: Number of patients
            existing_ids: IDs that must not be reused

        Returns:
            New patient records
        """
        used = set(existing_ids or [])
        patients = []

        while len(patients) < count:
            patient_id = str(self.rng.integers(100000, 999999))
            if patient_id in used:
                continue
            used.add(patient_id)

            patients.append(Patient.create(
                name=self.fake.name(),
                patient_id=patient_id,
                condition=random.choice(CONDITIONS),
                adherence=self.generate_adherence(),
                added_on=date.today() - timedelta(days=random.randint(0, 180))
            ))

        return patients

def main():
    """Main function to run demo data generation."""
    parser = argparse.ArgumentParser(description="Seed the Patient Adherence Dashboard with demo patients")
    parser.add_argument("--patients", type=int, default=25,
                       help="Number of patients to generate (default: 25)")
    parser.add_argument("--storage-path", type=str, default=None,
                       help="Storage file to write (default: STORAGE_PATH or .local_storage.json)")
    parser.add_argument("--seed", type=int, default=42,
                       help="Random seed for reproducible data generation")
    parser.add_argument("--reset", action="store_true",
                       help="Discard stored patients before seeding")

    args = parser.parse_args()

    config.setup_logging()
    storage_config = config.get_storage_config()

    storage = LocalStorage(args.storage_path or storage_config['storage_path'])
    if args.reset:
        storage.remove_item(storage_config['storage_key'])

    store = PatientStore(storage, Notifier(), storage_key=storage_config['storage_key'])
    store.load_from_storage()

    generator = DemoPatientGenerator(seed=args.seed)
    for patient in generator.generate_patients(args.patients, existing_ids=[p.id for p in store]):
        store.add(patient)

    print(f"🩺 Stored {len(store)} patient(s) in {storage.path.absolute()}")


if __name__ == "__main__":
    main()
