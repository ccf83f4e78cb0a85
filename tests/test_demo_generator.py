from data_generation.generate_demo_patients import DemoPatientGenerator


def test_generates_unique_numeric_ids():
    patients = DemoPatientGenerator(seed=7).generate_patients(40, existing_ids=["123456"])

    ids = [p.id for p in patients]
    assert len(ids) == len(set(ids)) == 40
    assert "123456" not in ids
    assert all(i.isdigit() for i in ids)


def test_attention_flag_follows_adherence():
    for patient in DemoPatientGenerator(seed=3).generate_patients(30):
        assert 0 <= patient.adherence <= 100
        assert patient.need_attention is (patient.adherence < 50)
        assert patient.treatments is None
