"""
Tests for patient registration and maintenance.
"""
from datetime import date

import pytest
from django.core.exceptions import ValidationError

from apps.core.exceptions import NotFoundError, StoreError
from apps.patients import services
from apps.patients.models import Patient

PATIENTS_URL = '/api/v1/patients/'


@pytest.mark.django_db
class TestCreatePatient:

    def test_creates_patient_with_server_fields(self):
        patient = services.create_patient(
            name='Siti Rahma',
            phone_number='0812-555-0101',
            complaint='Fever for three days',
            examination_date=date(2024, 1, 15),
        )

        assert patient.pk is not None
        assert patient.created_at is not None
        assert patient.updated_at is not None
        assert Patient.objects.get(pk=patient.pk).name == 'Siti Rahma'

    def test_accepts_iso_date_string(self):
        patient = services.create_patient(
            name='Siti Rahma',
            phone_number='0812-555-0101',
            complaint='Fever',
            examination_date='2024-01-15',
        )

        assert Patient.objects.get(pk=patient.pk).examination_date == date(2024, 1, 15)

    @pytest.mark.parametrize('field', ['name', 'phone_number', 'complaint'])
    def test_blank_required_field_rejected(self, patient_factory, field):
        with pytest.raises(ValidationError) as exc_info:
            patient_factory(**{field: '   '})

        assert field in exc_info.value.message_dict
        assert Patient.objects.count() == 0

    def test_invalid_examination_date_rejected(self, patient_factory):
        with pytest.raises(ValidationError) as exc_info:
            patient_factory(examination_date='15/01/2024')

        assert 'examination_date' in exc_info.value.message_dict

    def test_surrounding_whitespace_trimmed(self, patient_factory):
        patient = patient_factory(name='  Siti Rahma  ')
        assert patient.name == 'Siti Rahma'


@pytest.mark.django_db
class TestListPatients:

    def test_ordered_by_examination_date_desc(self, patient_factory):
        older = patient_factory(examination_date=date(2024, 1, 10))
        newer = patient_factory(examination_date=date(2024, 1, 20))
        middle = patient_factory(examination_date=date(2024, 1, 15))

        patients = services.list_patients()

        assert [p.pk for p in patients] == [newer.pk, middle.pk, older.pk]

    def test_date_range_inclusive(self, patient_factory):
        patient_factory(examination_date=date(2024, 1, 9))
        first_day = patient_factory(examination_date=date(2024, 1, 10))
        last_day = patient_factory(examination_date=date(2024, 1, 15))
        patient_factory(examination_date=date(2024, 1, 16))

        patients = services.list_patients({'date_from': '2024-01-10', 'date_to': '2024-01-15'})

        assert [p.pk for p in patients] == [last_day.pk, first_day.pk]

    def test_search_matches_name_case_insensitively(self, patient_factory):
        match = patient_factory(name='Budi Santoso')
        patient_factory(name='Ani Wijaya', phone_number='0899')

        patients = services.list_patients({'search': '  sANTo '})

        assert [p.pk for p in patients] == [match.pk]

    def test_search_matches_phone_number(self, patient_factory):
        patient_factory(name='Budi', phone_number='081111')
        match = patient_factory(name='Ani', phone_number='082222')

        patients = services.list_patients({'search': '2222'})

        assert [p.pk for p in patients] == [match.pk]

    def test_no_filters_returns_all(self, patient_factory):
        patient_factory()
        patient_factory()

        assert len(services.list_patients({})) == 2

    def test_invalid_date_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            services.list_patients({'date_from': 'yesterday'})

        assert 'date_from' in exc_info.value.message_dict


@pytest.mark.django_db
class TestUpdateAndDeletePatient:

    def test_partial_update(self, patient_factory):
        patient = patient_factory(complaint='Cough')

        updated = services.update_patient(patient.pk, {'complaint': 'Cough and fever'})

        stored = Patient.objects.get(pk=patient.pk)
        assert updated.complaint == 'Cough and fever'
        assert stored.complaint == 'Cough and fever'
        assert stored.name == patient.name

    def test_update_unknown_field_rejected(self, patient_factory):
        patient = patient_factory()

        with pytest.raises(ValidationError) as exc_info:
            services.update_patient(patient.pk, {'blood_type': 'O'})

        assert 'blood_type' in exc_info.value.message_dict

    def test_update_to_blank_rejected(self, patient_factory):
        patient = patient_factory()

        with pytest.raises(ValidationError):
            services.update_patient(patient.pk, {'name': ''})

        assert Patient.objects.get(pk=patient.pk).name == patient.name

    def test_update_missing_patient(self):
        with pytest.raises(NotFoundError):
            services.update_patient(999999, {'name': 'Nobody'})

    def test_get_missing_patient_returns_none(self):
        assert services.get_patient(999999) is None

    def test_delete(self, patient_factory):
        patient = patient_factory()

        assert services.delete_patient(patient.pk) == {'success': True}
        assert services.get_patient(patient.pk) is None

    def test_delete_missing_patient(self):
        with pytest.raises(NotFoundError):
            services.delete_patient(999999)


@pytest.mark.django_db
class TestPatientsAPI:
    """REST endpoints for patients."""

    def test_requires_authentication(self, api_client):
        response = api_client.get(PATIENTS_URL)
        assert response.status_code == 401

    def test_create(self, auth_client):
        payload = {
            'name': 'Siti Rahma',
            'phone_number': '0812-555-0101',
            'complaint': 'Fever',
            'examination_date': '2024-01-15',
        }

        response = auth_client.post(PATIENTS_URL, payload, format='json')

        assert response.status_code == 201
        assert response.data['id'] is not None
        assert response.data['examination_date'] == '2024-01-15'
        assert Patient.objects.count() == 1

    def test_create_with_blank_name(self, auth_client):
        payload = {
            'name': '   ',
            'phone_number': '0812',
            'complaint': 'Fever',
            'examination_date': '2024-01-15',
        }

        response = auth_client.post(PATIENTS_URL, payload, format='json')

        assert response.status_code == 400
        assert 'name' in response.data

    def test_list_with_search(self, auth_client, patient_factory):
        match = patient_factory(name='Budi Santoso')
        patient_factory(name='Ani Wijaya', phone_number='0899')

        response = auth_client.get(PATIENTS_URL, {'search': 'budi'})

        assert response.status_code == 200
        assert [p['id'] for p in response.data] == [match.pk]

    def test_retrieve(self, auth_client, patient_factory):
        patient = patient_factory()

        response = auth_client.get(f'{PATIENTS_URL}{patient.pk}/')

        assert response.status_code == 200
        assert response.data['name'] == patient.name

    def test_retrieve_missing(self, auth_client):
        response = auth_client.get(f'{PATIENTS_URL}999999/')
        assert response.status_code == 404

    def test_patch(self, auth_client, patient_factory):
        patient = patient_factory()

        response = auth_client.patch(
            f'{PATIENTS_URL}{patient.pk}/',
            {'phone_number': '0877-000'},
            format='json'
        )

        assert response.status_code == 200
        assert response.data['phone_number'] == '0877-000'
        assert response.data['name'] == patient.name

    def test_patch_missing(self, auth_client):
        response = auth_client.patch(f'{PATIENTS_URL}999999/', {'name': 'X'}, format='json')
        assert response.status_code == 404

    def test_delete(self, auth_client, patient_factory):
        patient = patient_factory()

        response = auth_client.delete(f'{PATIENTS_URL}{patient.pk}/')

        assert response.status_code == 200
        assert response.data == {'success': True}
        assert not Patient.objects.filter(pk=patient.pk).exists()

    def test_store_failure_returns_503(self, auth_client, monkeypatch):
        def unavailable(*args, **kwargs):
            raise StoreError('list_patients', 'connection refused')

        monkeypatch.setattr(services, 'list_patients', unavailable)

        response = auth_client.get(PATIENTS_URL)

        assert response.status_code == 503
        assert response.data['error_type'] == 'store_error'
        assert response.data['operation'] == 'list_patients'
