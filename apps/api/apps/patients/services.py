"""
Patient service layer - registration, lookup and maintenance of intake records.

Every function takes the database alias as ``using`` so callers decide which
store the operation runs against.
"""
from typing import Any, Dict, List, Mapping, Optional

from django.core.exceptions import ValidationError
from django.db import DEFAULT_DB_ALIAS, transaction

from apps.core.exceptions import NotFoundError, store_errors
from apps.core.observability import metrics
from apps.core.observability.events import log_patient_registered, log_record_deleted, log_domain_event

from .filters import PatientFilter
from .models import Patient

UPDATABLE_FIELDS = ('name', 'phone_number', 'complaint', 'examination_date')


def create_patient(
    *,
    name: str,
    phone_number: str,
    complaint: str,
    examination_date,
    using: str = DEFAULT_DB_ALIAS,
) -> Patient:
    """
    Register a patient.

    Args:
        name: Patient name (non-empty)
        phone_number: Contact number (non-empty)
        complaint: Reason for the visit (non-empty)
        examination_date: date or ISO date string

    Returns:
        The persisted Patient with id and timestamps set

    Raises:
        ValidationError: A required field is missing or blank
        StoreError: The database rejected the write
    """
    patient = Patient(
        name=name,
        phone_number=phone_number,
        complaint=complaint,
        examination_date=examination_date,
    )

    with store_errors('create_patient'):
        patient.save(using=using)

    metrics.patients_total.labels(action='created').inc()
    log_patient_registered(patient)
    return patient


def list_patients(
    params: Optional[Mapping[str, Any]] = None,
    *,
    using: str = DEFAULT_DB_ALIAS,
) -> List[Patient]:
    """
    List patients, newest examination first.

    Supported params: ``date_from``/``date_to`` (inclusive, on
    examination_date) and ``search`` (name or phone number, case-insensitive).
    """
    filterset = PatientFilter(
        data=params or {},
        queryset=Patient.objects.using(using).order_by('-examination_date', '-created_at', '-id'),
    )
    if not filterset.is_valid():
        raise ValidationError(filterset.errors.as_data())

    with store_errors('list_patients'):
        return list(filterset.qs)


def get_patient(patient_id, *, using: str = DEFAULT_DB_ALIAS) -> Optional[Patient]:
    """Return the patient or None."""
    with store_errors('get_patient'):
        return Patient.objects.using(using).filter(pk=patient_id).first()


def update_patient(
    patient_id,
    fields: Mapping[str, Any],
    *,
    using: str = DEFAULT_DB_ALIAS,
) -> Patient:
    """
    Apply a partial update to a patient.

    Raises:
        ValidationError: Unknown field name, or an updated field is blank
        NotFoundError: No patient with this id
        StoreError: The database rejected the write
    """
    unknown = sorted(set(fields) - set(UPDATABLE_FIELDS))
    if unknown:
        raise ValidationError({field: 'Unknown field' for field in unknown})

    with store_errors('update_patient'):
        with transaction.atomic(using=using):
            try:
                patient = Patient.objects.using(using).select_for_update().get(pk=patient_id)
            except Patient.DoesNotExist:
                raise NotFoundError('Patient', patient_id)

            for field, value in fields.items():
                setattr(patient, field, value)
            patient.save(using=using)

    metrics.patients_total.labels(action='updated').inc()
    log_domain_event(
        'patient.updated',
        entity_type='Patient',
        entity_id=str(patient.pk),
        updated_fields=sorted(fields),
    )
    return patient


def delete_patient(patient_id, *, using: str = DEFAULT_DB_ALIAS) -> Dict[str, bool]:
    """
    Hard-delete a patient.

    Raises:
        NotFoundError: No patient with this id
    """
    with store_errors('delete_patient'):
        deleted, _details = Patient.objects.using(using).filter(pk=patient_id).delete()

    if not deleted:
        raise NotFoundError('Patient', patient_id)

    metrics.patients_total.labels(action='deleted').inc()
    log_record_deleted('Patient', patient_id)
    return {'success': True}
