"""
Patient models - intake records for clinic visits.
"""
from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _


class Patient(models.Model):
    """
    Patient intake record.

    One row per registration: who came in, how to reach them, what they
    complained about and when they were examined.
    """
    REQUIRED_TEXT_FIELDS = ('name', 'phone_number', 'complaint')

    name = models.CharField(_('Name'), max_length=255)
    phone_number = models.CharField(_('Phone Number'), max_length=50)
    complaint = models.TextField(_('Complaint'))
    examination_date = models.DateField(_('Examination Date'))

    # Metadata
    created_at = models.DateTimeField(_('Created At'), auto_now_add=True)
    updated_at = models.DateTimeField(_('Updated At'), auto_now=True)

    class Meta:
        db_table = 'patients'
        ordering = ['-examination_date', '-created_at']
        indexes = [
            models.Index(fields=['-examination_date'], name='idx_patient_exam_date'),
            models.Index(fields=['-created_at'], name='idx_patient_created'),
            models.Index(fields=['phone_number'], name='idx_patient_phone'),
        ]
        verbose_name = _('Patient')
        verbose_name_plural = _('Patients')

    def __str__(self):
        return f"{self.name} ({self.examination_date})"

    def clean(self):
        super().clean()

        errors = {}
        for field in self.REQUIRED_TEXT_FIELDS:
            value = getattr(self, field)
            if value is None or not str(value).strip():
                errors[field] = _('This field cannot be blank.')
        if errors:
            raise ValidationError(errors)

    def save(self, *args, **kwargs):
        for field in self.REQUIRED_TEXT_FIELDS:
            value = getattr(self, field)
            if isinstance(value, str):
                setattr(self, field, value.strip())
        self.full_clean()
        super().save(*args, **kwargs)
