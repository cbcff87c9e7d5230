"""
Patient repository - handles data persistence
"""

import logging
from typing import List, Optional
from uuid import UUID

from django.db import IntegrityError, transaction

from .exceptions import EmailAlreadyExistsError
from .models import Patient


logger = logging.getLogger(__name__)


class PatientRepository:
    """Repository for patient persistence; email uniqueness is a DB unique index."""

    def exists_by_email(self, email: str) -> bool:
        return Patient.objects.filter(email=email).exists()

    def exists_by_email_excluding(self, email: str, patient_id: UUID) -> bool:
        """Same as exists_by_email but ignores the record being updated."""
        return Patient.objects.filter(email=email).exclude(id=patient_id).exists()

    def insert(self, **fields) -> Patient:
        """
        Insert a new patient with a fresh id.

        The unique index catches what the pre-check misses under concurrent
        writers; that case is reported as EmailAlreadyExistsError.
        """
        try:
            with transaction.atomic():
                return Patient.objects.create(**fields)
        except IntegrityError as exc:
            logger.warning("Unique constraint rejected insert for email=%s: %s", fields.get('email'), exc)
            raise EmailAlreadyExistsError(detail={'email': fields.get('email')}) from exc

    def find_by_id(self, patient_id: UUID) -> Optional[Patient]:
        try:
            return Patient.objects.get(id=patient_id)
        except Patient.DoesNotExist:
            return None

    def find_all(self) -> List[Patient]:
        return list(Patient.objects.all())

    def save(self, patient: Patient) -> Patient:
        """Update in place."""
        try:
            with transaction.atomic():
                patient.save()
        except IntegrityError as exc:
            logger.warning("Unique constraint rejected update of patient %s: %s", patient.id, exc)
            raise EmailAlreadyExistsError(detail={'email': patient.email}) from exc
        return patient

    def delete_by_id(self, patient_id: UUID) -> None:
        # 不存在时静默返回，删除是幂等的
        Patient.objects.filter(id=patient_id).delete()
