"""Patient and prescription lookup service."""

from typing import Optional

from recordkeep.domain.entities import Patient, Prescription
from recordkeep.store.grouping import GroupingIndex
from recordkeep.store.keyed import KeyedStore


class PrescriptionService:
    """Service for looking up prescriptions by patient."""

    def __init__(
        self,
        patients: Optional[KeyedStore[int, Patient]] = None,
        prescriptions: Optional[KeyedStore[int, Prescription]] = None,
    ):
        """Initialize prescription service.

        Args:
            patients: Patient store (a new one if omitted)
            prescriptions: Prescription store (a new one if omitted)
        """
        self.patients = patients if patients is not None else KeyedStore(lambda p: p.id, name="patient")
        self.prescriptions = (
            prescriptions if prescriptions is not None else KeyedStore(lambda p: p.id, name="prescription")
        )
        self._by_patient: GroupingIndex[int, Prescription] = GroupingIndex()
        self.rebuild_index()

    def register_patient(self, patient: Patient) -> int:
        """Add a patient.

        Raises:
            DuplicateKeyError: If a patient with the same id exists
        """
        return self.patients.add(patient)

    def get_patient(self, patient_id: int) -> Patient:
        """Get a patient by id.

        Raises:
            NotFoundError: If the patient does not exist
        """
        return self.patients.get(patient_id)

    def add_prescription(self, prescription: Prescription) -> int:
        """Add a prescription and rebuild the per-patient index.

        Prescriptions are not required to reference a registered patient.

        Raises:
            DuplicateKeyError: If a prescription with the same id exists
        """
        prescription_id = self.prescriptions.add(prescription)
        self.rebuild_index()
        return prescription_id

    def add_prescriptions(self, prescriptions: list[Prescription]) -> None:
        """Add several prescriptions, rebuilding the index once.

        Stops at the first duplicate; prescriptions added before it are kept
        and indexed.
        """
        try:
            for prescription in prescriptions:
                self.prescriptions.add(prescription)
        finally:
            self.rebuild_index()

    def rebuild_index(self) -> None:
        """Regroup all stored prescriptions by patient id.

        Prescriptions are grouped in issue-date order, ties broken by id.
        """
        ordered = sorted(self.prescriptions.get_all(), key=lambda p: (p.issued_on, p.id))
        self._by_patient.build(ordered, lambda p: p.patient_id)

    def prescriptions_for(self, patient_id: int) -> list[Prescription]:
        """Return a patient's prescriptions, empty if there are none."""
        return self._by_patient.lookup(patient_id)

    def patients_with_prescriptions(self) -> list[Patient]:
        """Return registered patients that have at least one prescription."""
        return [p for p in self.patients.get_all() if p.id in self._by_patient]
