"""
患者生命周期事件。analytics 消费端只认识这个结构（to_dict() 之后的 JSON）。
"""

from dataclasses import asdict, dataclass

PATIENT_CREATED = "PATIENT_CREATED"


@dataclass
class PatientEvent:
    patient_id: str
    name: str
    email: str
    address: str
    date_of_birth: str     # ISO 8601: "YYYY-MM-DD"
    registered_date: str   # ISO 8601: "YYYY-MM-DD"
    event_type: str = PATIENT_CREATED

    @classmethod
    def from_patient(cls, patient, event_type: str = PATIENT_CREATED) -> "PatientEvent":
        return cls(
            patient_id=str(patient.id),
            name=patient.name,
            email=patient.email,
            address=patient.address,
            date_of_birth=patient.date_of_birth.isoformat(),
            registered_date=patient.registered_date.isoformat(),
            event_type=event_type,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "PatientEvent":
        return cls(**data)

    def to_dict(self) -> dict:
        return asdict(self)
