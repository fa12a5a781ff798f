from pydantic import BaseModel, ConfigDict, Field
from typing import Tuple

from ..core.severity import SeverityTable

# (negated rank, time to reach): smaller keys are served first
PriorityKey = Tuple[int, int]

class PatientRecord(BaseModel):
    """A booked appointment. Immutable once created."""
    
    model_config = ConfigDict(frozen=True)
    
    name: str
    # Membership in the severity table is checked at input time, not here
    disease: str
    time_to_reach: int = Field(gt=0, strict=True, description="Minutes needed to reach the hospital")
    appointment_number: int = Field(gt=0, strict=True)
    
    def __repr__(self):
        return (
            f"<PatientRecord(appointment_number={self.appointment_number}, "
            f"name='{self.name}', disease='{self.disease}', time_to_reach={self.time_to_reach})>"
        )

def priority_key(record: PatientRecord, severity: SeverityTable) -> PriorityKey:
    """Sort key for a record: higher rank first, then shorter travel time.
    
    Raises UnknownDiseaseError when the record's disease is not in the table.
    """
    return (-severity.rank(record.disease), record.time_to_reach)

def compare_patients(a: PatientRecord, b: PatientRecord, severity: SeverityTable) -> int:
    """Return -1 if ``a`` is served before ``b``, 1 if after, 0 if equivalent."""
    key_a = priority_key(a, severity)
    key_b = priority_key(b, severity)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0

def has_higher_priority(a: PatientRecord, b: PatientRecord, severity: SeverityTable) -> bool:
    """True when ``a`` strictly precedes ``b``."""
    return compare_patients(a, b, severity) < 0
