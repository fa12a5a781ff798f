import logging
from pathlib import Path
from pydantic import BaseModel
from typing import Optional, Union

from ..core.results import StorageResult
from ..core.severity import SeverityTable
from ..models.patient import PatientRecord
from .appointment_queue import AppointmentQueue
from .snapshot import write_snapshot

logger = logging.getLogger(__name__)

class AppointmentSequence:
    """Hands out appointment numbers: start, start + 1, ... Never reused."""
    
    def __init__(self, start: int = 1):
        if start <= 0:
            raise ValueError("Appointment numbers start at a positive integer")
        self.start = start
        self._next = start
    
    def next_number(self) -> int:
        number = self._next
        self._next += 1
        return number
    
    def peek(self) -> int:
        """The number the next booking will receive."""
        return self._next
    
    def __repr__(self):
        return f"<AppointmentSequence(start={self.start}, next={self._next})>"

class BookingResult(BaseModel):
    record: PatientRecord
    snapshot: StorageResult
    
    @property
    def ok(self) -> bool:
        return self.snapshot.ok

class BookingService:
    """Creates appointments, queues them, and snapshots the queue to disk."""
    
    def __init__(
        self,
        queue: AppointmentQueue,
        snapshot_file: Union[str, Path],
        sequence: Optional[AppointmentSequence] = None,
    ):
        self.queue = queue
        self.snapshot_file = Path(snapshot_file)
        self.sequence = sequence or AppointmentSequence()
    
    @property
    def severity(self) -> SeverityTable:
        return self.queue.severity
    
    def book_appointment(self, name: str, disease: str, time_to_reach: int) -> BookingResult:
        """Queue a new appointment and rewrite the snapshot file.
        
        The disease is checked before a number is drawn, so an unknown
        disease raises UnknownDiseaseError (and a non-positive travel time a
        pydantic ValidationError) without consuming a number or touching
        the queue. A snapshot failure is reported in the result;
        the appointment itself stays booked.
        """
        self.severity.rank(disease)
        record = PatientRecord(
            name=name,
            disease=disease,
            time_to_reach=time_to_reach,
            appointment_number=self.sequence.peek(),
        )
        self.sequence.next_number()
        self.queue.insert(record)
        logger.info(
            f"Booked appointment {record.appointment_number} for {record.name} "
            f"({record.disease}, {record.time_to_reach} min)"
        )
        
        snapshot = self.save_queue()
        return BookingResult(record=record, snapshot=snapshot)
    
    def save_queue(self) -> StorageResult:
        """Write the full ordered queue to the snapshot file."""
        return write_snapshot(self.snapshot_file, self.queue.peek_all())
