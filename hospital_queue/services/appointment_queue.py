import heapq
import itertools
import logging
from typing import Iterator, List, Optional, Tuple

from ..core.severity import SeverityTable
from ..models.patient import PatientRecord, priority_key

logger = logging.getLogger(__name__)

# (negated rank, time to reach, insertion order, record)
_HeapEntry = Tuple[int, int, int, PatientRecord]

class AppointmentQueue:
    """Priority queue of booked appointments.
    
    The most severe disease comes first; among equal severity the patient
    closest to the hospital comes first. Records with the same rank and
    travel time keep their insertion order. Reading the queue never removes
    anything: there is no dequeue operation, bookings only accumulate.
    """
    
    def __init__(self, severity: SeverityTable):
        self.severity = severity
        self._heap: List[_HeapEntry] = []
        self._insertion_order = itertools.count()
    
    def insert(self, record: PatientRecord) -> None:
        """Add a record in O(log n). Raises UnknownDiseaseError for unlisted diseases."""
        neg_rank, time_to_reach = priority_key(record, self.severity)
        entry = (neg_rank, time_to_reach, next(self._insertion_order), record)
        heapq.heappush(self._heap, entry)
        logger.debug(f"Queued appointment {record.appointment_number} (size={len(self._heap)})")
    
    def peek(self) -> Optional[PatientRecord]:
        """Return the highest-priority record without removing it."""
        if not self._heap:
            return None
        return self._heap[0][-1]
    
    def peek_all(self) -> List[PatientRecord]:
        """Return every record, highest priority first, leaving the queue untouched."""
        return [entry[-1] for entry in sorted(self._heap)]
    
    def __iter__(self) -> Iterator[PatientRecord]:
        return iter(self.peek_all())
    
    def __len__(self) -> int:
        return len(self._heap)
    
    def __bool__(self) -> bool:
        return bool(self._heap)
    
    def __repr__(self):
        return f"<AppointmentQueue(size={len(self._heap)})>"
