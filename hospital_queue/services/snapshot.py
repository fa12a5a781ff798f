import logging
from pathlib import Path
from typing import Iterable, List, Union

from ..core.results import StorageError, StorageResult
from ..models.patient import PatientRecord

logger = logging.getLogger(__name__)

def format_snapshot_line(record: PatientRecord) -> str:
    """``appointmentNumber,name,disease,timeToReach``"""
    return f"{record.appointment_number},{record.name},{record.disease},{record.time_to_reach}"

def format_snapshot(records: Iterable[PatientRecord]) -> List[str]:
    return [format_snapshot_line(record) for record in records]

def write_snapshot(path: Union[str, Path], records: Iterable[PatientRecord]) -> StorageResult:
    """Overwrite ``path`` with one line per record, in the order given.
    
    Callers pass the queue's ordered contents, so the first line is always
    the highest-priority appointment. Failures come back as a result value.
    """
    lines = format_snapshot(records)
    try:
        # Encode first so an unencodable name leaves the previous snapshot intact
        data = "".join(line + "\n" for line in lines).encode("utf-8")
        with open(path, "wb") as out_file:
            out_file.write(data)
    except (OSError, UnicodeError) as exc:
        logger.warning(f"Failed to write queue snapshot to {path}: {exc}")
        return StorageResult.failure(StorageError.from_exception(str(path), exc))
    
    logger.info(f"Wrote queue snapshot with {len(lines)} appointment(s) to {path}")
    return StorageResult.success()
