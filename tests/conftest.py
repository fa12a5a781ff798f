import io

import pytest

from hospital_queue.console.prompts import ConsoleIO
from hospital_queue.console.session import ConsoleSession
from hospital_queue.core.config import Settings
from hospital_queue.core.severity import SeverityTable
from hospital_queue.services.appointment_queue import AppointmentQueue
from hospital_queue.services.auth_service import AuthService
from hospital_queue.services.booking_service import BookingService


class ScriptedIO(ConsoleIO):
    """ConsoleIO fed from a list of lines, capturing both output streams."""

    def __init__(self, lines):
        self._lines = iter(lines)
        super().__init__(read_line=self._next_line, out=io.StringIO(), err=io.StringIO())

    def _next_line(self):
        try:
            return next(self._lines) + "\n"
        except StopIteration:
            raise EOFError("script exhausted")

    @property
    def output(self):
        return self.out.getvalue()

    @property
    def errors(self):
        return self.err.getvalue()

    def queue_lines(self):
        return [line for line in self.output.splitlines() if line.startswith("Appointment Number:")]


@pytest.fixture
def severity():
    return SeverityTable()


@pytest.fixture
def queue(severity):
    return AppointmentQueue(severity)


@pytest.fixture
def snapshot_file(tmp_path):
    return tmp_path / "patient_queue.csv"


@pytest.fixture
def credentials_file(tmp_path):
    return tmp_path / "patients.csv"


@pytest.fixture
def booking_service(queue, snapshot_file):
    return BookingService(queue, snapshot_file)


@pytest.fixture
def auth_service(credentials_file):
    return AuthService(credentials_file)


@pytest.fixture
def test_settings(credentials_file, snapshot_file):
    return Settings(
        CREDENTIALS_FILE=str(credentials_file),
        QUEUE_SNAPSHOT_FILE=str(snapshot_file),
    )


@pytest.fixture
def run_session(test_settings):
    """Run a console session over scripted input; returns (session, io)."""
    def _run(lines, config=None):
        scripted = ScriptedIO(lines)
        session = ConsoleSession.from_settings(config or test_settings, io=scripted)
        session.run()
        return session, scripted
    return _run
