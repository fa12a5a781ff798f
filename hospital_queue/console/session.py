import logging
from typing import Callable, Dict, Optional

from ..core.config import Settings, settings as default_settings
from ..core.severity import load_severity_table
from ..models.credential import Credential
from ..services.appointment_queue import AppointmentQueue
from ..services.auth_service import AuthService
from ..services.booking_service import AppointmentSequence, BookingService
from .prompts import ConsoleIO, read_disease, read_int, read_positive_int

logger = logging.getLogger(__name__)

MENU = (
    "\nMenu:\n"
    "1. Register patient\n"
    "2. Login\n"
    "3. Book appointment\n"
    "4. Display patient queue\n"
    "5. Exit\n"
)

EXIT_CHOICE = 5

class ConsoleSession:
    """Menu loop dispatching to registration, login, booking and display.
    
    Every action runs to completion before the menu is shown again. Booking
    requires a successful login earlier in the same session.
    """
    
    def __init__(
        self,
        auth_service: AuthService,
        booking_service: BookingService,
        io: Optional[ConsoleIO] = None,
    ):
        self.auth_service = auth_service
        self.booking_service = booking_service
        self.io = io or ConsoleIO()
        self.logged_in = False
        self.current_user: Optional[str] = None
        self._handlers: Dict[int, Callable[[], None]] = {
            1: self.register,
            2: self.login,
            3: self.book_appointment,
            4: self.display_queue,
        }
    
    @classmethod
    def from_settings(cls, config: Optional[Settings] = None, io: Optional[ConsoleIO] = None) -> "ConsoleSession":
        """Wire a session from configuration."""
        config = config or default_settings
        severity = load_severity_table(config.DISEASE_SEVERITY)
        booking_service = BookingService(
            queue=AppointmentQueue(severity),
            snapshot_file=config.QUEUE_SNAPSHOT_FILE,
            sequence=AppointmentSequence(config.FIRST_APPOINTMENT_NUMBER),
        )
        return cls(AuthService(config.CREDENTIALS_FILE), booking_service, io=io)
    
    @property
    def queue(self) -> AppointmentQueue:
        return self.booking_service.queue
    
    def run(self) -> int:
        """Run until the user exits or input ends. Returns the exit status."""
        logger.info("Console session started")
        try:
            while True:
                self.io.write(MENU + "Enter your choice: ")
                if not self.handle_choice(read_int(self.io)):
                    break
        except EOFError:
            self.io.say()
            self.io.say("Exiting program.")
        logger.info("Console session ended")
        return 0
    
    def handle_choice(self, choice: int) -> bool:
        """Dispatch one menu choice. Returns False when the session should end."""
        if choice == EXIT_CHOICE:
            self.io.say("Exiting program.")
            return False
        
        handler = self._handlers.get(choice)
        if handler is None:
            self.io.say("Invalid choice. Please enter a number between 1 and 5.")
            return True
        
        handler()
        return True
    
    def _ask_credential(self) -> Credential:
        username = self.io.ask("Enter username: ")
        password = self.io.ask("Enter password: ")
        date_of_birth = self.io.ask("Enter date of birth (DD/MM/YYYY): ")
        return Credential(username=username, password=password, date_of_birth=date_of_birth)
    
    def register(self) -> None:
        credential = self._ask_credential()
        result = self.auth_service.register_user(credential)
        if not result.ok:
            self.io.error(result.error.reason)
            return
        self.io.say("Registration successful!")
    
    def login(self) -> None:
        credential = self._ask_credential()
        result = self.auth_service.authenticate_user(credential)
        if not result.ok:
            # Login state is left as it was
            self.io.error(result.error.reason)
            return
        
        self.logged_in = result.authenticated
        self.current_user = result.username
        if not self.logged_in:
            self.io.say("Invalid username or password.")
    
    def book_appointment(self) -> None:
        if not self.logged_in:
            self.io.say("Please login first.")
            return
        
        name = self.io.ask("Enter patient name: ")
        self.io.write("Enter disease: ")
        disease = read_disease(self.io, self.booking_service.severity)
        self.io.write("Enter approximate time to reach hospital (in minutes): ")
        time_to_reach = read_positive_int(self.io)
        
        result = self.booking_service.book_appointment(name, disease, time_to_reach)
        if not result.ok:
            self.io.error(result.snapshot.error.reason)
            return
        self.io.say("Appointment booked successfully!")
    
    def display_queue(self) -> None:
        self.io.say("Priority Queue:")
        for record in self.queue.peek_all():
            self.io.say(
                f"Appointment Number: {record.appointment_number}, Name: {record.name}, "
                f"Disease: {record.disease}, Time to reach: {record.time_to_reach}"
            )
