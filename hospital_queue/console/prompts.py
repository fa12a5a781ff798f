import sys
from typing import Callable, Optional, TextIO

from ..core.severity import SeverityTable

INVALID_INTEGER = "Invalid input. Please enter a valid integer: "
NOT_POSITIVE = "Input must be a positive integer. Please enter again: "
INVALID_DISEASE = "Invalid disease name. Please enter a valid disease: "

def _read_stdin_line() -> str:
    line = sys.stdin.readline()
    if line == "":
        raise EOFError("end of input")
    return line

class ConsoleIO:
    """Line-oriented console access.
    
    ``read_line`` returns one line of input and raises EOFError when input
    is exhausted. Prompts are written without a trailing newline.
    """
    
    def __init__(
        self,
        read_line: Optional[Callable[[], str]] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ):
        self.read_line = read_line or _read_stdin_line
        self.out = out or sys.stdout
        self.err = err or sys.stderr
    
    def write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()
    
    def say(self, text: str = "") -> None:
        self.write(text + "\n")
    
    def error(self, message: str) -> None:
        self.err.write(f"Error: {message}\n")
        self.err.flush()
    
    def read(self) -> str:
        return self.read_line().strip()
    
    def ask(self, prompt: str) -> str:
        self.write(prompt)
        return self.read()

def read_int(io: ConsoleIO) -> int:
    """Block until the user enters an integer."""
    while True:
        text = io.read()
        try:
            return int(text)
        except ValueError:
            io.write(INVALID_INTEGER)

def read_positive_int(io: ConsoleIO) -> int:
    """Block until the user enters an integer greater than zero."""
    while True:
        value = read_int(io)
        if value > 0:
            return value
        io.write(NOT_POSITIVE)

def read_disease(io: ConsoleIO, severity: SeverityTable) -> str:
    """Block until the user enters a disease listed in ``severity``."""
    while True:
        disease = io.read()
        if severity.lookup(disease) is not None:
            return disease
        io.write(INVALID_DISEASE)
