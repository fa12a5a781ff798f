from pydantic_settings import BaseSettings
from typing import Optional, Dict
import logging

# Reference severity ranks, higher is more urgent
DEFAULT_DISEASE_SEVERITY: Dict[str, int] = {
    "coughing": 1,
    "cold": 1,
    "stomach ache": 2,
    "headache": 3,
    "vomiting": 4,
    "diarrhea": 4,
    "loss in consciousness": 5,
    "bleeding": 7,
    "concussion": 8,
    "heart ache": 8,
}

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Hospital Appointment Queue"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    
    # Storage
    CREDENTIALS_FILE: str = "patients.csv"
    QUEUE_SNAPSHOT_FILE: str = "patient_queue.csv"
    
    # Booking
    FIRST_APPOINTMENT_NUMBER: int = 1
    DISEASE_SEVERITY: Dict[str, int] = dict(DEFAULT_DISEASE_SEVERITY)
    
    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FILE: Optional[str] = None
    
    @property
    def log_level_value(self) -> int:
        """Numeric logging level; DEBUG forces logging.DEBUG, unknown names fall back to WARNING."""
        if self.DEBUG:
            return logging.DEBUG
        return getattr(logging, self.LOG_LEVEL.upper(), logging.WARNING)
    
    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()
