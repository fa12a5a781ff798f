from pydantic import BaseModel, ConfigDict
from typing import Optional

FIELD_SEPARATOR = ","

class Credential(BaseModel):
    """Username, password and date of birth as stored in the credential file.
    
    Fields are written verbatim with no escaping, so a value containing a
    comma cannot be read back faithfully.
    """
    
    model_config = ConfigDict(frozen=True)
    
    username: str
    password: str
    date_of_birth: str
    
    def __repr__(self):
        # Password is never shown
        return f"<Credential(username='{self.username}', date_of_birth='{self.date_of_birth}')>"
    
    def to_line(self) -> str:
        return FIELD_SEPARATOR.join((self.username, self.password, self.date_of_birth))
    
    @classmethod
    def from_line(cls, line: str) -> Optional["Credential"]:
        """Parse one stored line; the first three comma-separated fields are used."""
        line = line.rstrip("\r\n")
        if not line:
            return None
        fields = line.split(FIELD_SEPARATOR)
        fields += [""] * (3 - len(fields))
        return cls(username=fields[0], password=fields[1], date_of_birth=fields[2])
    
    def matches(self, other: "Credential") -> bool:
        """Exact match of all three fields."""
        return (
            self.username == other.username
            and self.password == other.password
            and self.date_of_birth == other.date_of_birth
        )
