import logging
from pathlib import Path
from typing import Union

from ..core.results import LoginResult, StorageError, StorageResult
from ..models.credential import Credential

logger = logging.getLogger(__name__)

class AuthService:
    """Registers and authenticates patients against a flat credential file.
    
    The file holds one ``username,password,dateOfBirth`` line per
    registration. It is append-only and is opened and closed within each
    call. Passwords are stored and compared in plaintext.
    """
    
    def __init__(self, credentials_file: Union[str, Path]):
        self.credentials_file = Path(credentials_file)
    
    def register_user(self, credential: Credential) -> StorageResult:
        """Append a credential line. Duplicate usernames are not checked."""
        try:
            data = (credential.to_line() + "\n").encode("utf-8")
            with open(self.credentials_file, "ab") as out_file:
                out_file.write(data)
        except (OSError, UnicodeError) as exc:
            logger.warning(f"Registration failed for {credential.username}: {exc}")
            return StorageResult.failure(
                StorageError.from_exception(str(self.credentials_file), exc)
            )
        
        logger.info(f"Registered user {credential.username}")
        return StorageResult.success()
    
    def authenticate_user(self, credential: Credential) -> LoginResult:
        """Succeed iff a stored line matches all three fields exactly.
        
        Undecodable bytes in the file are replaced, so such a line can never
        match but does not stop the search.
        """
        try:
            with open(self.credentials_file, "r", encoding="utf-8", errors="replace", newline="") as in_file:
                for line in in_file:
                    stored = Credential.from_line(line)
                    if stored is not None and stored.matches(credential):
                        logger.info(f"User {credential.username} logged in")
                        return LoginResult(authenticated=True, username=credential.username)
        except OSError as exc:
            logger.warning(f"Could not read credentials from {self.credentials_file}: {exc}")
            return LoginResult(
                authenticated=False,
                error=StorageError.from_exception(str(self.credentials_file), exc),
            )
        
        logger.info(f"Failed login attempt for {credential.username}")
        return LoginResult(authenticated=False)
