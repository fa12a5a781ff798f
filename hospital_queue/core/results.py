from pydantic import BaseModel
from typing import Optional, Union


class StorageError(BaseModel):
    """A file that could not be opened, read or written."""
    path: str
    reason: str

    @classmethod
    def from_exception(cls, path: str, exc: Union[OSError, UnicodeError]) -> "StorageError":
        """Describe an open failure, or text that could not be decoded or encoded."""
        if isinstance(exc, UnicodeError):
            return cls(path=str(path), reason=f"Unable to process file {path}: {exc}")
        reason = exc.strerror or str(exc)
        return cls(path=str(path), reason=f"Unable to open file {path}: {reason}")


class StorageResult(BaseModel):
    ok: bool = True
    error: Optional[StorageError] = None

    @classmethod
    def success(cls) -> "StorageResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: StorageError) -> "StorageResult":
        return cls(ok=False, error=error)


class LoginResult(BaseModel):
    authenticated: bool = False
    username: Optional[str] = None
    error: Optional[StorageError] = None

    @property
    def ok(self) -> bool:
        """True when the credential file could be consulted."""
        return self.error is None
