"""Error definitions and handling for Git Fame."""

from typing import Any, Dict, List, Optional


class GitFameError(Exception):
    """Base exception for Git Fame errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with code, message, and optional details."""
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        result = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class ConfigurationError(GitFameError):
    """An option value is not one of the supported choices."""

    def __init__(self, option: str, value: str, allowed: List[str]):
        super().__init__(
            code="CONFIGURATION_INVALID",
            message=f"invalid value for --{option}: {value!r}",
            details={"option": option, "value": value, "allowed": allowed},
        )


class CollaboratorFailure(GitFameError):
    """An external git call failed or returned unusable data."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="COLLABORATOR_FAILED", message=message, details=details)


class GitCommandError(CollaboratorFailure):
    """Git could not be run or exited with a non-zero status."""

    def __init__(self, args: List[str], reason: str, returncode: Optional[int] = None):
        super().__init__(
            message=f"git {' '.join(args)} failed: {reason}",
            details={"args": args, "reason": reason, "returncode": returncode},
        )
        self.returncode = returncode


class MalformedOutputError(CollaboratorFailure):
    """Git produced output that does not match the expected format."""

    def __init__(self, command: str, output: str):
        super().__init__(
            message=f"unexpected output from git {command}",
            details={"command": command, "output": output},
        )


class LanguageTableError(GitFameError):
    """The language extension table is missing or invalid."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            code="LANGUAGE_TABLE_INVALID",
            message=f"cannot load language table {path}: {reason}",
            details={"path": path, "reason": reason},
        )
