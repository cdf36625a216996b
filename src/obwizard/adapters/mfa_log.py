"""ABOUTME: Append-only debug log of verification codes that were read from the inbox
ABOUTME: Nothing reads it back; it is there to help when a run fails"""

from abc import ABC, abstractmethod
from datetime import UTC, datetime
from pathlib import Path

from obwizard.domain.mfa import format_log_line
from obwizard.service_layer.exceptions import LogWriteFailure


class AbstractMfaLog(ABC):
    @abstractmethod
    def record(self, email_prefix: str, code: str, at: datetime | None = None) -> None:
        """Append one line for a code that was found.

        Callers treat any failure here as non-fatal.

        Raises:
            LogWriteFailure: if the line could not be written
        """
        raise NotImplementedError


class FileMfaLog(AbstractMfaLog):
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def record(self, email_prefix: str, code: str, at: datetime | None = None) -> None:
        line = format_log_line(email_prefix, code, at or datetime.now(UTC))
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as log_file:
                log_file.write(line + "\n")
        except OSError as error:
            raise LogWriteFailure(f"Could not write to {self.path}: {error}") from error


class InMemoryMfaLog(AbstractMfaLog):
    def __init__(self) -> None:
        self.lines: list[str] = []

    def record(self, email_prefix: str, code: str, at: datetime | None = None) -> None:
        self.lines.append(format_log_line(email_prefix, code, at or datetime.now(UTC)))
