"""Thread-safe console output and error collection shared by the workers"""
import sys
from threading import Lock
from typing import List, Optional, TextIO


class ConsoleSink:
    """Serializes lines printed from several worker threads"""

    def __init__(self, stream: Optional[TextIO] = None, error_stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._error_stream = error_stream
        self._lock = Lock()

    def print(self, message: str) -> None:
        with self._lock:
            print(message, file=self._stream or sys.stdout)

    def alert(self, title: str, message: str) -> None:
        """Surface a message to the operator on stderr"""
        with self._lock:
            print(f"{title}: {message}", file=self._error_stream or sys.stderr)


class ErrorLog:
    """
    Append-only collection of per-file error messages.

    Every recorded error is printed immediately and kept for the summary
    printed after all workers finish.
    """

    def __init__(self, console: ConsoleSink) -> None:
        self._console = console
        self._messages: List[str] = []
        self._lock = Lock()

    def record(self, file_name: str, message: str) -> str:
        """Record an error for a file and return the formatted message"""
        formatted = f"File: '{file_name}': {message}"
        self._console.print(formatted)
        with self._lock:
            self._messages.append(formatted)
        return formatted

    @property
    def messages(self) -> List[str]:
        with self._lock:
            return list(self._messages)

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)
