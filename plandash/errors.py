# plandash/errors.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PlandashError(RuntimeError):
    message: str

    def __str__(self) -> str:
        return self.message


class InputFileError(PlandashError):
    """An input document is missing or unreadable."""


class OutputWriteError(PlandashError):
    """The output directory or file could not be written."""
