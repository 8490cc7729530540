"""Report generation as a fixed sequence of steps that subclasses fill in."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO


class Report(ABC):
    """Gathers data, formats it and saves it, always in that order."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.messages: list[str] = []
        self.data_gathered = False
        self.formatted = False
        self.saved = False

    def generate(self) -> None:
        """Run every step of the report."""
        self.gather_data()
        self.format_report()
        self.save_report()

    @abstractmethod
    def gather_data(self) -> None:
        """Collect what the report needs."""

    @abstractmethod
    def format_report(self) -> None:
        """Lay the collected data out in the report's format."""

    @abstractmethod
    def save_report(self) -> None:
        """Store the finished report."""

    def _announce(self, message: str) -> None:
        self.messages.append(message)
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(message + "\n")


class HtmlReport(Report):
    """A report laid out and saved as HTML."""

    def gather_data(self) -> None:
        self._announce("Gathering data for HTML report...")
        self.data_gathered = True

    def format_report(self) -> None:
        self._announce("Formatting report as HTML...")
        self.formatted = True

    def save_report(self) -> None:
        self._announce("Saving report as HTML file...")
        self.saved = True


class PdfReport(Report):
    """A report laid out and saved as PDF."""

    def gather_data(self) -> None:
        self._announce("Gathering data for PDF report...")
        self.data_gathered = True

    def format_report(self) -> None:
        self._announce("Formatting report as PDF...")
        self.formatted = True

    def save_report(self) -> None:
        self._announce("Saving report as PDF file...")
        self.saved = True