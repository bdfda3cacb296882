"""Collect non-fatal problems found while transforming a section."""

from __future__ import annotations

from dataclasses import dataclass, field

from dewey2md.schemas import Diagnostic, DiagnosticKind


@dataclass
class DiagnosticLog:
    """Diagnostics for one section, returned alongside its Markdown."""

    section: str = ""
    records: list[Diagnostic] = field(default_factory=list)

    def report(self, kind: DiagnosticKind, detail: str) -> None:
        self.records.append(Diagnostic(section=self.section, kind=kind, detail=detail))

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [record for record in self.records if record.kind == kind]
