"""Log de diagnóstico local (rastro de seleções e entregas)."""

from .file_log import SEPARATOR, DiagnosticFileLog, NullDiagnosticLog, format_entry

__all__ = [
    "SEPARATOR",
    "DiagnosticFileLog",
    "NullDiagnosticLog",
    "format_entry",
]
