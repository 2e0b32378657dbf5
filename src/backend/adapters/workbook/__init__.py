from .parser import WorkbookParseError, parse_workbook, parse_workbook_bytes

__all__ = [
    "WorkbookParseError",
    "parse_workbook",
    "parse_workbook_bytes",
]
