"""Media type resolution and routing predicates for uploads."""

from pathlib import PurePath

PDF = "application/pdf"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
XLS = "application/vnd.ms-excel"
TEXT = "text/plain"

_BY_EXTENSION = {
    "txt": TEXT,
    "pdf": PDF,
    "docx": DOCX,
    "doc": "application/msword",
    "xlsx": XLSX,
    "xlsm": "application/vnd.ms-excel.sheet.macroenabled.12",
    "xls": XLS,
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
    "csv": "text/csv",
    "json": "application/json",
}

_SPREADSHEET_TYPES = frozenset({XLSX, XLS, "application/vnd.ms-excel.sheet.macroenabled.12"})
_SPREADSHEET_EXTENSIONS = frozenset({"xlsx", "xlsm", "xls"})


def _extension(file_name: str) -> str:
    return PurePath(file_name).suffix.lower().lstrip(".")


def guess_media_type(file_name: str) -> str:
    """Media type from the file extension; plain text when unknown."""
    return _BY_EXTENSION.get(_extension(file_name), TEXT)


def is_binary_for_model(media_type: str) -> bool:
    """Images and PDFs go to the model as binary content."""
    if media_type == "image/svg+xml":
        return False
    return media_type.startswith("image/") or media_type == PDF


def is_spreadsheet(media_type: str, file_name: str) -> bool:
    return media_type in _SPREADSHEET_TYPES or _extension(file_name) in _SPREADSHEET_EXTENSIONS


def is_word_document(media_type: str, file_name: str) -> bool:
    return media_type == DOCX or _extension(file_name) == "docx"


def is_legacy_spreadsheet(media_type: str, file_name: str) -> bool:
    """BIFF ``.xls`` workbooks; a modern spreadsheet extension wins over the media type."""
    extension = _extension(file_name)
    if extension in _SPREADSHEET_EXTENSIONS:
        return extension == "xls"
    return media_type == XLS
