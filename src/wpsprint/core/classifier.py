from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Tuple, Union

from .errors import UnsupportedType


class DocumentKind(str, Enum):
    SPREADSHEET = "spreadsheet"
    WORD_PROCESSOR = "word_processor"


@dataclass(frozen=True)
class DocumentTypeSpec:
    kind: DocumentKind
    executable_name: str
    entry_point: str


SPREADSHEET = DocumentTypeSpec(DocumentKind.SPREADSHEET, "et.exe", "KET.Application")
WORD_PROCESSOR = DocumentTypeSpec(DocumentKind.WORD_PROCESSOR, "wps.exe", "KWps.Application")

DOCUMENT_TYPES: Dict[Tuple[str, ...], DocumentTypeSpec] = {
    (".xlsx", ".xls", ".et"): SPREADSHEET,
    (".docx", ".doc", ".wps"): WORD_PROCESSOR,
}

SUPPORTED_EXTENSIONS: Tuple[str, ...] = tuple(ext for extensions in DOCUMENT_TYPES for ext in extensions)


def classify(file_path: Union[str, Path]) -> DocumentTypeSpec:
    """
    Map a file's extension to the WPS component that prints it.

    Raises:
        UnsupportedType: the extension is not in the lookup table.
    """
    ext = Path(file_path).suffix.lower()
    for extensions, spec in DOCUMENT_TYPES.items():
        if ext in extensions:
            return spec
    raise UnsupportedType(ext, SUPPORTED_EXTENSIONS)
