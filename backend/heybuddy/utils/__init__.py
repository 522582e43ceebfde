from .document_parser import decode_text_document, DocumentDecodeError
from .syllabus_extractor import extract_syllabus

__all__ = [
    "decode_text_document", "DocumentDecodeError",
    "extract_syllabus",
]
