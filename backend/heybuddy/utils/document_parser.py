"""
Upload boundary: turn uploaded bytes into text the extractor can scan.
"""
import re

# C0 controls except tab, LF, form feed and CR; plus DEL
FORBIDDEN_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0e-\x1f\x7f]")


class DocumentDecodeError(ValueError):
    """Uploaded bytes are not a plain-text document."""


def decode_text_document(file_content: bytes) -> str:
    """
    Decode an uploaded file as UTF-8 text.

    Raises:
        DocumentDecodeError: the bytes are not valid UTF-8 or contain
            control characters that never appear in a text document
            (binary formats such as PDF or DOCX end up here).
    """
    try:
        text = file_content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise DocumentDecodeError(f"File is not valid UTF-8 text (byte offset {e.start})") from e

    bad = FORBIDDEN_CONTROL_CHARS.search(text)
    if bad:
        raise DocumentDecodeError(
            f"File contains a forbidden control character {bad.group(0)!r} at position {bad.start()}"
        )

    return text
