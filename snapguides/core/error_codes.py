"""
Structured error codes for document/trace loading and replay runs.
The engine itself never fails; these cover the host boundary. Map to user-facing messages in the UI.
"""

DOCUMENT_NOT_FOUND = "document_not_found"
INVALID_DOCUMENT = "invalid_document"
INVALID_TRACE = "invalid_trace"
ACTIVE_NOT_FOUND = "active_not_found"
RUN_FAILED = "run_failed"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    DOCUMENT_NOT_FOUND: "Document file not found. Check the path.",
    INVALID_DOCUMENT: "Document could not be read. Expect JSON with a 'page' and an 'objects' list.",
    INVALID_TRACE: "Drag trace could not be read. Expect CSV with x,y[,zoom] columns or a JSON list.",
    ACTIVE_NOT_FOUND: "The dragged element id is not in the document (or was filtered out as too small or hidden).",
    RUN_FAILED: "Run failed. Check document and inputs.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
