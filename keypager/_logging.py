import hashlib
import logging

# Create the library logger
logger = logging.getLogger("keypager")

# Add NullHandler to prevent "No handlers could be found" warnings
# if the application doesn't configure logging.
logger.addHandler(logging.NullHandler())


def redact_key(key: str) -> str:
    """
    Redacts a page key for logging.
    Page keys are opaque continuation tokens and may embed record identifiers,
    so only a short hash is emitted. Hashing keeps log lines correlatable.
    """
    if key == "":
        return "<empty>"
    try:
        return hashlib.sha256(key.encode("utf-8")).hexdigest()[:8]
    except Exception:
        return "<redaction_failed>"
