"""Contact extraction sub-package — public API."""
from contact_extractor.extraction.email_detector import find_emails
from contact_extractor.extraction.phone_detector import find_phone_nums
from contact_extractor.extraction.pipeline import run_extraction
from contact_extractor.extraction.predicates import ContactClassifier, is_email, is_phone

__all__ = [
    "find_emails",
    "find_phone_nums",
    "is_email",
    "is_phone",
    "ContactClassifier",
    "run_extraction",
]
