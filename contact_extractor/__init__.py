"""Extract probable email addresses and phone numbers from free text."""
from contact_extractor.config import PACKAGE_VERSION, ExtractorConfig
from contact_extractor.extraction import (
    ContactClassifier,
    find_emails,
    find_phone_nums,
    is_email,
    is_phone,
    run_extraction,
)

__version__ = PACKAGE_VERSION

__all__ = [
    "ExtractorConfig",
    "ContactClassifier",
    "find_emails",
    "find_phone_nums",
    "is_email",
    "is_phone",
    "run_extraction",
]
