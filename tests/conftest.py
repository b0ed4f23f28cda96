"""
Pytest fixtures shared across all test modules.
"""
import pytest

from contact_extractor.config import ExtractorConfig


# ---------------------------------------------------------------------------
# Sample texts
# ---------------------------------------------------------------------------

@pytest.fixture
def repeated_email_text():
    """The same address three times, twice glued to punctuation."""
    return (
        "hello my email is frank.roosevelt@whitehouse.gov, one more time that is "
        "frank.roosevelt@whitehouse.gov.  Just to be sure... frank.roosevelt@whitehouse.gov"
    )


@pytest.fixture
def mixed_case_email_text():
    return "my tall email is EXAMPLE@EXAMPLE.COM. My short email is example@example.com."


@pytest.fixture
def contact_text():
    """A signature block mixing emails and phone numbers."""
    return (
        "Thanks for reaching out!\n"
        "Jane Doe <Jane.Doe@Example.org>\n"
        "Office: 916.222.4444  Mobile: (800)555-1234\n"
        "Fax: 916.222.4444\n"
        "Support: support@example.org support@example.org\n"
    )


# ---------------------------------------------------------------------------
# Config / request fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def default_config():
    return ExtractorConfig.default()


@pytest.fixture
def sample_input_dict(contact_text):
    """A valid ExtractionInput payload for integration tests."""
    return {
        "request_id": "REQ-001",
        "text": contact_text,
    }
