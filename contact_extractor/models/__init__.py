"""Domain models — public API."""
from contact_extractor.models.candidate import Candidate
from contact_extractor.models.input_schema import ExtractionInput
from contact_extractor.models.output_schema import ExtractionOutput

__all__ = ["Candidate", "ExtractionInput", "ExtractionOutput"]
