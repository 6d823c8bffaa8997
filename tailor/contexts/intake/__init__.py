"""
Intake Context

Responsibilities:
- Ingests job descriptions from text, files, or structured data
- Normalizes raw job description text
- Extracts the weighted keyword set used by the Targeting context

Owns: Job description input, keyword extraction logic
Never: Makes targeting decisions or reads the master profile
"""

from tailor.contexts.intake.job_input import JobInput
from tailor.contexts.intake.keyword_extractor import KeywordSet, build_tokenizer, extract_keywords

__all__ = ["JobInput", "KeywordSet", "build_tokenizer", "extract_keywords"]
