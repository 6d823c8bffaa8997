"""
Resume Tailor - keyword-driven resume tailoring from a master profile

Takes a master career profile and a free-text job description and produces a
trimmed, reordered resume preview emphasizing the most relevant content.

Architecture:
- Intake Context: Job description ingestion and keyword extraction
- Profile Context: Master profile document model, validation and updates
- Targeting Context: Relevance scoring and content selection
- Rendering Context: Preview formatting of tailored output
"""

__version__ = "0.1.0"
