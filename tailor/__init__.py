"""
TAILOR - Targeted Assembly of Individualized Lists Of Relevant experience

A domain-driven resume targeting system that scores a candidate's work history
against a job description and selects the content worth putting on the page.

Architecture:
- Intake Context: Job requirements records and keyword-based extraction
- History Context: Candidate job history and skills inventory normalization
- Targeting Context: Relevance scoring and bounded content selection
"""

__version__ = "0.1.0"
