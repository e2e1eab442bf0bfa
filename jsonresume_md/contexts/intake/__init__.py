"""
Intake Context

Responsibilities:
- Reads resume documents from JSON/YAML files
- Maps the untyped JSON Resume structure into a typed, fully-optional model

Owns: Resume file decoding, ResumeDocument model
Never: Produces Markdown
"""

from jsonresume_md.contexts.intake.loader import load_resume_file
from jsonresume_md.contexts.intake.resume_data_structure import ResumeDocument

__all__ = ["load_resume_file", "ResumeDocument"]
