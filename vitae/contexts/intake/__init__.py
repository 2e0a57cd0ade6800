"""
Intake Context

Responsibilities:
- Ingests pasted job descriptions
- Normalizes them into a lower-cased string and a deduplicated token set
- Provides sample job descriptions
- Resolves a job description from pasted text, a file or a sample

Owns: Job description preparation
Never: Scores resume content or modifies documents
"""

from vitae.contexts.intake.job_data_structure import JobDescription
from vitae.contexts.intake.loader import LoadedJobDescription, load_job_description
from vitae.contexts.intake.samples import (
    SAMPLE_JOB_DESCRIPTIONS,
    SampleJobDescription,
    get_sample_job_description,
)

__all__ = [
    "JobDescription",
    "LoadedJobDescription",
    "load_job_description",
    "SAMPLE_JOB_DESCRIPTIONS",
    "SampleJobDescription",
    "get_sample_job_description",
]
