"""
Job description sources for the command-line tools.

A job description comes from exactly one of: pasted text, a text file, or a
named sample.
"""

from pathlib import Path
from typing import NamedTuple, Optional

from vitae.contexts.intake.samples import get_sample_job_description


class LoadedJobDescription(NamedTuple):
    label: str
    text: str


def load_job_description(
    text: Optional[str] = None,
    job_file: Optional[Path] = None,
    sample: Optional[str] = None,
) -> LoadedJobDescription:
    """
    Resolve a job description from one source.

    Args:
        text: Pasted job description text
        job_file: Path to a UTF-8 text file
        sample: Sample label (see SAMPLE_JOB_DESCRIPTIONS)

    Returns:
        LoadedJobDescription(label, text), where label names the source

    Raises:
        ValueError: If zero or several sources are given, or the sample is unknown
        FileNotFoundError: If job_file does not exist
    """
    given = [source for source in (text, job_file, sample) if source is not None]
    if len(given) != 1:
        raise ValueError("Provide exactly one job description source: text, file or sample")

    if text is not None:
        return LoadedJobDescription(label="(pasted)", text=text)

    if job_file is not None:
        if not job_file.exists():
            raise FileNotFoundError(f"Job description file not found: {job_file}")
        return LoadedJobDescription(label=str(job_file), text=job_file.read_text(encoding="utf-8"))

    chosen = get_sample_job_description(sample)
    return LoadedJobDescription(label=f"sample: {chosen.label}", text=chosen.text)
