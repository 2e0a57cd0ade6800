"""
Sample job descriptions for demos and tests.

Each sample pairs a label with the company/role it would be filed under in
the application tracker.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SampleJobDescription:
    label: str
    company: str
    role: str
    text: str


SAMPLE_JOB_DESCRIPTIONS = (
    SampleJobDescription(
        label="Product Intern",
        company="Northstar Health",
        role="Product Strategy Intern",
        text=(
            "Northstar Health is seeking a Product Strategy Intern to support market analysis, "
            "roadmap planning, and cross-functional initiatives. Responsibilities include analyzing "
            "funnel data in SQL, building Excel models, synthesizing insights into presentations, "
            "partnering with engineering and operations, and communicating recommendations to "
            "stakeholders. Candidates should demonstrate strong problem solving, communication, "
            "data analysis, and project management skills."
        ),
    ),
    SampleJobDescription(
        label="Consulting Analyst",
        company="Helio Advisory",
        role="Analyst",
        text=(
            "Helio Advisory is hiring an Analyst to support strategy engagements for growth-stage "
            "companies. The role includes market sizing, competitor benchmarking, customer research, "
            "synthesis of findings, and executive presentations. Ideal candidates have leadership "
            "experience, structured thinking, Excel proficiency, communication skills, and comfort "
            "working on fast-paced cross-functional teams."
        ),
    ),
    SampleJobDescription(
        label="Data/Product Analyst",
        company="Pulse Labs",
        role="Product Data Analyst Intern",
        text=(
            "Pulse Labs is looking for a Product Data Analyst Intern to help evaluate user behavior, "
            "identify drop-off points, and support experiment design. You will query product data "
            "using SQL, create dashboards, present insights, and collaborate with product managers "
            "and engineers. Strong analytical thinking, SQL, Excel, communication, and stakeholder "
            "alignment are required."
        ),
    ),
)


def get_sample_job_description(label: str) -> SampleJobDescription:
    """
    Look up a sample by label (case-insensitive).

    Raises:
        ValueError: If no sample has that label
    """
    for sample in SAMPLE_JOB_DESCRIPTIONS:
        if sample.label.lower() == label.lower():
            return sample
    available = [sample.label for sample in SAMPLE_JOB_DESCRIPTIONS]
    raise ValueError(f"Sample '{label}' not found. Available samples: {available}")
