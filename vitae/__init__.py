"""
VITAE - Versioned Interactive Tailoring of Achievement Entries

A local-first resume workspace that keeps a master resume, scores its bullets
against a pasted job description, derives tailored resume variants, and stores
the resulting versions alongside job applications and review comments.

Architecture:
- Templating Context: Resume document structure, defaults and shape repair
- Intake Context: Job description ingestion and token sets
- Targeting Context: Bullet scoring, ranking, selection and tailoring
- Rendering Context: Preview derivation for print/export consumers
- Persistence Context: Record stores for versions, applications and comments
"""

__version__ = "0.1.0"
