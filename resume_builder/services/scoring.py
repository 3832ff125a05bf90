from typing import List

from resume_builder.models.resume import FitScore, GeneratedResume
from resume_builder.services.keywords import extract_keywords


def resume_text(resume: GeneratedResume) -> str:
    """Lowercased text the fit score is matched against."""
    parts: List[str] = [resume.summary]
    for exp in resume.workExperience:
        parts.append(exp.description)
        parts.extend(exp.achievements)
        parts.extend(exp.technologies)
    parts.extend(resume.skills.technical)
    parts.extend(resume.skills.soft)
    return " ".join(parts).lower()


def score_resume(resume: GeneratedResume, job_description: str) -> FitScore:
    """Share of job-description keywords found in the resume, 0-100.

    Matching is case-insensitive substring containment. A description
    that yields no keywords scores 0.
    """
    keywords = extract_keywords(job_description or "")
    if not keywords:
        return FitScore(score=0)

    text = resume_text(resume)
    matched = [keyword for keyword in keywords if keyword in text]
    missing = [keyword for keyword in keywords if keyword not in text]
    score = round(100 * len(matched) / len(keywords))
    return FitScore(score=max(0, min(100, score)), matched=matched, missing=missing)
