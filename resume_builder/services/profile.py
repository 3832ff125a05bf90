"""Normalization of caller-supplied job and profile data.

The profile store hands over loosely shaped documents (alias keys, skill
objects, raw ISO dates). Everything here runs at ingress so the pipeline
stages downstream only ever see clean ``JobPosting``/``CandidateProfile``
values.
"""

import logging
import re
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from resume_builder.models.requests import JobRequest
from resume_builder.models.resume import (
    CandidateProfile,
    Certification,
    Education,
    JobPosting,
    Project,
    WorkExperience,
)
from resume_builder.services.errors import InputValidationError

logger = logging.getLogger("uvicorn.error")

DEFAULT_COMPANY = "Target Company"
EXPERIENCE_LEVELS = ("entry", "mid", "senior")
PRESENT = {"present", "current", "now"}

INDUSTRY_KEYWORDS = {
    "technology": ["software", "tech", "developer", "programming", "coding", "engineer"],
    "finance": ["finance", "banking", "investment", "trading", "fintech"],
    "healthcare": ["healthcare", "medical", "hospital", "clinical", "pharma"],
    "consulting": ["consulting", "advisory", "strategy"],
    "education": ["education", "teaching", "academic", "university", "learning"],
}

_COMPANY_PATTERNS = [
    re.compile(r"careers\.([^./]+)\.com"),
    re.compile(r"jobs\.([^./]+)\.com"),
    re.compile(r"https?://(?:www\.)?([^./]+)\.com"),
]

_DATE_FORMATS = ("%Y-%m-%d", "%Y-%m", "%m/%Y", "%m/%d/%Y", "%Y/%m/%d", "%b %Y", "%B %Y", "%Y")


# ---------- Helpers ----------
def parse_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        return None
    text = str(value).strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def format_date(value: Any) -> str:
    """Render a date as MM/YYYY; unparseable values pass through as text."""
    if not value:
        return ""
    parsed = parse_date(value)
    return parsed.strftime("%m/%Y") if parsed else str(value).strip()


def company_from_link(link: Optional[str]) -> str:
    if not link:
        return ""
    for pattern in _COMPANY_PATTERNS:
        match = pattern.search(link)
        if match:
            name = match.group(1)
            return name[:1].upper() + name[1:]
    return ""


def infer_industry(description: str, title: str) -> str:
    text = f"{description or ''} {title or ''}".lower()
    for industry, keywords in INDUSTRY_KEYWORDS.items():
        if any(keyword in text for keyword in keywords):
            return industry
    return "general"


def _is_current(entry: Dict[str, Any]) -> bool:
    if entry.get("current") or entry.get("currentlyWorking"):
        return True
    return str(entry.get("endDate") or "").strip().lower() in PRESENT


def experience_level(work_history: List[Dict[str, Any]], today: Optional[date] = None) -> str:
    """entry (< 2 years), mid (< 5 years) or senior, from summed job durations."""
    today = today or date.today()
    total_months = 0
    for entry in work_history:
        start = parse_date(entry.get("startDate"))
        if not start:
            continue
        end = today if _is_current(entry) else parse_date(entry.get("endDate")) or today
        months = (end.year - start.year) * 12 + (end.month - start.month)
        total_months += max(0, months)

    years = total_months / 12
    if years < 2:
        return "entry"
    if years < 5:
        return "mid"
    return "senior"


def _text(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def _strings(values: Any) -> List[str]:
    if not isinstance(values, list):
        return []
    return [_text(v) for v in values if isinstance(v, (str, int, float)) and _text(v)]


def _names(values: Any, *keys: str) -> List[str]:
    """Flatten a list of strings or objects to their first present name key."""
    names = []
    for value in values if isinstance(values, list) else []:
        if isinstance(value, dict):
            value = next((value[key] for key in keys if value.get(key)), "")
        if _text(value):
            names.append(_text(value))
    return names


def _technical_skills(raw: Dict[str, Any]) -> List[str]:
    if raw.get("technicalSkills"):
        return _names(raw["technicalSkills"], "name")
    skills = []
    skills_raw = raw.get("skills")
    for skill in skills_raw if isinstance(skills_raw, list) else []:
        if isinstance(skill, dict):
            if "technical" not in (skill.get("category"), skill.get("type")):
                continue
            skill = skill.get("name")
        if _text(skill):
            skills.append(_text(skill))
    return skills


def _languages(values: Any) -> List[str]:
    languages = []
    for value in values if isinstance(values, list) else []:
        if isinstance(value, dict):
            name = _text(value.get("name") or value.get("language"))
            level = _text(value.get("proficiency") or value.get("level"))
            value = f"{name} ({level})" if name and level else name
        if _text(value):
            languages.append(_text(value))
    return languages


# ---------- Entries ----------
def _work_experience(entry: Dict[str, Any]) -> WorkExperience:
    responsibilities = entry.get("responsibilities")
    if isinstance(responsibilities, list):
        responsibilities = ". ".join(_strings(responsibilities))
    return WorkExperience(
        jobTitle=_text(entry.get("jobTitle") or entry.get("position")),
        company=_text(entry.get("company") or entry.get("companyName")),
        startDate=format_date(entry.get("startDate")),
        endDate="Present" if _is_current(entry) else format_date(entry.get("endDate")),
        description=_text(entry.get("description") or responsibilities),
        achievements=_strings(entry.get("achievements")),
        technologies=_strings(entry.get("technologies") or entry.get("techStack")),
    )


def _education(entry: Dict[str, Any]) -> Education:
    return Education(
        degree=_text(entry.get("degree")),
        institution=_text(entry.get("institution") or entry.get("school")),
        graduationDate=format_date(entry.get("graduationDate") or entry.get("endDate")),
        gpa=_text(entry.get("gpa") or entry.get("grade")) or None,
        relevantCoursework=_strings(entry.get("relevantCoursework")),
    )


def _certification(entry: Dict[str, Any]) -> Certification:
    return Certification(
        name=_text(entry.get("name") or entry.get("title")),
        issuer=_text(entry.get("issuer") or entry.get("organization") or entry.get("institution")),
        date=format_date(entry.get("date") or entry.get("issueDate") or entry.get("dateCompleted")),
        expiryDate=format_date(entry.get("expiryDate")) or None,
        credentialId=_text(entry.get("credentialId")) or None,
    )


def _project(entry: Dict[str, Any]) -> Project:
    return Project(
        name=_text(entry.get("name") or entry.get("title")),
        description=_text(entry.get("description")),
        technologies=_strings(entry.get("technologies") or entry.get("techStack")),
        link=_text(entry.get("link") or entry.get("githubLink") or entry.get("demoLink")) or None,
        achievements=_strings(entry.get("achievements")),
    )


def _entries(raw: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    values = raw.get(key)
    return [entry for entry in values if isinstance(entry, dict)] if isinstance(values, list) else []


# ---------- Public ----------
def build_job(job: JobRequest) -> JobPosting:
    if not job.jobDescription.strip() or not job.jobTitle.strip():
        raise InputValidationError("jobDescription and jobTitle are required")
    company = _text(job.companyName) or company_from_link(job.jobLink) or DEFAULT_COMPANY
    return JobPosting(
        title=job.jobTitle.strip(),
        description=job.jobDescription.strip(),
        location=_text(job.jobLocation) or None,
        company=company,
        link=_text(job.jobLink) or None,
    )


def normalize_profile(raw: Dict[str, Any], job: JobPosting,
                      today: Optional[date] = None) -> CandidateProfile:
    """Build a ``CandidateProfile`` from profile-store data.

    Raises ``InputValidationError`` when the full name or email is missing.
    Missing industry and experience level are derived from the job text and
    the work history.
    """
    name = _text(raw.get("fullName") or raw.get("name") or raw.get("personalName"))
    email = _text(raw.get("email"))
    if not name or not email:
        raise InputValidationError("candidate full name and email are required")

    work_history = _entries(raw, "workExperience")
    level = _text(raw.get("experienceLevel")).lower()
    if level not in EXPERIENCE_LEVELS:
        level = experience_level(work_history, today)
    industry = _text(raw.get("targetIndustry")).lower() or infer_industry(job.description, job.title)
    social = raw.get("socialLinks") if isinstance(raw.get("socialLinks"), dict) else {}

    profile = CandidateProfile(
        name=name,
        email=email,
        phone=_text(raw.get("phone")) or None,
        linkedin=_text(raw.get("linkedin") or raw.get("linkedIn") or social.get("linkedin")) or None,
        tone=_text(raw.get("preferredTone") or raw.get("tone")) or "professional",
        targetIndustry=industry,
        experienceLevel=level,
        workExperience=[_work_experience(entry) for entry in work_history],
        education=[_education(entry) for entry in _entries(raw, "education")],
        certifications=[_certification(entry) for entry in _entries(raw, "certifications")],
        projects=[_project(entry) for entry in _entries(raw, "projects")],
        technicalSkills=_technical_skills(raw),
        softSkills=_names(raw.get("softSkills"), "name"),
        languages=_languages(raw.get("languages")),
        achievements=_names(raw.get("achievements"), "title", "description", "name"),
    )
    logger.info(
        "Normalized profile: %d jobs, %d technical skills, level=%s, industry=%s",
        len(profile.workExperience), len(profile.technicalSkills), level, industry,
    )
    return profile
