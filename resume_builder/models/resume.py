from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from typing import Any, List, Optional
from datetime import datetime


class _Entry(BaseModel):
    """Base for resume entries: ``null`` values fall back to field defaults."""

    model_config = {"coerce_numbers_to_str": True}

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


# ---------- Inputs ----------
class JobPosting(BaseModel):
    title: str
    description: str
    location: Optional[str] = None
    company: Optional[str] = None
    link: Optional[str] = None

    model_config = {"frozen": True}


class WorkExperience(_Entry):
    jobTitle: str = ""
    company: str = ""
    startDate: str = ""
    endDate: str = ""
    description: str = ""
    achievements: List[str] = Field(default_factory=list)
    technologies: List[str] = Field(default_factory=list)


class Education(_Entry):
    degree: str = ""
    institution: str = ""
    graduationDate: str = ""
    gpa: Optional[str] = None
    relevantCoursework: List[str] = Field(default_factory=list)


class Certification(_Entry):
    name: str = ""
    issuer: str = ""
    date: str = ""
    expiryDate: Optional[str] = None
    credentialId: Optional[str] = None


class Project(_Entry):
    name: str = ""
    description: str = ""
    technologies: List[str] = Field(default_factory=list)
    link: Optional[str] = None
    achievements: List[str] = Field(default_factory=list)


class CandidateProfile(BaseModel):
    name: str
    email: str
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    tone: str = "professional"
    targetIndustry: str = "general"
    experienceLevel: str = "entry"
    workExperience: List[WorkExperience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    certifications: List[Certification] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    technicalSkills: List[str] = Field(default_factory=list)
    softSkills: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    achievements: List[str] = Field(default_factory=list)


# ---------- Outputs ----------
class Skills(_Entry):
    technical: List[str] = Field(default_factory=list)
    soft: List[str] = Field(default_factory=list)


class ContactInformation(BaseModel):
    name: str
    email: str
    phone: str = ""
    linkedin: str = ""


class GenerationMetadata(BaseModel):
    jobTitle: Optional[str] = None
    company: Optional[str] = None
    generatedAt: Optional[datetime] = None
    model: Optional[str] = None


class GeneratedResume(BaseModel):
    summary: str
    workExperience: List[WorkExperience] = Field(min_length=1)
    skills: Skills
    education: List[Education] = Field(min_length=1)
    certifications: List[Certification] = Field(min_length=1)
    projects: List[Project] = Field(min_length=1)
    contactInformation: ContactInformation
    languages: List[str] = Field(min_length=1)
    achievements: List[str] = Field(min_length=1)
    metadata: Optional[GenerationMetadata] = None


class RecoveredResume(BaseModel):
    """Partial resume parsed from model output.

    Every field is optional. A field whose value does not validate is
    dropped on its own, so one bad section never discards the rest.
    """

    summary: Optional[str] = None
    workExperience: Optional[List[WorkExperience]] = None
    skills: Optional[Skills] = None
    education: Optional[List[Education]] = None
    certifications: Optional[List[Certification]] = None
    projects: Optional[List[Project]] = None
    languages: Optional[List[str]] = None
    achievements: Optional[List[str]] = None

    model_config = {"extra": "ignore"}

    @field_validator("skills", mode="before")
    @classmethod
    def flat_skill_list(cls, value: Any) -> Any:
        # older prompts asked for "skills": string[]
        if isinstance(value, list):
            return {"technical": value}
        return value

    @field_validator("*", mode="wrap")
    @classmethod
    def drop_invalid(cls, value: Any, handler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)


class FitScore(BaseModel):
    score: int = Field(ge=0, le=100)
    matched: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)

    model_config = {"frozen": True}
