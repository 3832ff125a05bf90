from pydantic import BaseModel, Field
from typing import Any, Dict, Optional
from datetime import datetime

from resume_builder.models.resume import FitScore, GeneratedResume


# ---------- Request ----------
class JobRequest(BaseModel):
    jobDescription: str = ""
    jobTitle: str = ""
    jobLocation: Optional[str] = None
    companyName: Optional[str] = None
    jobLink: Optional[str] = None


class GenerateResumeRequest(BaseModel):
    job: JobRequest
    candidate: Dict[str, Any] = Field(default_factory=dict)


# ---------- Response ----------
class ResponseMetadata(BaseModel):
    experienceLevel: str
    targetIndustry: str
    generatedAt: datetime


class GenerateResumeResponse(BaseModel):
    id: Optional[str] = None
    resume: GeneratedResume
    fitScore: FitScore
    metadata: ResponseMetadata
