import logging
from datetime import datetime, timezone
from typing import Optional, Protocol

from resume_builder.models.requests import GenerateResumeRequest, GenerateResumeResponse, ResponseMetadata
from resume_builder.models.resume import CandidateProfile, GenerationMetadata, JobPosting
from resume_builder.services.completer import complete_resume
from resume_builder.services.config import Settings
from resume_builder.services.errors import GenerationFailure
from resume_builder.services.gemini import GeminiClient
from resume_builder.services.keywords import extract_keywords
from resume_builder.services.profile import build_job, normalize_profile
from resume_builder.services.prompts import compose_prompt
from resume_builder.services.recovery import recover_resume
from resume_builder.services.scoring import score_resume

logger = logging.getLogger("uvicorn.error")


class GenerationClient(Protocol):
    model_name: str

    async def generate(self, prompt: str) -> str: ...


class ResumeGenerator:
    """Runs one resume request end to end.

    Only the model call can fail, and its failure is absorbed: the resume
    is then built from the profile and canned defaults. Configuration and
    caller-input problems are the only errors that escape.
    """

    def __init__(self, settings: Settings, client: Optional[GenerationClient] = None):
        self.settings = settings
        self.client = client or GeminiClient(settings)

    async def call_model(self, prompt: str) -> str:
        try:
            raw = await self.client.generate(prompt)
        except GenerationFailure as e:
            logger.warning("Generation failed, falling back to profile data: %s", e)
            return ""
        logger.info("Received LLM response (first 200 chars): %s", raw[:200].replace("\n", " "))
        return raw

    async def generate_resume(self, job: JobPosting, candidate: CandidateProfile,
                              now: Optional[datetime] = None) -> GenerateResumeResponse:
        keywords = extract_keywords(job.description, job.title)
        logger.info("Extracted %d keywords for '%s'", len(keywords), job.title)

        prompt = compose_prompt(job, candidate, keywords)
        raw = await self.call_model(prompt)

        recovered = recover_resume(raw)
        resume = complete_resume(recovered, candidate, job)
        fit = score_resume(resume, job.description)
        logger.info("Resume generated for '%s' with fit score %d", job.title, fit.score)

        generated_at = now or datetime.now(timezone.utc)
        resume = resume.model_copy(update={"metadata": GenerationMetadata(
            jobTitle=job.title,
            company=job.company,
            generatedAt=generated_at,
            model=getattr(self.client, "model_name", None),
        )})
        return GenerateResumeResponse(
            resume=resume,
            fitScore=fit,
            metadata=ResponseMetadata(
                experienceLevel=candidate.experienceLevel,
                targetIndustry=candidate.targetIndustry,
                generatedAt=generated_at,
            ),
        )

    async def handle(self, request: GenerateResumeRequest) -> GenerateResumeResponse:
        job = build_job(request.job)
        candidate = normalize_profile(request.candidate, job)
        return await self.generate_resume(job, candidate)
