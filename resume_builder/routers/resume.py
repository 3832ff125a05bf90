from fastapi import APIRouter, Depends, HTTPException
from functools import lru_cache
import json, logging

from resume_builder.models.requests import GenerateResumeRequest, GenerateResumeResponse
from resume_builder.services.cache import ResumeCache
from resume_builder.services.config import settings
from resume_builder.services.errors import ResumeGenerationError
from resume_builder.services.generator import ResumeGenerator

logger = logging.getLogger("uvicorn.error")

router = APIRouter(
    prefix="/resume",
    tags=["Resume Generation"]
)


@lru_cache
def get_generator() -> ResumeGenerator:
    # raises ConfigurationError when the API key is missing; not cached
    return ResumeGenerator(settings)


@lru_cache
def get_cache() -> ResumeCache:
    return ResumeCache(settings)


# POST: generate a tailored resume, score it against the job, cache it in Redis
@router.post("/generate", response_model=GenerateResumeResponse)
async def generate_resume(
    payload: GenerateResumeRequest,
    generator: ResumeGenerator = Depends(get_generator),
    cache: ResumeCache = Depends(get_cache),
):
    try:
        logger.info("Start resume generation for job title: %s", payload.job.jobTitle)
        result = await generator.handle(payload)

        resume_id = cache.save(result.model_dump_json())
        result = result.model_copy(update={"id": resume_id})

        logger.info("Resume generation completed with fit score %d", result.fitScore.score)
        return result

    except ResumeGenerationError:
        raise
    except Exception as e:
        logger.exception("Unhandled error during resume generation")
        raise HTTPException(status_code=500, detail=f"Error generating resume: {repr(e)}")


# GET: retrieve a cached generation result by ID
@router.get("/{resume_id}", response_model=GenerateResumeResponse)
async def get_generated_resume(resume_id: str, cache: ResumeCache = Depends(get_cache)):
    logger.info("Fetching generated resume for resume_id: %s", resume_id)

    data = cache.load(resume_id)
    if not data:
        logger.warning("Resume ID not found or expired in Redis: resume:%s", resume_id)
        raise HTTPException(status_code=404, detail="Resume not found or expired.")

    result = json.loads(data)
    result["id"] = resume_id
    return result
