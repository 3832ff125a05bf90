import json
import logging
import re
from typing import Callable, List, Optional

from pydantic import ValidationError

from resume_builder.models.resume import RecoveredResume

logger = logging.getLogger("uvicorn.error")

_BRACE_BLOCK = re.compile(r"\{.*\}", re.DOTALL)


def _loads_object(text: str) -> Optional[dict]:
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        return None
    return data if isinstance(data, dict) else None


def parse_direct(raw_text: str) -> Optional[dict]:
    """Stage 1: the whole response is a JSON object."""
    return _loads_object(raw_text.strip())


def parse_embedded_block(raw_text: str) -> Optional[dict]:
    """Stage 2: first '{' to last '}' inside prose or markdown fences."""
    match = _BRACE_BLOCK.search(raw_text)
    if not match:
        return None
    return _loads_object(match.group(0))


RECOVERY_STAGES: List[Callable[[str], Optional[dict]]] = [parse_direct, parse_embedded_block]


def recover_resume(raw_text: Optional[str]) -> RecoveredResume:
    """Coerce untrusted model output into a partial resume. Never raises."""
    if not raw_text or not raw_text.strip():
        logger.warning("Empty model response; continuing with profile data only")
        return RecoveredResume()

    for stage in RECOVERY_STAGES:
        payload = stage(raw_text)
        if payload is not None:
            logger.info("Recovered model response via %s", stage.__name__)
            try:
                return RecoveredResume.model_validate(payload)
            except ValidationError:
                logger.exception("Recovered payload failed validation")
                return RecoveredResume()

    logger.error("Model response is not valid JSON. Raw start: %s", raw_text[:200].replace("\n", " "))
    return RecoveredResume()
