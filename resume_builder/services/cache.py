import logging
import uuid
from typing import Optional
import redis

from resume_builder.services.config import Settings

logger = logging.getLogger("uvicorn.error")


class ResumeCache:
    """Keeps generated responses in Redis under ``resume:{id}`` for a TTL."""

    def __init__(self, settings: Settings, client: Optional[redis.Redis] = None):
        self.ttl = settings.RESUME_CACHE_TTL_SECONDS
        if client is None and settings.REDIS_URL:
            client = redis.Redis.from_url(settings.REDIS_URL, decode_responses=True)
        self.client = client

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def save(self, payload: str) -> Optional[str]:
        if not self.enabled:
            return None
        resume_id = str(uuid.uuid4())
        try:
            self.client.setex(f"resume:{resume_id}", self.ttl, payload)
        except redis.RedisError:
            logger.exception("Failed to cache generated resume")
            return None
        logger.info("Cached generated resume under key: resume:%s", resume_id)
        return resume_id

    def load(self, resume_id: str) -> Optional[str]:
        if not self.enabled:
            return None
        try:
            data = self.client.get(f"resume:{resume_id}")
        except redis.RedisError:
            logger.exception("Failed to read cached resume %s", resume_id)
            return None
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        return data
