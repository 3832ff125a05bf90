import unittest

import redis

import factories  # noqa: F401
from resume_builder.services.cache import ResumeCache
from resume_builder.services.config import Settings


class BrokenRedis:
    def setex(self, *args):
        raise redis.ConnectionError("down")

    def get(self, key):
        raise redis.ConnectionError("down")


class BytesRedis:
    def get(self, key):
        return b'{"ok": true}'


class ResumeCacheTests(unittest.TestCase):
    def test_disabled_without_redis_url(self):
        cache = ResumeCache(Settings(REDIS_URL=None))
        self.assertFalse(cache.enabled)
        self.assertIsNone(cache.save("{}"))
        self.assertIsNone(cache.load("abc"))

    def test_redis_errors_do_not_propagate(self):
        cache = ResumeCache(Settings(), client=BrokenRedis())
        self.assertIsNone(cache.save("{}"))
        self.assertIsNone(cache.load("abc"))

    def test_bytes_are_decoded(self):
        self.assertEqual(ResumeCache(Settings(), client=BytesRedis()).load("abc"), '{"ok": true}')


if __name__ == "__main__":
    unittest.main()
