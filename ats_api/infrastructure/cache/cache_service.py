import json

from redis.exceptions import RedisError

from ats_api.infrastructure.cache import redis_client
from ats_api.infrastructure.logging import get_logger

logger = get_logger(__name__)


def get_json(cache_key: str) -> dict | None:
    try:
        raw = redis_client.get_redis_client().get(cache_key)
    except RedisError:
        logger.warning("cache_read_failed", cache_key=cache_key)
        return None
    if raw is None or not isinstance(raw, str):
        return None
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        return None
    return value if isinstance(value, dict) else None


def set_json(cache_key: str, value: dict, ttl_seconds: int) -> None:
    try:
        redis_client.get_redis_client().setex(cache_key, ttl_seconds, json.dumps(value, default=str))
    except (RedisError, TypeError, ValueError):
        logger.warning("cache_write_failed", cache_key=cache_key)
        return


def delete_pattern(pattern: str) -> int:
    client = redis_client.get_redis_client()
    try:
        keys = list(client.scan_iter(match=pattern))
        if not keys:
            return 0
        return int(client.delete(*keys))
    except RedisError:
        logger.warning("cache_invalidation_failed", pattern=pattern)
        return 0
