import logging
import os
import redis.asyncio as redis
from redis.asyncio.lock import Lock
from redis.exceptions import LockNotOwnedError

logger = logging.getLogger(__name__)

# Load Redis URL from environment, fallback to default
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

# Create a Redis client instance
redis_client = redis.from_url(REDIS_URL, decode_responses=True)


async def get_redis():
    """
    Dependency to provide Redis client in FastAPI endpoints
    Usage: `redis: redis.Redis = Depends(get_redis)`
    """
    try:
        yield redis_client
    finally:
        pass  # We Do not close here; the client persists for the app lifetime


def customer_status_lock(client: redis.Redis, customer_id, ttl: float, wait: float) -> Lock:
    """
    Per-customer lock around the status read-modify-write.
    `ttl` is how long the lock survives if its holder never releases it,
    `wait` how long a second request queues for it before giving up.
    """
    return client.lock(
        f"customer:{customer_id}:status-lock",
        timeout=ttl,
        blocking_timeout=wait,
    )


async def release_lock(lock: Lock) -> None:
    """
    Release a lock whose protected work has already finished.
    An expired lock is logged, not raised: the caller's writes are committed
    by then and the request must still report them.
    """
    try:
        await lock.release()
    except LockNotOwnedError:
        logger.warning("Lock %s expired before it was released", lock.name)
