"""Monotonic integer ids, one counter document per collection."""

from pymongo import ReturnDocument

from app.models.counter import Counter


async def next_id(name: str) -> int:
    """Atomically increment and return the counter for name (first call returns 1)."""
    counter = await Counter.get_motor_collection().find_one_and_update(
        {"name": name},
        {"$inc": {"value": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return counter["value"]
