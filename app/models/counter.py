from beanie import Document, Indexed


class Counter(Document):
    """Per-collection sequence for integer document ids."""

    name: Indexed(str, unique=True)
    value: int = 0

    class Settings:
        name = "counters"
