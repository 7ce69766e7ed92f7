"""UUID-backed id generation."""
from uuid import uuid4


class UuidIdGenerator:
    def generate(self, prefix: str = "id") -> str:
        return f"{prefix}-{uuid4().hex}"
