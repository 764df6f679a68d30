"""HistoryRecord domain entity: one line of the conversation log."""
from typing import Optional

ROLES = ("user", "assistant")


class HistoryRecord:
    def __init__(self, role: str, content: str):
        if role not in ROLES:
            raise ValueError(f"Unknown role: {role}")
        self.role = role
        self.content = content

    @classmethod
    def user(cls, content: str) -> "HistoryRecord":
        return cls("user", content)

    @classmethod
    def assistant(cls, content: str) -> "HistoryRecord":
        return cls("assistant", content)

    def __eq__(self, other):
        if not isinstance(other, HistoryRecord):
            return NotImplemented
        return (self.role, self.content) == (other.role, other.content)

    def __str__(self) -> str:
        return f"{self.role}: {self.content}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data) -> Optional["HistoryRecord"]:
        '''Creates a HistoryRecord from a dictionary. Returns None for unknown roles.'''
        if not isinstance(data, dict) or data.get("role") not in ROLES:
            return None
        return HistoryRecord(data["role"], str(data.get("content", "")))

    def to_dict(self):
        return {"role": self.role, "content": self.content}

    def to_message(self):
        """Chat-completions message shape; same keys as the persisted form."""
        return self.to_dict()
