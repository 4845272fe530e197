from dataclasses import dataclass
from enum import Enum

class PhaseKind(str, Enum):
    WORK = "work"
    BREAK = "break"

class PhaseResult(str, Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"

@dataclass(frozen=True)
class Phase:
    kind: PhaseKind
    title: str
    minutes: int

    @property
    def total_seconds(self) -> int:
        return self.minutes * 60

    @classmethod
    def work(cls, minutes: int):
        return cls(kind=PhaseKind.WORK, title="Work time!", minutes=minutes)

    @classmethod
    def rest(cls, minutes: int):
        return cls(kind=PhaseKind.BREAK, title="Break", minutes=minutes)
