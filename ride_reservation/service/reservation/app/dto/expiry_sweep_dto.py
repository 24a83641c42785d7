from dataclasses import dataclass, field

from uuid_utils import UUID


@dataclass
class ExpirySweepResult:
    """Outcome of one expiry pass"""

    expired_holds: list[tuple[str, str]] = field(default_factory=list)
    expired_sessions: list[UUID] = field(default_factory=list)
    purged_sessions: list[UUID] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.expired_holds or self.expired_sessions or self.purged_sessions)
