from dataclasses import dataclass


@dataclass(frozen=True)
class SessionContext:
    user_id: int
    email: str
    role: str              # carried opaquely, no permission checks
