from dataclasses import dataclass, field


@dataclass
class Credentials:
    """Account used for the browser login hand-off."""

    email: str
    password: str = field(repr=False)
