from dataclasses import dataclass

@dataclass(slots=True)
class SessionClock:
    """Running timer attached to the session entity; removed when the timer stops.

    ``accumulated`` holds the seconds gathered toward the next whole increment.
    """
    accumulated: float = 0.0
