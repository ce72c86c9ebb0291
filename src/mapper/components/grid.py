from dataclasses import dataclass
from typing import Any

@dataclass(slots=True)
class Grid:
    cols: int
    rows: int
    image: Any = None
