import math
from dataclasses import dataclass
from typing import Any, List, Optional


@dataclass
class ContentPage:
    """One page of a content list"""

    items: List[Any]
    total: int
    page: int
    limit: Optional[int]

    @property
    def pages(self) -> int:
        if not self.limit:
            return 1
        return math.ceil(self.total / self.limit)
