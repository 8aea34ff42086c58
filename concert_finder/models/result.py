from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class SearchResult:
    events: List[Dict[str, Any]] = field(default_factory=list)
    spellcheck: str = ""
    original_keyword: str = ""
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "events": self.events,
            "spellcheck": self.spellcheck,
            "originalKeyword": self.original_keyword,
        }
        if self.error is not None:
            data["error"] = self.error
        return data
