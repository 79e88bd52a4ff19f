from dataclasses import asdict, dataclass, fields
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class FieldRecord:
    full_name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    education: Optional[str] = None
    current_location: Optional[str] = None
    salary: Optional[str] = None
    preferred_location: Optional[str] = None

    def __post_init__(self):
        # absent is None, never ""
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None and not value.strip():
                object.__setattr__(self, f.name, None)

    def as_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


FIELD_NAMES: Tuple[str, ...] = tuple(f.name for f in fields(FieldRecord))
