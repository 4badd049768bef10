import time
from dataclasses import dataclass
from typing import Any

@dataclass(frozen=True)
class ServiceResponse:
    timestamp: int
    data: Any

    @classmethod
    def now(cls, data: Any) -> "ServiceResponse":
        return cls(timestamp=int(time.time() * 1000), data=data)
