import os
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

ENV_PREFIX = 'DUALSTORE_'

class StoreOptions(BaseModel):
    file_path: str = Field(default='data.json')
    encoding: str = Field(default='utf-8')
    indent: int = Field(default=2, ge=0)

    @classmethod
    def from_env(cls, overrides: Optional[Dict[str, Any]] = None) -> 'StoreOptions':
        values: Dict[str, Any] = {}
        for name in cls.model_fields:
            raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}", "").strip()
            if raw:
                values[name] = raw
        if overrides:
            values.update(overrides)
        return cls(**values)
