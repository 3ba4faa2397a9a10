from __future__ import annotations

from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field

from .types import CurveSpec


class AppConfig(BaseModel):
    curves: Dict[str, CurveSpec] = Field(default_factory=dict)
    width: Optional[int] = None
    height: Optional[int] = None
    steps: Optional[int] = None
    padding: Optional[int] = None
    output_path: Optional[str] = None


def load_config(path: str) -> AppConfig:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return AppConfig(**data)
