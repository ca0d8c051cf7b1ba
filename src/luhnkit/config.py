from __future__ import annotations

from pathlib import Path
from typing import List, Literal, Optional
import yaml
from pydantic import BaseModel, Field

# ---- Engines selectable by name ----
EngineName = Literal["decimal", "alphanum", "expanded"]

# ---- Cleanup applied before a value reaches an engine ----
class NormalizeConfig(BaseModel):
    strip_separators: bool = True  # "4111-1111 1111-1111" -> "4111111111111111"
    uppercase: bool = False        # "us0378331005" -> "US0378331005"

    def names(self) -> List[str]:
        steps = ["strip"]
        if self.strip_separators:
            steps.append("strip_spaces_dashes")
        if self.uppercase:
            steps.append("upper")
        return steps

# ---- Batch scan behaviour ----
class ScanConfig(BaseModel):
    skip_blank: bool = True
    comment_prefix: Optional[str] = "#"  # lines starting with this are ignored

# ---- Root config ----
class LuhnConfig(BaseModel):
    engine: EngineName = "decimal"
    normalize: NormalizeConfig = Field(default_factory=NormalizeConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)

# ---- Loader ----
def load_config(path: Optional[Path]) -> LuhnConfig:
    if not path:
        return LuhnConfig()
    data = yaml.safe_load(Path(path).read_text()) or {}
    return LuhnConfig(**data)
