from __future__ import annotations
from dataclasses import dataclass
import os
from typing import Mapping, Optional

ALLOC_ENV_VAR = "INVB_ALLOC"

@dataclass(frozen=True)
class LoadedConfig:
    default_alloc: Optional[str] = None

def load_config(environ: Optional[Mapping[str, str]] = None) -> LoadedConfig:
    env = os.environ if environ is None else environ
    raw = env.get(ALLOC_ENV_VAR)
    if raw is None or not raw.strip():
        return LoadedConfig()
    return LoadedConfig(default_alloc=raw)
