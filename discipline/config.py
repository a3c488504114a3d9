# discipline/config.py

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

HANDBOOK_FILENAME = "studenthandbook.pdf"


@dataclass
class Settings:
    """
    Runtime settings for the handbook engine and its HTTP layer.

    Every field is overridable at construction for testing; unset fields are
    read from the environment in ``__post_init__``.
    """
    environment: Optional[str] = None
    log_level: Optional[str] = None
    handbook_path: Optional[Path] = None
    handbook_candidates: List[Path] = field(default_factory=list)
    cors_origins: List[str] = field(default_factory=list)

    # Ollama-backed report helpers
    llm_model: str = "llama3.2:3b"
    llm_host: Optional[str] = None
    llm_temperature: float = 0.1
    llm_max_handbook_chars: int = 8000

    def __post_init__(self):
        project_root = Path(__file__).resolve().parent.parent

        if self.environment is None:
            self.environment = os.environ.get("APP_ENV", "development")
        if self.log_level is None:
            self.log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

        if self.handbook_path is None and os.environ.get("HANDBOOK_PATH"):
            self.handbook_path = Path(os.environ["HANDBOOK_PATH"])

        if not self.handbook_candidates:
            if self.handbook_path is not None:
                self.handbook_candidates = [Path(self.handbook_path)]
            else:
                cwd = Path.cwd()
                self.handbook_candidates = [
                    project_root.parent / "public" / "docs" / HANDBOOK_FILENAME,
                    project_root / "public" / "docs" / HANDBOOK_FILENAME,
                    cwd.parent / "public" / "docs" / HANDBOOK_FILENAME,
                    cwd / "public" / "docs" / HANDBOOK_FILENAME,
                    cwd / "docs" / HANDBOOK_FILENAME,
                ]
        self.handbook_candidates = [Path(p) for p in self.handbook_candidates]

        if not self.cors_origins:
            raw = os.environ.get("CORS_ORIGINS", "*")
            self.cors_origins = [o.strip() for o in raw.split(",") if o.strip()]

        if os.environ.get("LLM_MODEL"):
            self.llm_model = os.environ["LLM_MODEL"]
        if self.llm_host is None:
            self.llm_host = os.environ.get("LLM_HOST") or None
        try:
            if v := os.environ.get("LLM_TEMPERATURE"):
                self.llm_temperature = float(v)
        except ValueError:
            pass
        try:
            if v := os.environ.get("LLM_MAX_HANDBOOK_CHARS"):
                self.llm_max_handbook_chars = int(v)
        except ValueError:
            pass


@lru_cache()
def get_settings() -> Settings:
    return Settings()
