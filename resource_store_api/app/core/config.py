"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; ``PORT`` is the only
variable most deployments need to set.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


# resource_store_api/app/core/config.py -> project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Resource Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Directory holding the companion front end.  Unmatched GET requests
    # are answered from here, falling back to ``index.html``.
    frontend_dir: str = os.getenv("FRONTEND_DIR", str(PROJECT_ROOT / "frontend"))

    # Comma‑separated list of origins allowed by the CORS middleware.
    # ``*`` allows any origin.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # When false the store starts with empty collections.
    seed_data: bool = os.getenv("SEED_DATA", "true").lower() in {"1", "true", "yes"}

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
