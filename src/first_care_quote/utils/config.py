# src/first_care_quote/utils/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(key)
    return v if v is not None and v != "" else default


@dataclass(frozen=True)
class ProjectPaths:
    root: Path
    reports_dir: Path
    rate_sheets_dir: Path


def get_project_root() -> Path:
    """
    Resolve repo root robustly.
    Assumes this file lives at: <root>/src/first_care_quote/utils/config.py
    """
    return Path(__file__).resolve().parents[3]


def get_paths() -> ProjectPaths:
    root = get_project_root()
    reports_dir = root / "reports"
    return ProjectPaths(
        root=root,
        reports_dir=reports_dir,
        rate_sheets_dir=reports_dir / "rate_sheets",
    )


@dataclass(frozen=True)
class AwsConfig:
    region: str
    s3_bucket: Optional[str]
    s3_prefix: str

    @property
    def enabled(self) -> bool:
        return self.s3_bucket is not None


def get_aws_config() -> AwsConfig:
    """
    S3 is only used to publish rate sheets; local runs need none of it.

    Env:
      AWS_REGION (default: eu-west-2)
      S3_BUCKET  (optional)
      S3_PREFIX  (default: first-care-quote)
    """
    return AwsConfig(
        region=_env("AWS_REGION", "eu-west-2") or "eu-west-2",
        s3_bucket=_env("S3_BUCKET", None),
        s3_prefix=_env("S3_PREFIX", "first-care-quote") or "first-care-quote",
    )


def get_log_level() -> int:
    name = (_env("LOG_LEVEL", "INFO") or "INFO").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logging.getLogger(__name__).warning("Unknown LOG_LEVEL=%r, falling back to INFO", name)
        return logging.INFO
    return level


def configure_logging(level: Optional[int] = None) -> None:
    """
    Root logging setup for the API and CLI entry points.
    """
    logging.basicConfig(level=level if level is not None else get_log_level(), format=LOG_FORMAT)
