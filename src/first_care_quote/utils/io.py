# src/first_care_quote/utils/io.py
"""
File helpers for published pricing artifacts.

- tabular writers keyed by file suffix (the rate sheet formats)
- file digests for manifests
- JSON writing that understands dataclasses and Decimal amounts
- S3 upload for publishing
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import asdict, dataclass, is_dataclass
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import boto3
import pandas as pd


TABLE_WRITERS: Dict[str, Callable[[pd.DataFrame, Path], None]] = {
    ".csv": lambda df, path: df.to_csv(path, index=False),
    ".parquet": lambda df, path: df.to_parquet(path, index=False),
}
TABLE_FORMATS = tuple(sorted(TABLE_WRITERS))


@dataclass(frozen=True)
class FileDigest:
    sha256: str
    size_bytes: int


def table_format(path: Union[str, Path]) -> str:
    """
    Suffix of a supported table path, e.g. ".csv". Raises ValueError otherwise.
    """
    suf = Path(path).suffix.lower()
    if suf not in TABLE_WRITERS:
        raise ValueError(f"Unsupported table format {suf!r}; expected one of {list(TABLE_FORMATS)}")
    return suf


def write_table(df: pd.DataFrame, path: Union[str, Path]) -> Path:
    path = Path(path)
    writer = TABLE_WRITERS[table_format(path)]
    path.parent.mkdir(parents=True, exist_ok=True)
    writer(df, path)
    return path


def file_digest(path: Path, chunk_size: int = 1024 * 1024) -> FileDigest:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            h.update(chunk)
    return FileDigest(sha256=h.hexdigest(), size_bytes=path.stat().st_size)


def _json_default(obj: Any) -> Any:
    if isinstance(obj, Decimal):
        return float(obj)
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Path):
        return str(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def write_json(obj: Any, path: Path) -> Path:
    payload = asdict(obj) if is_dataclass(obj) else obj
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False, default=_json_default), encoding="utf-8")
    return path


def s3_upload_file(local_path: Path, bucket: str, key: str, region: Optional[str] = None) -> str:
    """
    Upload a published artifact; returns its s3:// URI.
    """
    local_path = Path(local_path)
    if not local_path.exists():
        raise FileNotFoundError(f"Artifact not found: {local_path}")
    boto3.client("s3", region_name=region).upload_file(str(local_path), bucket, key)
    return f"s3://{bucket}/{key}"
