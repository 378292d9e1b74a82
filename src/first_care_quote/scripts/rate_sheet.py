# src/first_care_quote/scripts/rate_sheet.py
"""
Publish the First Care 200 rate table as a rate sheet artifact.

What it does:
- Renders the rate table (one row per age band, one column per tier)
- Writes it as CSV or Parquet to reports/rate_sheets/
- Writes a manifest JSON (rows, columns, hash, size)
- Optionally uploads the sheet + manifest to S3 (if S3_BUCKET is set)

Usage:
  python -m first_care_quote.scripts.rate_sheet

Optional:
  python -m first_care_quote.scripts.rate_sheet --out_path reports/rate_sheets/first_care_200.parquet \
    --manifest_path reports/rate_sheets/manifest.json \
    --upload_s3

Env (optional for S3):
  AWS_REGION=eu-west-2
  S3_BUCKET=your-bucket
  S3_PREFIX=first-care-quote
"""

from __future__ import annotations

import argparse
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import pandas as pd

from first_care_quote.pricing.config import PricingConfig
from first_care_quote.pricing.rates import rate_sheet
from first_care_quote.utils.config import configure_logging, get_aws_config, get_paths
from first_care_quote.utils.io import TABLE_FORMATS, FileDigest, file_digest, s3_upload_file, table_format, write_json, write_table

logger = logging.getLogger(__name__)

@dataclass
class RateSheetManifest:
    product: str
    currency: str
    sheet_path: str
    created_utc: str
    rows: int
    cols: int
    columns: List[str]
    file_size_bytes: int
    sha256: str

def _utc_now_iso() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())

def _default_out_path() -> Path:
    return get_paths().rate_sheets_dir / "first_care_200.csv"

def _default_manifest_path() -> Path:
    return get_paths().rate_sheets_dir / "rate_sheet_manifest.json"

def build_manifest(
    df: pd.DataFrame,
    sheet_path: Path,
    digest: FileDigest,
    cfg: Optional[PricingConfig] = None,
) -> RateSheetManifest:
    cfg = cfg or PricingConfig()
    return RateSheetManifest(
        product=cfg.product_name,
        currency=cfg.currency,
        sheet_path=str(sheet_path),
        created_utc=_utc_now_iso(),
        rows=int(df.shape[0]),
        cols=int(df.shape[1]),
        columns=[str(c) for c in df.columns],
        file_size_bytes=digest.size_bytes,
        sha256=digest.sha256,
    )

def publish_rate_sheet(out_path: Path, manifest_path: Path) -> RateSheetManifest:
    """
    Write the rate sheet and its manifest; returns the manifest.
    The sheet format follows out_path's suffix (one of TABLE_FORMATS).
    """
    table_format(out_path)

    df = rate_sheet()
    write_table(df, out_path)

    manifest = build_manifest(df=df, sheet_path=out_path, digest=file_digest(out_path))
    write_json(manifest, manifest_path)
    logger.info("Rate sheet written to %s (%d rows)", out_path, manifest.rows)
    return manifest

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Publish the First Care 200 rate sheet + manifest.")
    p.add_argument("--out_path", type=str, default=None, help=f"Output path ({' or '.join(TABLE_FORMATS)}). Default: reports/rate_sheets/first_care_200.csv")
    p.add_argument("--manifest_path", type=str, default=None, help="Manifest JSON path. Default: reports/rate_sheets/rate_sheet_manifest.json")
    p.add_argument("--upload_s3", action="store_true", help="Upload sheet + manifest to S3 (requires env S3_BUCKET)")
    return p.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> None:
    configure_logging()
    args = parse_args(argv)
    aws = get_aws_config()

    out_path = Path(args.out_path) if args.out_path else _default_out_path()
    manifest_path = Path(args.manifest_path) if args.manifest_path else _default_manifest_path()

    manifest = publish_rate_sheet(out_path, manifest_path)

    print(f"[OK] Rate sheet saved     : {out_path}")
    print(f"[OK] Manifest saved       : {manifest_path}")
    print(f"Rows: {manifest.rows} | Cols: {manifest.cols} | SHA256: {manifest.sha256[:12]}...")

    if args.upload_s3:
        if not aws.enabled:
            raise RuntimeError("S3 upload requested but S3_BUCKET is not set in environment.")
        bucket = aws.s3_bucket  # type: ignore[assignment]
        prefix = aws.s3_prefix.rstrip("/")

        # s3://<bucket>/<prefix>/rate_sheets/<filename>
        sheet_key = f"{prefix}/rate_sheets/{out_path.name}"
        manifest_key = f"{prefix}/rate_sheets/{manifest_path.name}"

        sheet_uri = s3_upload_file(out_path, bucket=bucket, key=sheet_key, region=aws.region)
        manifest_uri = s3_upload_file(manifest_path, bucket=bucket, key=manifest_key, region=aws.region)

        print(f"[OK] Uploaded sheet to S3 : {sheet_uri}")
        print(f"[OK] Uploaded manifest    : {manifest_uri}")

if __name__ == "__main__":
    main()
