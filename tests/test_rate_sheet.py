"""Tests for the rate sheet publisher."""

import json
from decimal import Decimal

import pandas as pd
import pytest

from first_care_quote.pricing.rates import CoverageTier
from first_care_quote.scripts import rate_sheet as rate_sheet_script
from first_care_quote.utils.io import TABLE_FORMATS, file_digest, table_format, write_json, write_table


class TestPublishRateSheet:
    """Tests for writing the rate sheet artifact."""

    def test_writes_csv_and_manifest(self, tmp_path):
        out_path = tmp_path / "sheets" / "first_care_200.csv"
        manifest_path = tmp_path / "sheets" / "manifest.json"

        manifest = rate_sheet_script.publish_rate_sheet(out_path, manifest_path)

        df = pd.read_csv(out_path)
        assert df.shape == (18, 5)
        assert manifest.rows == 18
        digest = file_digest(out_path)
        assert manifest.sha256 == digest.sha256
        assert manifest.file_size_bytes == digest.size_bytes

        saved = json.loads(manifest_path.read_text(encoding="utf-8"))
        assert saved["product"] == "Pacific Cross First Care 200"
        assert saved["columns"] == ["age_band", "age_from", "age_to", "IP", "IP+OP"]

    def test_rejects_unknown_format(self, tmp_path):
        with pytest.raises(ValueError):
            rate_sheet_script.publish_rate_sheet(tmp_path / "sheet.xlsx", tmp_path / "m.json")
        assert not (tmp_path / "sheet.xlsx").exists()
        assert not (tmp_path / "m.json").exists()

    def test_main_without_bucket_refuses_upload(self, tmp_path, monkeypatch):
        monkeypatch.delenv("S3_BUCKET", raising=False)
        argv = [
            "--out_path", str(tmp_path / "sheet.csv"),
            "--manifest_path", str(tmp_path / "manifest.json"),
            "--upload_s3",
        ]
        with pytest.raises(RuntimeError, match="S3_BUCKET"):
            rate_sheet_script.main(argv)
        assert (tmp_path / "sheet.csv").exists()

    def test_main_uploads_when_bucket_set(self, tmp_path, monkeypatch):
        monkeypatch.setenv("S3_BUCKET", "rates-bucket")
        monkeypatch.setenv("S3_PREFIX", "fc200/")
        uploads = []

        def fake_upload(path, bucket, key, region=None):
            uploads.append((path.name, bucket, key))
            return f"s3://{bucket}/{key}"

        monkeypatch.setattr(rate_sheet_script, "s3_upload_file", fake_upload)

        rate_sheet_script.main(
            [
                "--out_path", str(tmp_path / "sheet.csv"),
                "--manifest_path", str(tmp_path / "manifest.json"),
                "--upload_s3",
            ]
        )

        assert uploads == [
            ("sheet.csv", "rates-bucket", "fc200/rate_sheets/sheet.csv"),
            ("manifest.json", "rates-bucket", "fc200/rate_sheets/manifest.json"),
        ]


class TestTableIo:
    """Tests for the artifact file helpers."""

    def test_formats(self):
        assert TABLE_FORMATS == (".csv", ".parquet")
        assert table_format("sheet.CSV") == ".csv"
        with pytest.raises(ValueError, match="Unsupported table format"):
            table_format("sheet.json")

    def test_write_table_creates_parent_dirs(self, tmp_path):
        path = write_table(pd.DataFrame({"a": [1, 2]}), tmp_path / "nested" / "t.csv")
        assert pd.read_csv(path)["a"].tolist() == [1, 2]

    def test_write_json_handles_decimal_and_enum(self, tmp_path):
        path = write_json({"amount": Decimal("241.74"), "tier": CoverageTier.INPATIENT_ONLY}, tmp_path / "x.json")
        assert json.loads(path.read_text(encoding="utf-8")) == {"amount": 241.74, "tier": "IP"}
