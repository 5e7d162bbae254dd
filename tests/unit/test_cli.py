"""Unit tests for the command-line interface."""

import io
import json

import polars as pl
import pytest

from uri_utils.cli import build_parser, main


class TestCLI:
    """Test suite for the uri-utils command."""

    def test_parse(self, capsys):
        """Test parse prints the components as JSON."""
        exit_code = main(
            ["parse", "http://Example.com:80/a?x=1", "--normalize", "--parse-query"]
        )

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["host_text"] == "example.com"
        assert data["port_text"] == "80"
        assert data["path"] == ["a"]
        assert data["key"] == ["x"]

    def test_parse_invalid(self, capsys):
        """Test a malformed URI exits with status 1."""
        exit_code = main(["parse", "http://exa mple.com/"])

        assert exit_code == 1
        assert capsys.readouterr().err.startswith("error: ")

    def test_extract(self, capsys):
        """Test extract on an argument."""
        exit_code = main(["extract", "see http://a.com/ and https://[::1]/"])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["count"] == 2
        assert data["uri"] == ["http://a.com/", "https://[::1]/"]

    def test_extract_stdin(self, capsys, monkeypatch):
        """Test extract reads standard input by default."""
        monkeypatch.setattr("sys.stdin", io.StringIO("one ftp://x.org/f two"))

        assert main(["extract"]) == 0
        assert json.loads(capsys.readouterr().out)["uri"] == ["ftp://x.org/f"]

    def test_domain(self, capsys):
        """Test domain prints labels and eTLD+1."""
        assert main(["domain", "www.example.com"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["labels"] == ["www", "example", "com"]
        assert data["registered_domain"] == "example.com"

    def test_usage(self, capsys):
        """Test summary and full help text."""
        assert main(["usage", "parse_domain"]) == 0
        assert "For full usage instructions" in capsys.readouterr().out

        assert main(["usage", "parse_domain", "--full"]) == 0
        assert "Synopsis" in capsys.readouterr().out

    def test_usage_unknown_function(self):
        """Test argparse rejects unknown entry points."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["usage", "parse_url"])

    def test_batch_parse(self, tmp_path):
        """Test batch parse from CSV to Parquet."""
        input_path = tmp_path / "urls.csv"
        input_path.write_text("url\nhttp://a.com/x\nnot a uri\n")
        output_path = tmp_path / "out" / "parsed.parquet"

        exit_code = main(
            ["batch", str(input_path), "--column", "url", "--output", str(output_path)]
        )

        assert exit_code == 0
        result = pl.read_parquet(output_path)
        assert result["is_valid"].to_list() == [True, False]
        assert result["path"].to_list() == [["x"], None]

    def test_batch_extract(self, tmp_path):
        """Test batch extract from Parquet to JSON lines."""
        input_path = tmp_path / "texts.parquet"
        pl.DataFrame({"body": ["a http://a.com/ b http://b.com/", "none"]}).write_parquet(
            input_path
        )
        output_path = tmp_path / "uris.jsonl"

        exit_code = main(
            [
                "batch",
                str(input_path),
                "--column",
                "body",
                "--mode",
                "extract",
                "--output",
                str(output_path),
            ]
        )

        assert exit_code == 0
        result = pl.read_ndjson(output_path)
        assert result["uri"].to_list() == ["http://a.com/", "http://b.com/"]
        assert result["row_index"].to_list() == [0, 0]

    def test_batch_missing_file(self, tmp_path, capsys):
        """Test a missing input file exits with status 1."""
        exit_code = main(
            [
                "batch",
                str(tmp_path / "missing.csv"),
                "--column",
                "url",
                "--output",
                str(tmp_path / "out.parquet"),
            ]
        )

        assert exit_code == 1
        assert "not found" in capsys.readouterr().err

    def test_batch_missing_column(self, tmp_path):
        """Test a missing column exits with status 1."""
        input_path = tmp_path / "urls.csv"
        input_path.write_text("url\nhttp://a.com/\n")

        exit_code = main(
            [
                "batch",
                str(input_path),
                "--column",
                "uri",
                "--output",
                str(tmp_path / "out.parquet"),
            ]
        )

        assert exit_code == 1
