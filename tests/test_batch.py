"""Tests for CSV batch rendering."""

import pytest
from unittest.mock import MagicMock

from fen2png.config import RenderOptions
from fen2png.data.batch import BatchFileError, BatchRecord, BatchRenderer, BatchReport, read_batch_file
from fen2png.pipeline import DiagramRenderer

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def renderer(fake_rasterize):
    return DiagramRenderer(RenderOptions(), font=MagicMock())


class TestReadBatchFile:
    """Test read_batch_file."""

    def test_reads_records(self, tmp_path):
        batch = tmp_path / "batch.csv"
        batch.write_text(
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1,start.png\n"
            "\n"
            '"8/8/8/4k3/8/8/8/4K3 b - - 0 1",kings.png\n'
        )

        records = read_batch_file(batch)

        assert [r.output for r in records] == ["start.png", "kings.png"]
        assert records[1].fen == "8/8/8/4k3/8/8/8/4K3 b - - 0 1"
        assert records[0].line == 1
        assert records[1].line == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_batch_file(tmp_path / "missing.csv")

    def test_wrong_column_count(self, tmp_path):
        batch = tmp_path / "batch.csv"
        batch.write_text("8/8/8/8/8/8/8/8,a.png\n8/8/8/8/8/8/8/8\n")

        with pytest.raises(BatchFileError, match=":2: expected 2 columns, got 1"):
            read_batch_file(batch)


class TestBatchRenderer:
    """Test BatchRenderer.run."""

    def test_renders_all_records(self, renderer, tmp_path):
        records = [
            BatchRecord("8/8/8/8/8/8/8/8", str(tmp_path / "a.png"), 1),
            BatchRecord("8/8/8/4k3/8/8/8/4K3 w", str(tmp_path / "b.png"), 2),
        ]

        report = BatchRenderer(renderer, progress=False).run(records)

        assert report.ok
        assert report.total == 2
        assert (tmp_path / "a.png").read_bytes().startswith(PNG_SIGNATURE)
        assert (tmp_path / "b.png").read_bytes().startswith(PNG_SIGNATURE)

    def test_bad_record_does_not_stop_batch(self, renderer, tmp_path):
        records = [
            BatchRecord("8/8/8", str(tmp_path / "bad.png"), 1),
            BatchRecord("8/8/8/8/8/8/8/8", str(tmp_path / "good.png"), 2),
            BatchRecord("8/8/8/8/8/8/8/8", str(tmp_path / "missing" / "x.png"), 3),
        ]

        report = BatchRenderer(renderer, progress=False).run(records)

        assert not report.ok
        assert report.succeeded == [records[1]]
        assert [record for record, _ in report.failed] == [records[0], records[2]]
        assert report.failed[0][1] == "3 ranks in FEN"
        assert (tmp_path / "good.png").exists()
        assert not (tmp_path / "bad.png").exists()

    def test_empty_batch(self, renderer):
        report = BatchRenderer(renderer, progress=False).run([])

        assert report == BatchReport()
        assert report.ok
