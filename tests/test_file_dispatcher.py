"""Tests for the file/text scan entry points."""

import logging
from pathlib import Path

import pytest

from mtlscan.file_parser import (
    MTLEventType,
    WFCorruptException,
    collect_events,
    collect_file_events,
    scan_file,
    scan_lines,
    scan_text,
)

SAMPLE = """\
# Exported material library

newmtl Brick
Ka 0.0 0.0 0.0
Kd 0.8 0.1 0.2
Ks 0.5 0.5 0.5
Ns 96.078431
d 1.0
illum 2
map_Kd -s 1 1 1 textures/brick.png

newmtl Glass
Tf 0.9 0.9 0.9
Kd xyz 0.3 0.3 0.3
Pr 0.1
bump -bm 0.5 glass_normal.png
"""


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "materials.mtl"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


class TestScanFile:
    def test_returns_line_count(self, sample_file, collector) -> None:
        assert scan_file(sample_file, collector) == len(SAMPLE.splitlines())

    def test_events(self, sample_file) -> None:
        events = collect_file_events(sample_file)
        materials = [e.value for e in events if e.type is MTLEventType.MATERIAL]
        assert materials == ["Brick", "Glass"]
        textures = [e.value for e in events if e.type in (MTLEventType.DIFFUSE_TEXTURE, MTLEventType.BUMP_TEXTURE)]
        assert textures == ["textures/brick.png", "glass_normal.png"]
        assert MTLEventType.TRANSMISSION_COLOR_RGB in [e.type for e in events]

    def test_xyz_diffuse_is_skipped(self, sample_file) -> None:
        events = collect_file_events(sample_file)
        diffuse = [e for e in events if e.type is MTLEventType.DIFFUSE_COLOR_RGB]
        assert len(diffuse) == 1
        assert diffuse[0].payload == pytest.approx((0.8, 0.1, 0.2))

    def test_accepts_str_path(self, sample_file, collector) -> None:
        scan_file(str(sample_file), collector)
        assert collector.events[0].type is MTLEventType.COMMENT

    def test_progress_bar_does_not_change_result(self, sample_file) -> None:
        with_bar = collect_file_events(sample_file, progress=True)
        without_bar = collect_file_events(sample_file)
        assert [e.type for e in with_bar] == [e.type for e in without_bar]

    def test_missing_file(self, tmp_path, collector) -> None:
        with pytest.raises(FileNotFoundError):
            scan_file(tmp_path / "absent.mtl", collector)

    def test_wrong_suffix(self, tmp_path, collector) -> None:
        path = tmp_path / "mesh.obj"
        path.write_text("v 0 0 0\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Unsupported file format"):
            scan_file(path, collector)

    def test_corrupt_file_raises(self, tmp_path, collector) -> None:
        path = tmp_path / "broken.mtl"
        path.write_text("newmtl a\nmap_Kd\n", encoding="utf-8")
        with pytest.raises(WFCorruptException, match="Missing diffuse texture filename"):
            scan_file(path, collector)

    def test_undecodable_file_raises(self, tmp_path, collector) -> None:
        path = tmp_path / "latin.mtl"
        path.write_bytes(b"newmtl caf\xe9\n")
        with pytest.raises(WFCorruptException, match="Undecodable"):
            scan_file(path, collector)

    def test_logs_scan(self, sample_file, collector, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="MTLScan.file_dispatcher"):
            scan_file(sample_file, collector)
        assert "Scanned 16 lines" in caplog.text


class TestScanText:
    def test_scan_text(self, collector) -> None:
        assert scan_text("newmtl a\r\nd 0.5\r\n", collector) == 2
        assert [e.type for e in collector.events] == [MTLEventType.MATERIAL, MTLEventType.DISSOLVE]

    def test_collect_events_from_lines(self) -> None:
        events = collect_events(["newmtl a", "refl sky.png"])
        assert [e.value for e in events] == ["a", "sky.png"]

    def test_collect_events_from_string(self) -> None:
        assert collect_events("# only a comment")[0].value == "only a comment"

    def test_empty_text(self) -> None:
        assert collect_events("") == []


def _summary(events):
    return [(e.type, e.value.text if hasattr(e.value, "text") else e.value) for e in events]


class TestLineSplitting:
    CONTENT = "# note\u2028newmtl Hidden\r\nmap_Kd a.png\x85b.png\rd 0.5\nKs 1 1 1\u000c\n"

    def test_text_and_file_give_same_events(self, tmp_path) -> None:
        path = tmp_path / "unicode.mtl"
        path.write_bytes(self.CONTENT.encode("utf-8"))
        from_text = collect_events(self.CONTENT)
        from_file = collect_file_events(path)
        assert _summary(from_text) == _summary(from_file)

    def test_unicode_separators_do_not_break_lines(self, collector) -> None:
        assert scan_text(self.CONTENT, collector) == 4
        assert collector.events[0].value == "note\u2028newmtl Hidden"
        assert MTLEventType.MATERIAL not in [e.type for e in collector.events]

    def test_lone_carriage_return_breaks_lines(self, collector) -> None:
        assert scan_text("newmtl a\rd 0.5", collector) == 2

    def test_scan_lines_rejects_a_single_string(self, collector) -> None:
        with pytest.raises(TypeError):
            scan_lines("newmtl Brick\nd 0.5\n", collector)
        assert collector.events == []
