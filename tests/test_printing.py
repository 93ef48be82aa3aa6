from __future__ import annotations

import pytest

from focus_group.export.printing import print_document, print_surface


def test_print_surface_removes_file(tmp_path):
    with print_surface("<html>列印</html>", directory=tmp_path) as path:
        assert path.read_text(encoding="utf-8") == "<html>列印</html>"
        assert path.suffix == ".html"

    assert not path.exists()


def test_print_surface_removes_file_on_error(tmp_path):
    with pytest.raises(ValueError):
        with print_surface("<html></html>", directory=tmp_path) as path:
            raise ValueError("boom")

    assert not path.exists()


def test_print_document_waits_before_cleanup(tmp_path):
    opened = []
    waits = []

    def opener(uri):
        opened.append(uri)
        assert list(tmp_path.iterdir())
        return True

    assert print_document("<html></html>", cleanup_delay=5.0, opener=opener, sleep=waits.append, directory=tmp_path)

    assert opened[0].startswith("file://")
    assert waits == [5.0]
    assert list(tmp_path.iterdir()) == []


def test_print_document_cleans_up_when_opener_fails(tmp_path):
    waits = []

    def opener(uri):
        raise RuntimeError("no browser")

    with pytest.raises(RuntimeError):
        print_document("<html></html>", cleanup_delay=2.0, opener=opener, sleep=waits.append, directory=tmp_path)

    assert waits == [2.0]
    assert list(tmp_path.iterdir()) == []
