"""Tests for JSON artifact storage."""

import json
import logging
import os
import stat

import pytest

from filmo_scraper.errors import PersistenceError
from filmo_scraper.storage import JsonSink, safe_key_part


class TestJsonSink:
    def test_save_creates_directories(self, sink):
        assert sink.save("actormovies/actormovies-nm1", {"movies": []}) is True
        path = sink.path_for("actormovies/actormovies-nm1")
        assert os.path.isfile(path)
        with open(path, encoding="utf-8") as f:
            assert json.load(f) == {"movies": []}

    def test_save_overwrites_with_full_value(self, sink):
        sink.save("k", [1])
        sink.save("k", [1, 2, 3])
        assert sink.load("k") == [1, 2, 3]

    def test_artifact_is_world_readable(self, sink):
        sink.save("k", [1])
        assert stat.S_IMODE(os.stat(sink.path_for("k")).st_mode) == 0o644

    def test_no_temporary_files_left(self, sink):
        sink.save("k", {"a": 1})
        sink.save("k", {"a": 2})
        assert os.listdir(os.path.dirname(sink.path_for("k"))) == ["k.json"]

    def test_unicode_written_verbatim(self, sink):
        sink.save("k", {"title": "Amélie"})
        with open(sink.path_for("k"), encoding="utf-8") as f:
            assert "Amélie" in f.read()

    def test_unserializable_value_is_logged(self, sink, caplog):
        with caplog.at_level(logging.ERROR, logger="filmo_scraper"):
            assert sink.save("k", {"bad": object()}) is False
        assert "could not marshal" in caplog.text
        assert sink.saves == 0

    def test_failed_write_keeps_previous_artifact(self, sink, monkeypatch):
        sink.save("k", [1])

        def broken_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", broken_replace)
        assert sink.save("k", [1, 2]) is False
        monkeypatch.undo()

        assert sink.load("k") == [1]
        assert os.listdir(os.path.dirname(sink.path_for("k"))) == ["k.json"]

    def test_key_outside_output_dir_rejected(self, sink):
        with pytest.raises(PersistenceError):
            sink.path_for("../../escape")
        assert sink.save("../../escape", []) is False


class TestSafeKeyPart:
    def test_plain_ids_unchanged(self):
        assert safe_key_part("nm0000206") == "nm0000206"

    def test_separators_replaced(self):
        assert "/" not in safe_key_part("../nm1/x")
        assert safe_key_part("..") == "_"
