"""Tests for batch mode: target loading and sequential orchestration."""

import json

import pytest

from filmo_scraper.batch import BatchOrchestrator, load_targets
from filmo_scraper.crawls import ActorMoviesCrawl
from filmo_scraper.errors import ConfigurationError, TransportError
from filmo_scraper.session import PageSession

from tests.pages import FakeFetcher, movies_page, no_results_page


def write_json(tmp_path, data, name="actors.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data))
    return str(path)


class TestLoadTargets:
    def test_actor_objects(self, tmp_path):
        path = write_json(tmp_path, [
            {"name": "Keanu Reeves", "imdb_id": "nm0000206"},
            {"name": "Winona Ryder", "imdb_id": "nm0000213"},
        ])
        assert load_targets(path) == ["nm0000206", "nm0000213"]

    def test_plain_ids(self, tmp_path):
        assert load_targets(write_json(tmp_path, ["nm1", " nm2 "])) == ["nm1", "nm2"]

    def test_empty_list(self, tmp_path):
        assert load_targets(write_json(tmp_path, [])) == []

    @pytest.mark.parametrize(
        "data",
        [
            {"imdb_id": "nm1"},
            [{"name": "No Id"}],
            [{"name": "Blank", "imdb_id": ""}],
            [42],
        ],
    )
    def test_malformed_content(self, tmp_path, data):
        with pytest.raises(ConfigurationError):
            load_targets(write_json(tmp_path, data))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "actors.json"
        path.write_text("[{not json")
        with pytest.raises(ConfigurationError):
            load_targets(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_targets(str(tmp_path / "missing.json"))

    def test_no_path(self):
        with pytest.raises(ConfigurationError):
            load_targets("")


def two_actor_pages(crawl, *targets):
    pages = {}
    for target in targets:
        build = crawl.url_builder(target)
        pages[build(1)] = movies_page([(f"{target} movie", "(2000)", "5.0")])
        pages[build(2)] = no_results_page()
    return pages


class TestBatchOrchestrator:
    def test_targets_run_strictly_in_order(self, config, sink):
        crawl = ActorMoviesCrawl(config)
        fetcher = FakeFetcher(two_actor_pages(crawl, "nmA", "nmB"))
        results = BatchOrchestrator(PageSession(crawl, fetcher, sink)).run(["nmA", "nmB"])

        owners = ["nmA" if "role=nmA" in url else "nmB" for url in fetcher.requested]
        assert owners == ["nmA", "nmA", "nmB", "nmB"]
        assert [(r.target_id, r.records, r.pages, r.error) for r in results] == [
            ("nmA", 1, 2, None),
            ("nmB", 1, 2, None),
        ]

    def test_each_target_gets_its_own_artifact(self, config, sink):
        crawl = ActorMoviesCrawl(config)
        fetcher = FakeFetcher(two_actor_pages(crawl, "nmA", "nmB"))
        BatchOrchestrator(PageSession(crawl, fetcher, sink)).run(["nmA", "nmB"])

        a = sink.load(crawl.artifact_key("nmA"))
        b = sink.load(crawl.artifact_key("nmB"))
        assert [m["title"] for m in a["movies"]] == ["nmA movie"]
        assert [m["title"] for m in b["movies"]] == ["nmB movie"]
        assert b["actor"]["imdb_id"] == "nmB"

    def test_transport_error_aborts_batch_by_default(self, config, sink):
        crawl = ActorMoviesCrawl(config)
        # nmA has no pages, so its first fetch fails
        fetcher = FakeFetcher(two_actor_pages(crawl, "nmB"))

        with pytest.raises(TransportError):
            BatchOrchestrator(PageSession(crawl, fetcher, sink)).run(["nmA", "nmB"])
        assert not any("role=nmB" in url for url in fetcher.requested)

    def test_continue_on_error_moves_to_next_target(self, config, sink):
        crawl = ActorMoviesCrawl(config)
        fetcher = FakeFetcher(two_actor_pages(crawl, "nmB"))

        results = BatchOrchestrator(
            PageSession(crawl, fetcher, sink), continue_on_error=True
        ).run(["nmA", "nmB"])

        assert results[0].target_id == "nmA"
        assert results[0].error is not None
        assert results[1].records == 1
        assert results[1].error is None
