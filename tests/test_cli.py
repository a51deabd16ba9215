import pytest

import crawl as cli
from conftest import FakeFetcher, fake_resolver, page_html, row_html


BASE = "http://example.test/list?page="


class _ContextFetcher(FakeFetcher):
    def __init__(self, pages, **kwargs):
        super().__init__(pages)
        self.kwargs = kwargs

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        pass


@pytest.fixture
def fake_site(monkeypatch):
    pages = {}

    def factory(**kwargs):
        return _ContextFetcher(pages, **kwargs)

    monkeypatch.setattr(cli, "PageFetcher", factory)
    monkeypatch.setattr(cli, "Resolver", fake_resolver)
    return pages


@pytest.mark.parametrize("argv", [[], ["a.tsv", "b.tsv"]])
def test_wrong_argument_count_exits_1(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    assert exc.value.code == 1
    assert "usage:" in capsys.readouterr().err


def test_unopenable_output_exits_1(tmp_path, fake_site, capsys):
    code = cli.main([str(tmp_path / "no-such-dir" / "out.tsv")])
    assert code == 1
    assert "[error]" in capsys.readouterr().err


def test_invalid_config_exits_1(tmp_path, fake_site):
    config_path = tmp_path / "crawl.json"
    config_path.write_text("{not json", encoding="utf-8")
    assert cli.main([str(tmp_path / "out.tsv"), "--config", str(config_path)]) == 1
    assert cli.main([str(tmp_path / "out.tsv"), "--start-page", "0"]) == 1


def test_successful_crawl(tmp_path, fake_site, capsys):
    fake_site[BASE + "1"] = page_html(row_html("字", "5", "13", "42"))
    out = tmp_path / "out.tsv"
    code = cli.main([str(out), "--base-url", BASE, "--max-page", "2", "--verbose"])
    assert code == 0
    assert out.read_text(encoding="utf-8") == "字\t字\t字\tzì\t5\t13\t42\n"
    stdout = capsys.readouterr().out
    assert "1 rows written" in stdout
    assert "GET " + BASE + "1" in stdout


def test_fatal_crawl_error_reports_rows_written(tmp_path, fake_site, capsys):
    fake_site[BASE + "1"] = page_html(row_html("字", "5", "13", "42"))
    out = tmp_path / "out.tsv"
    code = cli.main([str(out), "--base-url", BASE, "--max-page", "3"])
    assert code == 1
    err = capsys.readouterr().err
    assert "HTTP 404" in err
    assert "(1 rows written)" in err
    assert out.read_text(encoding="utf-8") == "字\t字\t字\tzì\t5\t13\t42\n"


def test_fetcher_gets_configured_timeout(tmp_path, monkeypatch):
    created = []

    def factory(**kwargs):
        fetcher = _ContextFetcher({}, **kwargs)
        created.append(fetcher)
        return fetcher

    monkeypatch.setattr(cli, "PageFetcher", factory)
    monkeypatch.setattr(cli, "Resolver", fake_resolver)
    code = cli.main([str(tmp_path / "out.tsv"), "--timeout", "5", "--start-page", "1", "--max-page", "1"])
    assert code == 0
    assert created[0].kwargs["timeout"] == 5.0
