from pathlib import Path
from types import SimpleNamespace

import scrape_airlines
from scrape_airlines import AirlineScraper, main
from scraper_lib.fetch import build_asset_url, build_page_url
from utils.constants import FALLBACK_ASSET_URL

FIXTURES = Path(__file__).parent / 'fixtures'


class FakeSession:
    def __init__(self, responses):
        self.responses = responses

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def get(self, url, headers=None, timeout=None, **kwargs):
        status, body = self.responses.get(url, (404, b''))
        return SimpleNamespace(status_code=status, content=body, raise_for_status=lambda: None)


def test_run_scrapes_then_downloads(tmp_path):
    responses = {
        build_page_url('A'): (200, (FIXTURES / 'page_a.html').read_bytes()),
        build_asset_url('AA'): (200, b'<svg id="aa"/>'),
        FALLBACK_ASSET_URL: (200, b'<svg id="plane"/>'),
    }
    scraper = AirlineScraper(work_dir=str(tmp_path), suffixes=['A'])
    scraper.session_factory = lambda: FakeSession(responses)

    summary = scraper.run()

    assert (tmp_path / 'airline_codes_all.csv').exists()
    assert (tmp_path / 'airline_vectors' / 'AA.svg').read_bytes() == b'<svg id="aa"/>'
    assert (tmp_path / 'airline_vectors' / 'A3.svg').read_bytes() == b'<svg id="plane"/>'
    assert summary.downloaded == 1
    assert summary.substituted == 1


def test_main_runs_in_current_directory_and_reports_errors(tmp_path, monkeypatch, capsys):
    seen = {}

    def fake_run(self):
        seen['work_dir'] = self.work_dir
        raise RuntimeError('boom')

    monkeypatch.setattr(scrape_airlines.AirlineScraper, 'run', fake_run)
    monkeypatch.chdir(tmp_path)

    main()

    assert seen['work_dir'] == Path.cwd()
    assert 'Unexpected error: boom' in capsys.readouterr().out


def test_main_takes_no_arguments():
    import inspect
    assert list(inspect.signature(main).parameters) == []
