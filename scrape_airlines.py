#!/usr/bin/env python3
"""
Airline code scraper and logo downloader

This script builds a combined table of airline codes from Wikipedia's
"List of airline codes" pages and then downloads one SVG logo per airline.

Phases:
- Scrape: fetch the `0–9` page and the `A`..`Z` pages one after another, take
    the first `wikitable` on each, and merge them into `airline_codes_all.csv`
    (one header line, then every data row, every field double-quoted).
- Download: read the CSV back, find the `IATA` column, and fetch
    `<IATA>_sq.svg` for every row into `airline_vectors/<IATA>.svg`. When a
    logo is missing the airplane emoji SVG is saved in its place.

Usage notes:
- Run from the folder that should receive the output.
- Everything is regenerated on each run; existing files are overwritten.
- Failures on a single page or a single logo are reported and skipped.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

import requests

from scraper_lib.fetch import build_asset_url, build_page_url, fetch_asset, fetch_section_page
from scraper_lib.parse import find_wikitable, parse_table_rows, table_rows
from utils.constants import (
    ASSET_EXTENSION,
    CODE_COLUMN,
    CSV_FILENAME,
    FALLBACK_ASSET_URL,
    LOG_FILENAME,
    OUTPUT_DIRNAME,
    SUFFIXES,
)
from utils.csvline import format_csv_line, split_csv_line


class AssetOutcome(Enum):
    DOWNLOADED = 'downloaded'
    SUBSTITUTED = 'substituted'
    MISSING = 'missing'
    ERROR = 'error'


@dataclass
class ScrapeSummary:
    pages_ok: int = 0
    pages_skipped: int = 0
    rows: int = 0
    header_written: bool = False


@dataclass
class DownloadSummary:
    downloaded: int = 0
    substituted: int = 0
    missing: int = 0
    errors: int = 0
    skipped: int = 0

    def record(self, outcome: AssetOutcome):
        if outcome is AssetOutcome.DOWNLOADED:
            self.downloaded += 1
        elif outcome is AssetOutcome.SUBSTITUTED:
            self.substituted += 1
        elif outcome is AssetOutcome.MISSING:
            self.missing += 1
        else:
            self.errors += 1


def _is_success(response) -> bool:
    return 200 <= response.status_code < 300


class AirlineScraper:
    """Scrapes the airline code tables and downloads one logo per code"""

    def __init__(self, work_dir: str = '.', suffixes: Optional[List[str]] = None):
        """
        Initialize the scraper

        Args:
            work_dir: Folder receiving the CSV, the logo folder and the log file
            suffixes: Page suffixes to fetch (defaults to 0–9 then A-Z)
        """
        self.work_dir = Path(work_dir)
        self.csv_path = self.work_dir / CSV_FILENAME
        self.output_dir = self.work_dir / OUTPUT_DIRNAME
        self.suffixes = list(suffixes) if suffixes is not None else list(SUFFIXES)
        self.session_factory = requests.Session
        self.scrape_summary = ScrapeSummary()
        try:
            log_path = self.work_dir / LOG_FILENAME
            self.logger = logging.getLogger(f'AirlineScraper:{self.work_dir.resolve()}')
            # Avoid adding duplicate handlers when reusing the same logger
            if not self.logger.handlers:
                handler = RotatingFileHandler(str(log_path), maxBytes=5 * 1024 * 1024, backupCount=3, encoding='utf-8')
                fmt = logging.Formatter('%(asctime)s %(levelname)s %(message)s')
                handler.setFormatter(fmt)
                self.logger.addHandler(handler)
                self.logger.setLevel(logging.INFO)
        except OSError:
            # Logging should never block the run
            self.logger = None

    def _log(self, level: int, msg: str):
        if getattr(self, 'logger', None):
            self.logger.log(level, msg)

    def build_dataset(self) -> str:
        """
        Fetch every suffix page and merge their tables into CSV text

        The header comes from the first page whose table yields one and is
        never repeated. The first row of every table is not a data row.

        Returns:
            The CSV text, one newline-terminated line per row
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        summary = ScrapeSummary()
        lines = []

        with self.session_factory() as session:
            for suffix in self.suffixes:
                url = build_page_url(suffix)
                print(f"Fetching: {url}")

                try:
                    response = fetch_section_page(session, suffix)
                    wikitable = find_wikitable(response.content)
                except Exception as e:
                    print(f"  ✗ Failed to load {url}: {e}")
                    self._log(logging.WARNING, f"Failed to load {url}: {e}")
                    summary.pages_skipped += 1
                    continue

                if wikitable is None:
                    print("  No table found on this page.")
                    self._log(logging.INFO, f"No table found on {url}")
                    summary.pages_skipped += 1
                    continue

                rows = table_rows(wikitable)
                if not rows:
                    print("  No rows found.")
                    self._log(logging.INFO, f"No rows found on {url}")
                    summary.pages_skipped += 1
                    continue

                table = parse_table_rows(rows)

                if not summary.header_written and table.header:
                    lines.append(format_csv_line(table.header))
                    summary.header_written = True
                    self._log(logging.INFO, f"Header taken from {url}: {table.header}")

                for cells in table.rows:
                    lines.append(format_csv_line(cells))

                summary.pages_ok += 1
                summary.rows += len(table.rows)
                print(f"  ✓ {suffix}: {len(table.rows)} rows")

        self.scrape_summary = summary
        print(f"  ✓ Total: {summary.rows} rows from {summary.pages_ok} pages ({summary.pages_skipped} skipped)")
        self._log(logging.INFO, f"Scrape finished: {summary}")
        return ''.join(line + '\n' for line in lines)

    def write_dataset(self, text: str):
        """Write the CSV text, replacing any previous file"""
        with open(self.csv_path, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
        print(f"✅ Done! Combined CSV saved to: {self.csv_path}")
        self._log(logging.INFO, f"Wrote {self.csv_path}")

    def asset_path(self, code: str) -> Path:
        return self.output_dir / f"{code}{ASSET_EXTENSION}"

    def download_asset(self, session: requests.Session, code: str) -> AssetOutcome:
        """
        Download the logo for one code, falling back to the placeholder

        Args:
            session: Open HTTP session shared across the phase
            code: Airline code, already trimmed and non-empty

        Returns:
            Which of the outcomes happened for this code
        """
        url = build_asset_url(code)
        local_file = self.asset_path(code)

        try:
            response = fetch_asset(session, url)
            if _is_success(response):
                local_file.write_bytes(response.content)
                print(f"✅ Downloaded {code}{ASSET_EXTENSION}")
                self._log(logging.INFO, f"Downloaded {code} from {url}")
                return AssetOutcome.DOWNLOADED

            print(f"⛔ {code}: Not found (HTTP {response.status_code})")
            self._log(logging.INFO, f"HTTP {response.status_code} for {code} URL={url}")

            fallback = fetch_asset(session, FALLBACK_ASSET_URL)
            if _is_success(fallback):
                local_file.write_bytes(fallback.content)
                print(f"✅ Downloaded {code}{ASSET_EXTENSION} as u2708 emoji instead.")
                self._log(logging.INFO, f"Substituted placeholder for {code}")
                return AssetOutcome.SUBSTITUTED

            print(f"⛔ {code}: Placeholder not available either (HTTP {fallback.status_code})")
            self._log(logging.WARNING, f"HTTP {fallback.status_code} for placeholder while resolving {code}")
            return AssetOutcome.MISSING
        except (requests.RequestException, OSError) as e:
            print(f"⚠️  {code}: Error - {e}")
            self._log(logging.WARNING, f"Error downloading {code}: {e}")
            return AssetOutcome.ERROR

    def download_all_assets(self) -> Optional[DownloadSummary]:
        """
        Download one logo per data row of the combined CSV

        Returns:
            Counts per outcome, or None when the CSV has no data rows or no
            code column
        """
        print("🔍 Checking and downloading airline SVG logos...")

        with open(self.csv_path, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()

        if len(lines) <= 1:
            print("No data rows found.")
            self._log(logging.WARNING, f"No data rows in {self.csv_path}")
            return None

        headers = split_csv_line(lines[0])
        code_index = next(
            (i for i, h in enumerate(headers) if h.replace('"', '').strip().upper() == CODE_COLUMN),
            -1,
        )
        if code_index == -1:
            print(f"{CODE_COLUMN} column not found.")
            self._log(logging.ERROR, f"{CODE_COLUMN} column not found in {self.csv_path}: {headers}")
            return None

        summary = DownloadSummary()

        with self.session_factory() as session:
            for line in lines[1:]:
                cols = split_csv_line(line)
                if code_index >= len(cols):
                    summary.skipped += 1
                    continue

                code = cols[code_index].strip().strip('"')
                if not code.strip():
                    summary.skipped += 1
                    continue

                summary.record(self.download_asset(session, code))

        print("🏁 Done!")
        print(f"   Downloaded: {summary.downloaded}, placeholders: {summary.substituted}, "
              f"missing: {summary.missing}, errors: {summary.errors}, skipped rows: {summary.skipped}")
        self._log(logging.INFO, f"Download finished: {summary}")
        return summary

    def run(self) -> Optional[DownloadSummary]:
        """Scrape and write the CSV, then download the logos"""
        text = self.build_dataset()
        self.write_dataset(text)
        return self.download_all_assets()


def main():
    """Main entry point; everything is written to the current directory"""
    scraper = AirlineScraper(work_dir=str(Path.cwd()))

    try:
        scraper.run()
    except KeyboardInterrupt:
        print("\n\n⏸️  Interrupted by user.")
    except Exception as e:
        print(f"\n\n❌ Unexpected error: {e}")
        if scraper.logger:
            scraper.logger.exception("Unexpected error")


if __name__ == "__main__":
    main()
