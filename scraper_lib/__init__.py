"""HTTP fetch and wikitable parsing helpers used by scrape_airlines.py."""
