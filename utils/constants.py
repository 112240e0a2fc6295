"""Fixed URLs, paths and request settings for the airline code scraper."""

WIKI_BASE_PATH = "https://en.wikipedia.org/wiki/List_of_airline_codes_"

# Page suffixes in fetch order: the encoded "0–9" page, then A-Z
SUFFIXES = ("0%E2%80%939",) + tuple(chr(c) for c in range(ord('A'), ord('Z') + 1))

# Class substring identifying the data table on each page
TABLE_CLASS_MARKER = 'wikitable'

CSV_FILENAME = 'airline_codes_all.csv'
OUTPUT_DIRNAME = 'airline_vectors'
LOG_FILENAME = 'airline_scraper.log'

ASSET_BASE_URL = "https://images.trvl-media.com/media/content/expus/graphics/static_content/fusion/v0.1b/images/airlines/vector/s/"
ASSET_URL_SUFFIX = '_sq.svg'
ASSET_EXTENSION = '.svg'

# Placeholder used whenever the per-code logo is missing (U+2708 airplane)
FALLBACK_ASSET_URL = "https://raw.githubusercontent.com/googlefonts/noto-emoji/main/svg/emoji_u2708.svg"

CODE_COLUMN = 'IATA'

# Seconds; matches the default timeout of a stock .NET HttpClient
REQUEST_TIMEOUT = 100

USER_AGENTS = [
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0',
    'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Edge/120.0.0.0',
]
