"""
Build a dictionary file for the game from a page of past Wordle answers.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Runs the answers through the game's own word filter (a–z only, exact
  length, lower-case, de-duplicated) so the output loads without skips.
- Writes one word per line.

Usage:
    python -m script.fetch_dictionary --out dictionary.txt
    # keep the page's calendar order instead of alphabetical:
    python -m script.fetch_dictionary --keep-order --out dictionary.txt
"""

import argparse
import logging
import re

import requests
from bs4 import BeautifulSoup

from packages.datasets import clean_words, write_lines
from packages.engine import WORD_LENGTH

logger = logging.getLogger(__name__)

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]+)\b")


def parse_answers(html: str) -> list[str]:
    """Pull the answer token out of every dated row, in page order (upper-case kept)."""
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    return [m.group(2) for m in ROW_RE.finditer(text)]


def fetch_answers(url: str = URL, N: int = WORD_LENGTH, keep_order: bool = False) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    raw = parse_answers(r.text)
    words = clean_words(raw, N)
    if not keep_order:
        return list(words)
    # clean_words sorts; re-impose first-seen page order
    wanted = set(words)
    out, seen = [], set()
    for w in (a.lower() for a in raw):
        if w in wanted and w not in seen:
            seen.add(w)
            out.append(w)
    return out


def main():
    ap = argparse.ArgumentParser(description="Download past answers into a dictionary file")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="dictionary.txt")
    ap.add_argument("--word-length", type=int, default=WORD_LENGTH)
    ap.add_argument("--keep-order", action="store_true",
                    help="keep calendar order instead of sorting alphabetically")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    words = fetch_answers(args.url, args.word_length, args.keep_order)
    if not words:
        logger.warning(f"No {args.word_length}-letter answers found at {args.url}")
    write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")


if __name__ == "__main__":
    main()
