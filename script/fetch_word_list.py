"""
Download a page listing five-letter words and write a clean word list.

What it does:
- Downloads the page (plain text or HTML).
- Takes the visible text and pulls out every standalone 5-letter token.
- Uppercases, de-duplicates while preserving page order, and writes one
  word per line, ready for the game's loader.

Usage:
    python -m script.fetch_word_list --url https://example.org/words.txt \
        --out wordleclone/datasets/data/words.txt
    # merge with the existing list instead of replacing it:
    python -m script.fetch_word_list --url ... --merge
"""

import re
import argparse
from pathlib import Path

import requests
from bs4 import BeautifulSoup

from wordleclone.datasets import normalize_words, read_lines, write_lines

DEFAULT_OUT = "wordleclone/datasets/data/words.txt"
TOKEN_RE = re.compile(r"\b[A-Za-z]{5}\b")


def extract_words(page: str) -> list[str]:
    """Every 5-letter token in the page's visible text, normalized and unique."""
    text = BeautifulSoup(page, "html.parser").get_text("\n", strip=True)
    return normalize_words(TOKEN_RE.findall(text))


def fetch_words(url: str) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words(r.text)


def main():
    ap = argparse.ArgumentParser(description="Fetch and normalize a five-letter word list")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default=DEFAULT_OUT)
    ap.add_argument("--merge", action="store_true", help="keep words already in --out")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of page order")
    args = ap.parse_args()

    words = fetch_words(args.url)
    out = Path(args.out)
    if args.merge and out.exists():
        words = normalize_words(read_lines(out) + words)
    if args.sort:
        words = sorted(words)

    write_lines(words, out)
    print(f"Wrote {len(words)} unique words -> {out}")


if __name__ == "__main__":
    main()
