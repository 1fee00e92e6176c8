#!/usr/bin/env python3
"""
Seed script: loads memes and their captions straight into the database.
The API has no endpoint for creating memes, so this is how they get there.
Input is a JSON array:
  [{"url": "/memes/cat.jpg", "captions": [{"text": "...", "correct": true}, ...]}, ...]
Run:
  python scripts/seed_memes.py --file memes.json
  python scripts/seed_memes.py --file memes.json --database-url sqlite+aiosqlite:///./database/memes.db
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from memequiz.config import get_settings
from memequiz.core.logging_config import configure_logging
from memequiz.db.store import MemeStore


def load_memes(path: Path) -> list[dict]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array of memes")
    return data


async def seed(database_url: str, memes: list[dict]) -> list[int]:
    store = MemeStore(database_url)
    try:
        await store.initialize()
        ids = []
        for meme in memes:
            captions = [(c["text"], bool(c.get("correct", False))) for c in meme.get("captions", [])]
            ids.append(await store.add_meme(meme["url"], captions))
        return ids
    finally:
        await store.dispose()


def main():
    ap = argparse.ArgumentParser(description="Seed memes and captions")
    ap.add_argument("--file", required=True, type=Path, help="JSON file with memes")
    ap.add_argument("--database-url", default=None, help="Database URL (defaults to settings)")
    args = ap.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)
    memes = load_memes(args.file)
    ids = asyncio.run(seed(args.database_url or settings.database_url, memes))
    print(f"Done. Memes created: {len(ids)}")


if __name__ == "__main__":
    main()
