#!/usr/bin/env python3
"""
CLI for interlinear lookup.

Usage:
    python -m interlinear_lookup build --book john            # Scrape seed data for a book
    python -m interlinear_lookup build --book john -w 20      # Use 20 parallel workers
    python -m interlinear_lookup lookup "John 1:1" --location 7 --length 9
    python -m interlinear_lookup morph V-AAI-3S
"""

import argparse
import json
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Optional

from .lexicon import Lexicon
from .models import SelectionRange
from .morphology import ParsedMorphology, parse_morphology
from .resolver import resolve
from .scraper import BIBLE_BOOKS, scrape_verse
from .seeder import book_name_from_filename, seed_directory
from .store import VerseStore


# =============================================================================
# Configuration
# =============================================================================

BIBLE_STRUCTURE_FILE = "bible_structure.json"
OUTPUT_DIR = "interlinear"
DEFAULT_WORKERS = 10


# =============================================================================
# Thread-Safe Book Writer
# =============================================================================

class BookWriter:
    """Collects scraped verses for one book and saves them as a seed file."""

    def __init__(self, book: str, output_dir: str = OUTPUT_DIR):
        self.book = book
        self.path = Path(output_dir) / f"{book}.json"
        self.lock = threading.Lock()
        self.verses: dict[tuple[int, int], dict] = {}

    def load_existing(self):
        """Pick up verses from a previous run so they are not scraped again."""
        if not self.path.exists():
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                existing = json.load(f)
        except (OSError, json.JSONDecodeError):
            return  # Start fresh if file is corrupted
        if not isinstance(existing, dict) or not isinstance(existing.get("verses"), list):
            return

        with self.lock:
            for verse in existing["verses"]:
                if not isinstance(verse, dict):
                    continue
                key = (verse.get("chapter"), verse.get("verse"))
                if all(key):
                    self.verses[key] = verse

    def has_verse(self, chapter: int, verse: int) -> bool:
        with self.lock:
            return (chapter, verse) in self.verses

    def add_verse(self, verse_entry: dict):
        with self.lock:
            self.verses[(verse_entry["chapter"], verse_entry["verse"])] = verse_entry

    def save(self):
        with self.lock:
            book_json = {
                "book": book_name_from_filename(self.path),
                "verses": [self.verses[k] for k in sorted(self.verses)],
            }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(book_json, f, indent=2, ensure_ascii=False)


# =============================================================================
# Progress Tracking
# =============================================================================

class ProgressTracker:
    """Track and display scraping progress."""

    def __init__(self, total_verses: int):
        self.total = total_verses
        self.completed = 0
        self.failed = 0
        self.lock = threading.Lock()
        self.start_time = time.time()

    def update(self, success: bool = True):
        with self.lock:
            if success:
                self.completed += 1
            else:
                self.failed += 1

    def get_stats(self) -> dict:
        with self.lock:
            elapsed = time.time() - self.start_time
            rate = self.completed / elapsed if elapsed > 0 else 0
            return {
                "completed": self.completed,
                "failed": self.failed,
                "total": self.total,
                "elapsed": elapsed,
                "rate": rate,
            }

    def print_progress(self, current_verse: str = ""):
        stats = self.get_stats()
        done = stats["completed"] + stats["failed"]
        pct = done / stats["total"] * 100 if stats["total"] else 100.0
        print(
            f"\r[{done:,}/{stats['total']:,}] {pct:.1f}% | 📖 {current_verse:<20}",
            end="",
            flush=True
        )


# =============================================================================
# Build
# =============================================================================

def load_bible_structure(path: str = BIBLE_STRUCTURE_FILE) -> dict[str, list[int]]:
    """Load the Bible structure (book -> list of verse counts per chapter)."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def generate_verse_tasks(structure: dict[str, list[int]], book: str) -> list[tuple[int, int]]:
    """List the (chapter, verse) pairs of one book."""
    tasks = []
    for chapter_idx, verse_count in enumerate(structure.get(book, [])):
        for verse in range(1, verse_count + 1):
            tasks.append((chapter_idx + 1, verse))
    return tasks


def scrape_verse_task(
    book: str,
    chapter: int,
    verse: int,
    writer: BookWriter,
    progress: ProgressTracker,
) -> bool:
    """Scrape one verse into the writer. Returns success status."""
    entry = scrape_verse(book, chapter, verse)
    progress.update(success=entry is not None)
    if entry is None:
        return False
    writer.add_verse(entry)
    progress.print_progress(f"{chapter}:{verse}")
    return True


def build_book(
    book: str,
    structure: dict[str, list[int]],
    max_workers: int = DEFAULT_WORKERS,
    output_dir: str = OUTPUT_DIR,
) -> BookWriter:
    """Scrape every verse of a book in parallel and write its seed file."""
    writer = BookWriter(book, output_dir)
    writer.load_existing()

    tasks = [
        (chapter, verse)
        for chapter, verse in generate_verse_tasks(structure, book)
        if not writer.has_verse(chapter, verse)
    ]
    print(f"📖 {book}: {len(tasks):,} verses to scrape ({len(writer.verses):,} already done)")

    progress = ProgressTracker(len(tasks))
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(scrape_verse_task, book, chapter, verse, writer, progress): (chapter, verse)
            for chapter, verse in tasks
        }
        for future in as_completed(futures):
            try:
                future.result()
            except Exception as e:
                chapter, verse = futures[future]
                print(f"\n❌ Exception for {book} {chapter}:{verse}: {e}")

    writer.save()
    stats = progress.get_stats()
    print(f"\n✅ Wrote {writer.path} ({stats['completed']:,} scraped, {stats['failed']:,} failed)")
    return writer


# =============================================================================
# Lookup / Morph
# =============================================================================

def format_morphology(parsed: ParsedMorphology) -> str:
    lines = [parsed.description]
    for detail in parsed.details:
        lines.append(f"  {detail.term:<8} {detail.value:<18} {detail.explanation}")
    return "\n".join(lines)


def run_lookup(data_dir: str, reference: str, location: int, length: int) -> int:
    store = VerseStore()
    seed_directory(store, data_dir)

    verse = store.lookup(reference)
    if verse is None:
        print(f"❌ Unknown verse: {reference}")
        return 1

    print(f"{verse.reference}: {verse.text}")
    resolution = resolve(verse, SelectionRange(location, length))
    if resolution is None:
        print("No interlinear word for this selection")
        return 1

    word = resolution.word
    print(f"\n{word.formatted_info}")
    print(f"(matched by {resolution.strategy})")
    if word.morphology:
        print("\n" + format_morphology(parse_morphology(word.morphology)))

    entry = Lexicon(store).entry_for(word)
    if entry:
        refs = ", ".join(r.display for r in entry.definitions[0].verse_references)
        print(f"\n{entry.part_of_speech_label} ({entry.total_occurrences} occurrences) {refs}")
    return 0


# =============================================================================
# CLI Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Interlinear word lookup for Bible verses."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Scrape BibleHub into an interlinear seed file")
    build.add_argument("--book", "-b", required=True, help="Book to scrape (e.g., 'john', '1_peter')")
    build.add_argument(
        "--workers", "-w",
        type=int,
        default=DEFAULT_WORKERS,
        help=f"Number of parallel workers (default: {DEFAULT_WORKERS})"
    )
    build.add_argument(
        "--output", "-o",
        default=OUTPUT_DIR,
        help=f"Output directory (default: {OUTPUT_DIR})"
    )
    build.add_argument(
        "--structure",
        default=BIBLE_STRUCTURE_FILE,
        help=f"Verse counts per chapter (default: {BIBLE_STRUCTURE_FILE})"
    )

    lookup = sub.add_parser("lookup", help="Resolve a selection to an interlinear word")
    lookup.add_argument("reference", help="Verse reference, e.g. 'John 1:1'")
    lookup.add_argument("--location", "-l", type=int, required=True, help="Selection start offset")
    lookup.add_argument("--length", "-n", type=int, default=0, help="Selection length (0 = tap)")
    lookup.add_argument(
        "--data", "-d",
        default=OUTPUT_DIR,
        help=f"Directory of seed files (default: {OUTPUT_DIR})"
    )

    morph = sub.add_parser("morph", help="Explain a morphology tag")
    morph.add_argument("tag", help="e.g. 'V-AAI-3S' or 'Noun - Dative Feminine Singular'")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "build":
        if args.book not in BIBLE_BOOKS:
            print(f"❌ Unknown book: {args.book}")
            print(f"   Valid books: {', '.join(BIBLE_BOOKS[:5])}...")
            return 1
        try:
            structure = load_bible_structure(args.structure)
        except (OSError, json.JSONDecodeError) as e:
            print(f"❌ Could not load {args.structure}: {e}")
            return 1
        build_book(args.book, structure, max_workers=args.workers, output_dir=args.output)
        return 0

    if args.command == "lookup":
        return run_lookup(args.data, args.reference, args.location, args.length)

    print(format_morphology(parse_morphology(args.tag)))
    return 0


if __name__ == "__main__":
    exit(main())
