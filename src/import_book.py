#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Import The Daily Stoic text file into the meditations table
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from db import DSN, get_engine, init_schema
from load_meditations import LoadReport, insert_meditations
from parse_book import Meditation, parse_book, read_book
from utils_text import preview

load_dotenv()

LOG = logging.getLogger(__name__)

BOOK_PATH = os.getenv("BOOK_PATH", "data/TheDailyStoic.txt")
PREVIEW_COUNT = 3


def log_preview(meditations: list[Meditation], count: int = PREVIEW_COUNT) -> None:
    for n, med in enumerate(meditations[:count], start=1):
        LOG.info("=== Meditation %d ===", n)
        LOG.info("Date: %s %d", med.month, med.day)
        LOG.info("Title: %s", med.title)
        LOG.info("Quote: %s", preview(med.quote))
        LOG.info("Reference: %s", med.reference)
        LOG.info("Context: %s", preview(med.context))


def run(book_path: str | None = None, dsn: str | None = None) -> LoadReport:
    book_path = book_path or BOOK_PATH
    LOG.info("Parsing %s", book_path)
    meditations = parse_book(read_book(book_path))
    LOG.info("Extracted %d meditations", len(meditations))
    log_preview(meditations)

    engine = get_engine(dsn)
    owned = dsn is not None and dsn != DSN
    try:
        init_schema(engine)
        report = insert_meditations(engine, meditations)
    finally:
        if owned:
            engine.dispose()

    if report.ok:
        LOG.info("Successfully inserted all meditations into database!")
    else:
        LOG.error(
            "Inserted %d/%d meditations, %d rejected",
            report.inserted, report.total, len(report.failed),
        )
    return report


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s [%(name)s] %(message)s")
    parser = argparse.ArgumentParser(description="Load The Daily Stoic into the meditations table")
    parser.add_argument("--book", dest="book", help=f"Book text file (default: {BOOK_PATH})")
    parser.add_argument("--dsn", dest="dsn", help="SQLAlchemy DSN (default: DB_DSN or sqlite:///daily-stoic.db)")
    args = parser.parse_args(argv)
    try:
        report = run(args.book, args.dsn)
    except Exception:
        LOG.exception("Error inserting meditations")
        raise
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
