"""
Shared fixtures for the Daily Stoic importer tests.
"""
from pathlib import Path

import pytest

import db
from db import get_engine, init_schema

REPO_SQL = Path(__file__).resolve().parents[1] / "sql"


SAMPLE_BOOK = """\
THE DAILY STOIC

January 1st On Choice

"The chief task in life is simply this: to identify and separate matters so that I can say clearly to myself which are externals not under my control, and which have to do with the choices I actually control." —Epictetus, Discourses, 2.5.4-5

Some commentary spanning
multiple lines.

January 2nd Education Is Freedom

"What is it that makes us free? Education." —Epictetus, Discourses, 2.1.21-23

Freedom comes from learning.

January 3rd Be Ruthless to the Things That Don't Matter

"How many have laid waste to your life when you weren't aware of what you were losing." —Seneca, On the Brevity of Life, 3.3b

Commentary for the third day.
"""


@pytest.fixture(autouse=True)
def schema_dir(monkeypatch):
    """Point init_schema at the repository schema whatever the working directory."""
    monkeypatch.setattr(db, "SQL_DIR", REPO_SQL)
    return REPO_SQL


@pytest.fixture
def sample_book() -> str:
    return SAMPLE_BOOK


@pytest.fixture
def book_file(tmp_path) -> Path:
    path = tmp_path / "TheDailyStoic.txt"
    path.write_text(SAMPLE_BOOK, encoding="utf-8")
    return path


@pytest.fixture
def dsn(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'daily-stoic.db'}"


@pytest.fixture
def engine(dsn):
    eng = get_engine(dsn)
    init_schema(eng)
    yield eng
    eng.dispose()
