from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass, field
import logging
from typing import Iterable

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from parse_book import Meditation

LOG = logging.getLogger(__name__)

DELETE_ALL = "delete from meditations"

INSERT = """
insert into meditations(month, day, title, quote, reference, context, date_key)
values (:month, :day, :title, :quote, :reference, :context, :date_key)
"""


@dataclass(slots=True)
class LoadReport:
    """Outcome of one :func:`insert_meditations` batch."""

    total: int = 0
    inserted: int = 0
    #: ``(date_key, error message)`` for every row that was rejected
    failed: list[tuple[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def insert_meditations(engine: Engine, meditations: Iterable[Meditation]) -> LoadReport:
    """Replace the content of ``meditations`` with the given records.

    Every row is attempted once.  A rejected row is logged and reported, the
    rest of the batch goes on.  Failing to clear the table is not caught.
    """

    report = LoadReport()
    stmt = text(INSERT)
    with engine.begin() as cxn:
        cxn.execute(text(DELETE_ALL))
        # sqlite only rolls back the failing statement; postgres aborts the
        # whole transaction unless the row sits in its own savepoint
        use_savepoint = cxn.dialect.name != "sqlite"
        for med in meditations:
            report.total += 1
            try:
                with cxn.begin_nested() if use_savepoint else nullcontext():
                    cxn.execute(stmt, med.as_row())
            except SQLAlchemyError as exc:
                reason = str(getattr(exc, "orig", None) or exc)
                LOG.error("Error inserting meditation %s: %s", med.date_key, reason)
                report.failed.append((med.date_key, reason))
                continue
            report.inserted += 1
    return report


def fetch_date_keys(engine: Engine) -> list[str]:
    with engine.connect() as cxn:
        return list(cxn.execute(text("select date_key from meditations order by id")).scalars())


def count_meditations(engine: Engine) -> int:
    with engine.connect() as cxn:
        return cxn.execute(text("select count(*) from meditations")).scalar_one()
