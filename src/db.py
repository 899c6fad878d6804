import os
from pathlib import Path

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from dotenv import load_dotenv

load_dotenv()

DSN = os.getenv("DB_DSN", "sqlite:///daily-stoic.db")
# relative to the working directory: run from the repo root or set SCHEMA_DIR
SQL_DIR = Path(os.getenv("SCHEMA_DIR", "sql"))

_engine: Engine | None = None

def get_engine(dsn: str | None = None) -> Engine:
    """Shared engine for ``DSN``, or a fresh one owned by the caller for ``dsn``."""
    global _engine
    if dsn is not None and dsn != DSN:
        return create_engine(dsn, future=True)
    if _engine is None:
        _engine = create_engine(DSN, future=True)
    return _engine


def init_schema(engine: Engine | None = None, sql_dir: str | Path | None = None):
    engine = engine or get_engine()
    kind = "postgres" if engine.dialect.name == "postgresql" else "sqlite"
    schema_path = Path(sql_dir or SQL_DIR) / f"schema_{kind}.sql"
    with engine.begin() as cxn:
        sql = schema_path.read_text(encoding="utf-8")
        for stmt in [s for s in sql.split(";\n") if s.strip()]:
            cxn.execute(text(stmt))

if __name__ == "__main__":
    init_schema()
