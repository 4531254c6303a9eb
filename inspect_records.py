"""Print the rows of one or more tables the way a read returns them.

Credential columns are hidden, status columns show their stored value.

    python inspect_records.py                 # row count per table
    python inspect_records.py users invoices  # rows of the named tables
"""

import argparse

from sqlalchemy import func
from sqlmodel import Session, select

from db.session import engine
from schemas import SCHEMAS


def count_rows(session: Session) -> dict[str, int]:
    return {
        name: session.exec(select(func.count()).select_from(schema.table)).one()
        for name, schema in sorted(SCHEMAS.items())
    }


def dump_rows(session: Session, name: str, limit: int) -> list[dict]:
    schema = SCHEMAS[name]
    rows = session.exec(select(schema.table).order_by(schema.table.id).limit(limit)).all()
    return [schema.to_response(row).model_dump(mode="json", by_alias=True) for row in rows]


def main():
    parser = argparse.ArgumentParser(description="Inspect registry tables")
    parser.add_argument("tables", nargs="*", metavar="TABLE", help="Table names, e.g. users invoices")
    parser.add_argument("--limit", type=int, default=20, help="Rows shown per table")
    args = parser.parse_args()
    unknown = [name for name in args.tables if name not in SCHEMAS]
    if unknown:
        parser.error(f"unknown tables: {', '.join(unknown)}")

    with Session(engine) as session:
        if not args.tables:
            for name, total in count_rows(session).items():
                print(f" - {name}: {total}")
            return

        for name in args.tables:
            rows = dump_rows(session, name, args.limit)
            print(f"Found {len(rows)} rows in {name}:")
            for row in rows:
                print(f" - {row}")


if __name__ == "__main__":
    main()
