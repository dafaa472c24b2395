#!/usr/bin/env python3
"""
populate_skills.py: CLI for bulk loading portfolio skills.

Reads a JSON seed file shaped like ``{"skills": [...]}`` and creates every
skill whose name is not yet in the database, without requiring the FastAPI
server to be running.  Uses the same loader as ``POST /api/admin/populate-skills``.

Usage:
    uv run python populate_skills.py [seed-file] [--reset]

Example:
    uv run python populate_skills.py config/skills-data.json --reset
"""

from __future__ import annotations

import argparse
import os
import sys

# Ensure the src/ directory is on the path so package imports resolve correctly
# when running this script directly from the repo root.
_SRC = os.path.join(os.path.dirname(__file__), "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)


def main(argv: list[str] | None = None) -> int:
    # Deferred so sys.path manipulation above takes effect first.
    from portfolio_backend.config import settings
    from portfolio_backend.database import SessionLocal
    from portfolio_backend.init_db import init_database
    from portfolio_backend.logging_config import setup_logging
    from portfolio_backend.services.errors import SkillServiceError
    from portfolio_backend.services.skill_populator import PopulateError, SkillPopulator
    from portfolio_backend.services.skill_service import SkillService

    parser = argparse.ArgumentParser(description="Bulk load skills into the portfolio database.")
    parser.add_argument(
        "seed_file",
        nargs="?",
        default=settings.skills_data_file,
        help="JSON file with a top-level 'skills' list (default: %(default)s)",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="delete every existing skill before loading",
    )
    args = parser.parse_args(argv)

    setup_logging(settings.log_level, settings.log_file)

    print(f"🗄️   Database  : {settings.database_url}")
    print(f"📄  Seed file : {args.seed_file}")
    print()

    init_database()

    db = SessionLocal()
    try:
        populator = SkillPopulator(SkillService(db))

        if args.reset:
            cleared = populator.clear_all()
            print(f"🧹  Cleared {cleared.deleted_count} existing skills")

        try:
            result = populator.populate_from_file(args.seed_file)
        except PopulateError as exc:
            print(f"❌  {exc}", file=sys.stderr)
            return 1
    except SkillServiceError as exc:
        print(f"❌  Database error: {exc}", file=sys.stderr)
        return 1
    finally:
        db.close()

    print("✅  Population complete!")
    print(f"    Processed : {result.total_processed}")
    print(f"    Added     : {result.successfully_added}")
    print(f"    Skipped   : {result.skipped}")
    print(f"    Errors    : {result.errors}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
