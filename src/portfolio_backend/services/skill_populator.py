"""Bulk loading of skill definitions from a JSON seed file."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError as SchemaValidationError

from portfolio_backend.schemas.admin import ClearResult, PopulateResult
from portfolio_backend.schemas.skill import SkillCreate
from portfolio_backend.services.errors import SkillServiceError
from portfolio_backend.services.skill_service import SkillService

logger = logging.getLogger(__name__)


class PopulateError(Exception):
    """Raised when the seed file cannot be used at all."""


class SkillPopulator:
    """
    Loads skill definitions into the database through ``SkillService``.

    Entries whose name already exists are skipped; entries that fail
    validation or persistence are counted and logged, and loading continues.
    """

    def __init__(self, service: SkillService) -> None:
        """
        Initialize the populator.

        Args:
            service: Skill service used for existence checks and creation
        """
        self.service = service

    def populate(self, entries: Iterable[Mapping[str, Any]]) -> PopulateResult:
        """
        Create every entry whose name is not yet taken.

        Args:
            entries: Skill definitions using camelCase or snake_case keys

        Returns:
            Counters for processed, added, skipped and errored entries
        """
        result = PopulateResult()

        for entry in entries:
            result.total_processed += 1
            name = entry.get("name") if isinstance(entry, Mapping) else None
            try:
                candidate = SkillCreate.model_validate(entry)
                if candidate.name and self.service.skill_exists_by_name(candidate.name):
                    result.skipped += 1
                    continue
                self.service.create_skill(candidate)
                result.successfully_added += 1
            except (SchemaValidationError, SkillServiceError) as exc:
                result.errors += 1
                logger.warning("Error processing skill %r: %s", name, exc)

        logger.info(
            "Skills population completed: %d processed, %d added, %d skipped, %d errors",
            result.total_processed,
            result.successfully_added,
            result.skipped,
            result.errors,
        )
        return result

    def populate_from_file(self, filepath: str | Path) -> PopulateResult:
        """
        Load skills from a JSON file shaped like ``{"skills": [...]}``.

        Args:
            filepath: Path to the seed file

        Returns:
            Counters for the load

        Raises:
            PopulateError: If the file is missing, unreadable or has no skills
        """
        path = Path(filepath).expanduser()
        if not path.is_file():
            raise PopulateError(f"{path} file not found")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise PopulateError(f"Could not read {path}: {exc}") from exc

        entries = data.get("skills") if isinstance(data, dict) else None
        if not entries:
            raise PopulateError("No skills data found in JSON")

        return self.populate(entries)

    def clear_all(self) -> ClearResult:
        """Delete every skill and report how many were removed."""
        deleted = 0
        for skill in self.service.get_all_skills():
            self.service.delete_skill(skill.id)
            deleted += 1
        logger.info("Cleared %d skills", deleted)
        return ClearResult(deleted_count=deleted)
