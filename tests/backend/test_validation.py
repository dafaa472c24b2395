"""Tests for the skill field rules."""

import pytest

from portfolio_backend.schemas.skill import SkillCreate
from portfolio_backend.services.errors import ValidationError
from portfolio_backend.services.validation import validate_skill


def make_candidate(**overrides) -> SkillCreate:
    fields = {"name": "Python", "category": "Backend"}
    fields.update(overrides)
    return SkillCreate(**fields)


class TestRequiredFields:
    """Tests for name and category presence."""

    def test_minimal_candidate_is_valid(self):
        """Name and category alone are enough."""
        validate_skill(make_candidate())

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank_name_rejected(self, name):
        """Missing or blank names fail."""
        with pytest.raises(ValidationError, match="Skill name is required"):
            validate_skill(make_candidate(name=name))

    @pytest.mark.parametrize("category", [None, "", "\t"])
    def test_blank_category_rejected(self, category):
        """Missing or blank categories fail."""
        with pytest.raises(ValidationError, match="Skill category is required"):
            validate_skill(make_candidate(category=category))


class TestProficiencyLevel:
    """Tests for the 1-5 proficiency range."""

    @pytest.mark.parametrize("level", [0, 6, -3])
    def test_out_of_range_rejected(self, level):
        """Levels outside 1..5 fail."""
        with pytest.raises(ValidationError, match="between 1 and 5"):
            validate_skill(make_candidate(proficiency_level=level))

    @pytest.mark.parametrize("level", [1, 3, 5])
    def test_in_range_accepted(self, level):
        """Boundaries and interior values pass."""
        validate_skill(make_candidate(proficiency_level=level))

    def test_absent_accepted(self):
        """Proficiency is optional."""
        validate_skill(make_candidate(proficiency_level=None))


class TestYearsExperience:
    """Tests for the experience range rules."""

    def test_negative_rejected(self):
        """-1 years fails."""
        with pytest.raises(ValidationError, match="cannot be negative"):
            validate_skill(make_candidate(years_experience=-1))

    def test_zero_accepted(self):
        """0 years passes."""
        validate_skill(make_candidate(years_experience=0))

    def test_above_column_range_rejected(self):
        """Values past the INTEGER column range fail instead of overflowing the driver."""
        with pytest.raises(ValidationError, match="at most 2147483647"):
            validate_skill(make_candidate(years_experience=2**31))
        with pytest.raises(ValidationError, match="at most 2147483647"):
            validate_skill(make_candidate(years_experience=10**30))

    def test_column_maximum_accepted(self):
        """The largest INTEGER value passes."""
        validate_skill(make_candidate(years_experience=2**31 - 1))


class TestColorHex:
    """Tests for the #RRGGBB color rule."""

    def test_mixed_case_accepted(self):
        """Hex digits may be upper or lower case."""
        validate_skill(make_candidate(color_hex="#1a2B3c"))

    @pytest.mark.parametrize("color", ["#ZZZZZZ", "1a2B3c", "#1a2B3", "#1a2B3c4", "#1a2B3c\n"])
    def test_malformed_rejected(self, color):
        """Anything but # followed by six hex digits fails."""
        with pytest.raises(ValidationError, match="valid hex color"):
            validate_skill(make_candidate(color_hex=color))


class TestLengths:
    """Tests for the column length limits."""

    def test_name_too_long(self):
        """Names longer than 100 characters fail."""
        with pytest.raises(ValidationError, match="Skill name must be less than 100"):
            validate_skill(make_candidate(name="x" * 101))

    def test_category_too_long(self):
        """Categories longer than 50 characters fail."""
        with pytest.raises(ValidationError, match="Category must be less than 50"):
            validate_skill(make_candidate(category="x" * 51))

    def test_description_too_long(self):
        """Descriptions longer than 1000 characters fail."""
        with pytest.raises(ValidationError, match="Description"):
            validate_skill(make_candidate(description="x" * 1001))

    def test_icon_url_too_long(self):
        """Icon URLs longer than 255 characters fail."""
        with pytest.raises(ValidationError, match="Icon URL"):
            validate_skill(make_candidate(icon_url="https://x.io/" + "a" * 250))

    def test_limits_are_inclusive(self):
        """Values exactly at the limit pass."""
        validate_skill(
            make_candidate(name="n" * 100, category="c" * 50, description="d" * 1000, icon_url="i" * 255)
        )
