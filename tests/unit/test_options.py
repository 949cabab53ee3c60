#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for HtmlOptions."""
import dataclasses

import pytest

from blockdown.options import HtmlOptions


@pytest.mark.unit
class TestHtmlOptions:
    """Test defaults, validation and cloning."""

    def test_defaults(self) -> None:
        """Images are converted and the stdlib tree builder is used by default."""
        options = HtmlOptions()
        assert options.keep_img_tags is False
        assert options.html_parser == "html.parser"

    def test_frozen(self) -> None:
        """Options cannot be mutated in place."""
        options = HtmlOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.keep_img_tags = True  # type: ignore[misc]

    def test_create_updated_returns_new_instance(self) -> None:
        """create_updated leaves the original untouched."""
        original = HtmlOptions()
        updated = original.create_updated(keep_img_tags=True)
        assert updated is not original
        assert updated.keep_img_tags is True
        assert original.keep_img_tags is False

    @pytest.mark.parametrize("parser", ["html.parser", "lxml", "html5lib"])
    def test_known_parsers_accepted(self, parser: str) -> None:
        """Every supported tree builder name is accepted."""
        assert HtmlOptions(html_parser=parser).html_parser == parser  # type: ignore[arg-type]

    def test_unknown_parser_rejected(self) -> None:
        """An unknown tree builder name fails validation."""
        with pytest.raises(ValueError, match="html_parser"):
            HtmlOptions(html_parser="xml")  # type: ignore[arg-type]

    def test_create_updated_validates(self) -> None:
        """Cloning re-runs validation."""
        with pytest.raises(ValueError):
            HtmlOptions().create_updated(html_parser="bogus")

    def test_field_names(self) -> None:
        """field_names lists every option."""
        assert HtmlOptions.field_names() == frozenset({"keep_img_tags", "html_parser"})

    def test_fields_carry_help_text(self) -> None:
        """Each field documents itself for the command line."""
        for f in dataclasses.fields(HtmlOptions):
            assert f.metadata.get("help")
