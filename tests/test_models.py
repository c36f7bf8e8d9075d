"""
BookStore API — Record Model Unit Tests
========================================

What:  Required-field and casting rules enforced by the ORM models.
How:   Builds model instances directly; validators run on assignment, so no
       database is needed.
"""

import pytest

from bookstore_api.models.bookstore import BookStore
from bookstore_api.models.document import Document
from bookstore_api.models.record import RecordValidationError


class TestBookStoreValidation:
    """Required fields and casting for BookStore."""

    def test_valid_record(self):
        record = BookStore(title="Dune", author="Herbert", pages=412)
        assert record.title == "Dune"
        assert record.author == "Herbert"
        assert record.pages == 412

    def test_missing_title_is_required(self):
        with pytest.raises(RecordValidationError) as exc_info:
            BookStore(title=None, author="Herbert", pages=412)
        assert str(exc_info.value) == (
            "BookStore validation failed: Title: Path `Title` is required."
        )

    def test_empty_string_counts_as_missing(self):
        with pytest.raises(RecordValidationError, match="Path `Author` is required"):
            BookStore(title="Dune", author="", pages=412)

    def test_numeric_string_pages_cast(self):
        assert BookStore(title="Dune", author="Herbert", pages="412").pages == 412

    def test_integral_float_pages_cast(self):
        assert BookStore(title="Dune", author="Herbert", pages=412.0).pages == 412

    def test_fractional_pages_rejected(self):
        with pytest.raises(RecordValidationError, match="Cast to Integer failed"):
            BookStore(title="Dune", author="Herbert", pages=412.5)

    def test_non_numeric_pages_rejected(self):
        with pytest.raises(RecordValidationError) as exc_info:
            BookStore(title="Dune", author="Herbert", pages="abc")
        assert exc_info.value.path == "Pages"
        assert 'Cast to Integer failed for value "abc"' in str(exc_info.value)

    def test_boolean_pages_rejected(self):
        with pytest.raises(RecordValidationError):
            BookStore(title="Dune", author="Herbert", pages=True)

    def test_number_title_stringified(self):
        assert BookStore(title=1984, author="Orwell", pages=328).title == "1984"

    def test_object_title_rejected(self):
        with pytest.raises(RecordValidationError, match="Cast to String failed"):
            BookStore(title={"a": 1}, author="Herbert", pages=412)

    def test_reassignment_is_validated(self):
        record = BookStore(title="Dune", author="Herbert", pages=412)
        with pytest.raises(RecordValidationError):
            record.pages = None
        assert record.pages == 412

    def test_field_path_maps_attribute_to_wire_name(self):
        assert BookStore.field_path("pages") == "Pages"
        assert BookStore.field_path("title") == "Title"


class TestDocumentValidation:
    """Required text for Document."""

    def test_valid_record(self):
        assert Document(text="hello").text == "hello"

    def test_missing_text_is_required(self):
        with pytest.raises(RecordValidationError) as exc_info:
            Document(text=None)
        assert str(exc_info.value) == (
            "Document validation failed: text: Path `text` is required."
        )

    def test_list_text_rejected(self):
        with pytest.raises(RecordValidationError, match="Cast to String failed"):
            Document(text=["a", "b"])
