"""Tests for digest-distiller exception classes."""

from digest_distiller import DistillerError, DocumentReadError, ExportError


class TestDistillerError:
    """Tests for the base DistillerError exception."""

    def test_instantiation_with_message(self):
        """DistillerError stores the error message."""
        error = DistillerError("Something went wrong")

        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_inheritance(self):
        """DistillerError is an Exception."""
        assert isinstance(DistillerError("test"), Exception)


class TestDocumentReadError:
    """Tests for DocumentReadError exception."""

    def test_instantiation_with_path(self):
        """DocumentReadError stores message and path."""
        error = DocumentReadError("Failed to open PDF", path="digest.pdf")

        assert error.message == "Failed to open PDF"
        assert error.path == "digest.pdf"

    def test_path_optional(self):
        """DocumentReadError path defaults to None."""
        assert DocumentReadError("test").path is None

    def test_inheritance(self):
        """DocumentReadError inherits from DistillerError."""
        assert isinstance(DocumentReadError("test"), DistillerError)


class TestExportError:
    """Tests for ExportError exception."""

    def test_instantiation(self):
        """ExportError stores the error message."""
        assert ExportError("Disk full").message == "Disk full"

    def test_inheritance(self):
        """ExportError inherits from DistillerError."""
        assert isinstance(ExportError("test"), DistillerError)
