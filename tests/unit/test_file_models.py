"""Unit tests for RawFile, DocumentFile and the document equality rule."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chat_attachments.files.models import DocumentFile, RawFile, is_same_document


def _doc(**overrides: object) -> DocumentFile:
    fields: dict[str, object] = {
        "filetype": "csv",
        "filename": "data.csv",
        "filesize": 10,
        "content": "a,b\n1,2\n",
    }
    fields.update(overrides)
    return DocumentFile(**fields)  # type: ignore[arg-type]


@pytest.mark.unit
class TestRawFile:
    """Test RawFile construction and reading."""

    def test_from_bytes(self) -> None:
        """Size should be derived from the data."""
        raw = RawFile.from_bytes("notes.csv", b"x,y\n", "text/csv")

        assert raw.name == "notes.csv"
        assert raw.content_type == "text/csv"
        assert raw.size == 4
        assert raw.read_bytes() == b"x,y\n"

    def test_from_path_guesses_content_type(self, tmp_path: Path) -> None:
        """Content type should be guessed from the extension when not given."""
        path = tmp_path / "report.pdf"
        path.write_bytes(b"%PDF-1.4")

        raw = RawFile.from_path(path)

        assert raw.name == "report.pdf"
        assert raw.content_type == "application/pdf"
        assert raw.size == 8
        assert raw.read_bytes() == b"%PDF-1.4"

    def test_from_path_explicit_content_type(self, tmp_path: Path) -> None:
        """An explicit content type wins over the guess."""
        path = tmp_path / "table.txt"
        path.write_text("a,b\n", encoding="utf-8")

        raw = RawFile.from_path(path, content_type="text/csv")

        assert raw.content_type == "text/csv"

    def test_from_path_unknown_extension(self, tmp_path: Path) -> None:
        """Unknown extensions leave the content type empty."""
        path = tmp_path / "blob.qqzz"
        path.write_bytes(b"\x00")

        assert RawFile.from_path(path).content_type == ""

    def test_from_path_missing_file(self, tmp_path: Path) -> None:
        """A missing file cannot be selected."""
        with pytest.raises(OSError):
            RawFile.from_path(tmp_path / "missing.csv")

    def test_read_without_source_raises(self) -> None:
        """A RawFile with neither data nor path cannot be read."""
        raw = RawFile(name="ghost.csv", content_type="text/csv", size=0)

        with pytest.raises(OSError, match="ghost.csv"):
            raw.read_bytes()


@pytest.mark.unit
class TestDocumentFile:
    """Test DocumentFile model behaviour."""

    def test_ids_are_unique(self) -> None:
        """Each new document gets its own id."""
        assert _doc().id != _doc().id

    def test_embeddings_default_to_none(self) -> None:
        """CSV documents carry no embeddings."""
        assert _doc().embeddings is None

    def test_is_immutable(self) -> None:
        """Documents cannot be modified after creation."""
        doc = _doc()
        with pytest.raises(ValidationError):
            doc.content = "changed"  # type: ignore[misc]

    def test_rejects_unknown_filetype(self) -> None:
        """Only csv and pdf are valid document types."""
        with pytest.raises(ValidationError):
            _doc(filetype="docx")

    def test_serialisation_omits_missing_embeddings(self) -> None:
        """The wire form drops absent embeddings."""
        dumped = _doc().model_dump(mode="json", exclude_none=True)

        assert "embeddings" not in dumped
        assert dumped["filetype"] == "csv"


@pytest.mark.unit
class TestIsSameDocument:
    """Test the dedup equality rule."""

    def test_same_id_is_same_regardless_of_name_and_size(self) -> None:
        a = _doc(id="doc-1", filename="a.csv", filesize=1)
        b = _doc(id="doc-1", filename="b.csv", filesize=2)

        assert is_same_document(a, b)

    def test_same_name_and_size_is_same_regardless_of_id(self) -> None:
        a = _doc(filename="a.csv", filesize=5)
        b = _doc(filename="a.csv", filesize=5, content="different")

        assert a.id != b.id
        assert is_same_document(a, b)

    def test_same_name_different_size_is_different(self) -> None:
        assert not is_same_document(_doc(filesize=5), _doc(filesize=6))

    def test_same_size_different_name_is_different(self) -> None:
        assert not is_same_document(
            _doc(filename="a.csv"), _doc(filename="b.csv")
        )
