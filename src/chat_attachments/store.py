"""Ordered, deduplicated attachment state for a single chat composer."""

import logging
import threading
from collections.abc import Callable

from chat_attachments.files.models import DocumentFile, is_same_document

logger = logging.getLogger(__name__)


class ImageSlot:
    """Holds at most one image, as a data URL.

    A new image replaces the previous one; images are never merged.
    """

    def __init__(self) -> None:
        self._url: str | None = None

    @property
    def url(self) -> str | None:
        """Current image data URL, or None when empty."""
        return self._url

    def set(self, url: str | None) -> bool:
        """Replace the image. Empty strings count as no image.

        Returns:
            True if the stored value changed.
        """
        url = url or None
        changed = url != self._url
        self._url = url
        return changed

    def clear(self) -> bool:
        """Empty the slot. Returns True if an image was present."""
        had_image = self._url is not None
        self._url = None
        return had_image

    def __bool__(self) -> bool:
        return self._url is not None


StoreListener = Callable[["DocumentStore"], None]


class DocumentStore:
    """Document attachments plus a single image slot.

    Documents keep insertion order and never contain two entries that are
    the same attachment under ``is_same_document``. Every mutation runs under
    one lock, so concurrent uploads cannot both pass the duplicate check.

    Listeners registered with ``subscribe`` are called with the store after
    each mutation that actually changed state.
    """

    def __init__(self) -> None:
        self._files: list[DocumentFile] = []
        self._image = ImageSlot()
        self._lock = threading.Lock()
        self._listeners: list[StoreListener] = []

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def files(self) -> list[DocumentFile]:
        """Snapshot of the stored documents, in insertion order."""
        with self._lock:
            return list(self._files)

    @property
    def image_url(self) -> str | None:
        """Current image data URL, or None."""
        with self._lock:
            return self._image.url

    def snapshot(self) -> tuple[str | None, list[DocumentFile]]:
        """Image URL and documents, read together under the lock."""
        with self._lock:
            return self._image.url, list(self._files)

    def __len__(self) -> int:
        with self._lock:
            return len(self._files)

    def is_empty(self) -> bool:
        """True when there is neither an image nor any document."""
        with self._lock:
            return not self._image and not self._files

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, file: DocumentFile) -> bool:
        """Append a document unless an equivalent one is already stored.

        Args:
            file: Document to add.

        Returns:
            True if the document was added, False if it was rejected as a
            duplicate (the store is left unchanged).
        """
        with self._lock:
            if any(is_same_document(existing, file) for existing in self._files):
                logger.debug(
                    "Rejected duplicate attachment %s (%d bytes)",
                    file.filename,
                    file.filesize,
                )
                return False
            self._files.append(file)
        self._notify()
        return True

    def remove(self, file: DocumentFile) -> None:
        """Remove every document whose id matches ``file.id``."""
        with self._lock:
            kept = [f for f in self._files if f.id != file.id]
            changed = len(kept) != len(self._files)
            self._files = kept
        if changed:
            self._notify()

    def set_image(self, url: str | None) -> None:
        """Replace the current image (or clear it with None)."""
        with self._lock:
            changed = self._image.set(url)
        if changed:
            self._notify()

    def reset(self) -> None:
        """Clear all documents and the image.

        Listeners are only notified when something was actually cleared.
        """
        with self._lock:
            changed = self._image.clear()
            if self._files:
                self._files = []
                changed = True
        if changed:
            self._notify()

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            A callable that unregisters the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
