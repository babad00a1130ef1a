"""Qt live preview window and clipboard export for rendered text images."""

from __future__ import annotations

import logging
import sys
import time

from PIL import Image
from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication, QImage, QPixmap
from PySide6.QtWidgets import QApplication, QLabel, QLineEdit, QVBoxLayout, QWidget

from playground_renderer import TextRasterizer, image_to_rgb32_le

_log = logging.getLogger("playground.preview")


def to_qimage(image: Image.Image) -> QImage:
    data = image_to_rgb32_le(image)
    # copy() detaches the QImage from the Python-owned buffer.
    return QImage(data, image.width, image.height, image.width * 4, QImage.Format.Format_RGB32).copy()


def _app() -> QGuiApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv[:1])
    return app


class PreviewWindow(QWidget):
    """Re-renders the image on every edit; Enter accepts, Escape cancels."""

    def __init__(self, rasterizer: TextRasterizer, background: Image.Image, text: str = "") -> None:
        super().__init__()
        self.setWindowTitle("Text Renderer")
        self._rasterizer = rasterizer
        self._background = background.convert("RGB")
        self.accepted = False
        self.image = self._background.copy()

        self._label = QLabel(self)
        self._label.setFixedSize(self._background.width, self._background.height)
        self._input = QLineEdit(self)
        self._input.setPlaceholderText("&eHello &lworld")
        self._input.setText(text)
        self._input.textChanged.connect(self.refresh)
        self._input.returnPressed.connect(self._accept)

        layout = QVBoxLayout(self)
        layout.addWidget(self._label)
        layout.addWidget(self._input)

        self.refresh(text)

    @property
    def text(self) -> str:
        return self._input.text()

    def refresh(self, text: str) -> None:
        self.image = self._rasterizer.render_image(text, self._background)
        self._label.setPixmap(QPixmap.fromImage(to_qimage(self.image)))

    def _accept(self) -> None:
        self.accepted = True
        self.close()

    def keyPressEvent(self, event) -> None:  # noqa: N802
        if event.key() == Qt.Key.Key_Escape:
            self.close()
            return
        super().keyPressEvent(event)


def run_preview(rasterizer: TextRasterizer, background: Image.Image, text: str = "") -> tuple[str, Image.Image] | None:
    app = _app()
    window = PreviewWindow(rasterizer, background, text)
    window.show()
    app.exec()
    if not window.accepted:
        return None
    return window.text, window.image


def save_image_to_clipboard(image: Image.Image, retries: int = 5, delay_s: float = 0.1) -> bool:
    app = _app()
    qimage = to_qimage(image)
    for attempt in range(1, retries + 1):
        clipboard = app.clipboard()
        clipboard.setImage(qimage)
        app.processEvents()
        if not clipboard.image().isNull():
            _log.info("image copied to clipboard attempt=%d", attempt, extra={"event": "clipboard_copied"})
            return True
        time.sleep(delay_s)
    _log.warning("clipboard copy failed after %d attempts", retries, extra={"event": "clipboard_failed"})
    return False
