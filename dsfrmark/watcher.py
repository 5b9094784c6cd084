"""Re-render a source file whenever it changes."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from dsfrmark.render.document import DocumentRenderer, RenderedDocument
from dsfrmark.render.export import write_html

logger = logging.getLogger(__name__)


class _DebouncedHandler(FileSystemEventHandler):
    """Fires the callback once events on one file have been quiet for the debounce window.

    Each event restarts the timer, so a burst (truncate then write, temp file
    then rename) renders once, from the file's final content.
    """

    def __init__(
        self,
        target: Path,
        debounce_seconds: float,
        callback: Callable[[Path], None],
    ) -> None:
        super().__init__()
        self._target = target
        self._debounce = debounce_seconds
        self._callback = callback
        self._timer: threading.Timer | None = None
        self._timer_lock = threading.Lock()
        self._render_lock = threading.Lock()

    def _concerns_target(self, event: FileSystemEvent) -> bool:
        # Editors often save through a temp file renamed over the target
        paths = [event.src_path, getattr(event, "dest_path", "")]
        return any(p and Path(str(p)).resolve() == self._target for p in paths)

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type in ("opened", "closed_no_write"):
            return
        if not self._concerns_target(event):
            return

        with self._timer_lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self._debounce, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def _fire(self) -> None:
        with self._render_lock:
            try:
                self._callback(self._target)
            except Exception:
                logger.exception("Render failed for %s", self._target)

    def join(self, timeout: float | None = None) -> None:
        """Wait for a pending render, if any, to finish."""
        with self._timer_lock:
            timer = self._timer
        if timer is not None:
            timer.join(timeout)


class RenderWatcher:
    """Watches a Markdown source and rewrites its HTML output on every change.

    Renders run on the debounce timer thread, one at a time.
    """

    def __init__(
        self,
        source: Path,
        output: Path,
        renderer: DocumentRenderer,
        *,
        slides: bool = False,
        standalone: bool = False,
        debounce_seconds: float = 0.5,
        on_render: Callable[[RenderedDocument], None] | None = None,
    ) -> None:
        self.source = Path(source).resolve()
        self.output = Path(output)
        self.renderer = renderer
        self.slides = slides
        self.standalone = standalone
        self._on_render = on_render
        self._observer: Observer | None = None
        self._handler = _DebouncedHandler(
            target=self.source,
            debounce_seconds=debounce_seconds,
            callback=lambda _path: self.build(),
        )

    def build(self) -> RenderedDocument:
        """Render the source once and write the output file."""
        text = self.source.read_text(encoding="utf-8")
        doc = self.renderer.render(text, slides=self.slides, standalone=self.standalone)
        write_html(self.output, doc.html)
        if self._on_render is not None:
            self._on_render(doc)
        return doc

    def start(self) -> None:
        if self._observer is not None:
            return
        self._observer = Observer()
        self._observer.schedule(self._handler, str(self.source.parent), recursive=False)
        self._observer.start()
        logger.info("Watching %s for changes", self.source)

    def stop(self) -> None:
        """Stop watching. A render already scheduled still runs, so the last edit lands."""
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join(timeout=5)
        self._observer = None
        self._handler.join(timeout=5)
        logger.info("Stopped watching %s", self.source)

    def run_forever(self) -> None:
        """Block until interrupted (Ctrl+C)."""
        self.start()
        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            pass
        finally:
            self.stop()
