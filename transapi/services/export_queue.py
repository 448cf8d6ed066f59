"""Background re-export of domains changed through the API.

A bounded queue decouples request handling from writing files: once it is
full, ``enqueue`` blocks the caller until the worker catches up. The worker
logs export failures and moves on to the next domain.
"""

import logging
import queue
import threading

from transapi.services.exporter import export_domain

logger = logging.getLogger(__name__)

_STOP = object()


class ExportQueue:

    def __init__(self, app, export_dir, maxsize=100, enabled=True):
        self.app = app
        self.export_dir = export_dir
        self.enabled = enabled
        self._queue = queue.Queue(maxsize=maxsize)
        self._thread = None
        self._stopped = False

    @property
    def running(self):
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        if not self.enabled or self.running:
            return
        self._stopped = False
        self._thread = threading.Thread(target=self._run, name='export-worker', daemon=True)
        self._thread.start()
        logger.info(f"Export worker started (export dir: {self.export_dir})")

    def enqueue(self, domain_name):
        """Schedule a re-export; blocks while the queue is full, drops it after shutdown."""
        if not self.enabled:
            logger.debug(f"Export worker disabled, not exporting '{domain_name}'")
            return
        if self._stopped:
            logger.warning(f"Export worker stopped, dropping export of '{domain_name}'")
            return
        self._queue.put(domain_name)

    def join(self):
        """Wait until every queued export has been handled."""
        self._queue.join()

    def shutdown(self, drain=True):
        """Stop the worker, after it has exported everything queued if drain is set."""
        self._stopped = True
        if not self.running:
            return

        if not drain:
            try:
                while True:
                    self._queue.get_nowait()
                    self._queue.task_done()
            except queue.Empty:
                pass

        self._queue.put(_STOP)
        self._thread.join()
        self._thread = None
        logger.info("Export worker stopped")

    def _run(self):
        while True:
            domain_name = self._queue.get()
            try:
                if domain_name is _STOP:
                    return
                self._export(domain_name)
            finally:
                self._queue.task_done()

    def _export(self, domain_name):
        with self.app.app_context():
            try:
                export_domain(
                    domain_name,
                    self.export_dir,
                    source_language=self.app.config.get('XLIFF_SOURCE_LANGUAGE', 'en'),
                )
            except Exception:
                logger.exception(f"Export of domain '{domain_name}' failed")
