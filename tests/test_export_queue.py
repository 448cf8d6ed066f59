"""
Tests for the background export queue.
"""

import threading

from transapi.services.export_queue import ExportQueue


class TestExportQueue:

    def test_worker_survives_failed_export(self, app, resolver, languages, write_xliff, tmp_path):
        from transapi.services.importer import import_directory

        write_xliff('messages', 'fr', {'hello': 'Bonjour'})
        import_directory(write_xliff.directory, resolver)

        export_queue = ExportQueue(app, tmp_path / 'out', maxsize=10)
        export_queue.start()
        try:
            export_queue.enqueue('does-not-exist')
            export_queue.enqueue('messages')
            export_queue.join()
        finally:
            export_queue.shutdown()

        assert (tmp_path / 'out' / 'messages.fr.xliff').exists()
        assert not export_queue.running

    def test_full_queue_blocks_producer(self, app, db_session, tmp_path):
        export_queue = ExportQueue(app, tmp_path, maxsize=1)
        export_queue.enqueue('first')

        producer = threading.Thread(target=export_queue.enqueue, args=('second',))
        producer.start()
        producer.join(timeout=0.2)
        assert producer.is_alive()

        export_queue.start()
        producer.join(timeout=5)
        assert not producer.is_alive()

        export_queue.join()
        export_queue.shutdown()

    def test_shutdown_without_drain_drops_pending(self, app, db_session, tmp_path):
        export_queue = ExportQueue(app, tmp_path, maxsize=5)
        for name in ('a', 'b', 'c'):
            export_queue.enqueue(name)

        export_queue.start()
        export_queue.shutdown(drain=False)

        assert not export_queue.running

    def test_enqueue_after_shutdown_is_dropped(self, app, db_session, tmp_path, caplog):
        export_queue = ExportQueue(app, tmp_path, maxsize=1)
        export_queue.start()
        export_queue.shutdown()

        # Would block forever on a full queue if the updates were kept
        export_queue.enqueue('messages')
        export_queue.enqueue('messages')

        assert not export_queue.running
        assert export_queue._queue.empty()
        assert "dropping export of 'messages'" in caplog.text

    def test_disabled_queue_ignores_updates(self, app, tmp_path):
        export_queue = ExportQueue(app, tmp_path, maxsize=1, enabled=False)
        export_queue.start()

        export_queue.enqueue('messages')
        export_queue.enqueue('messages')

        assert not export_queue.running
