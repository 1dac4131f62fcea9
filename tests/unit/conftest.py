import threading

import pytest


@pytest.fixture
def run_in_thread():
    """Start ``fn`` on a daemon thread; joined on teardown."""
    threads = []

    def _run(fn):
        t = threading.Thread(target=fn, daemon=True)
        t.start()
        threads.append(t)
        return t

    yield _run
    for t in threads:
        t.join(timeout=5)
