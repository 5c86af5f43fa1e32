"""Tests for the in-memory activity log ring buffer."""
import threading
from datetime import datetime

from utils.logger import LogBuffer, LOG_CAPACITY, RECENT_LOGS_LIMIT, utc_timestamp


def test_append_records_timestamp_and_message(capsys):
    buf = LogBuffer()
    entry = buf.add_log('hello')

    assert entry['message'] == 'hello'
    assert entry['timestamp'].endswith('Z')
    assert buf.recent() == [entry]
    # Echoed to the console as "[timestamp] message"
    assert f"[{entry['timestamp']}] hello" in capsys.readouterr().out


def test_capacity_is_never_exceeded_and_oldest_evicted_first():
    buf = LogBuffer()
    for i in range(250):
        buf.add_log(f"msg {i}")
        assert len(buf) <= LOG_CAPACITY

    messages = [e['message'] for e in buf.recent(LOG_CAPACITY)]
    assert len(messages) == LOG_CAPACITY
    assert messages == [f"msg {i}" for i in range(150, 250)]


def test_recent_returns_suffix_in_insertion_order():
    buf = LogBuffer()
    for i in range(35):
        buf.add_log(f"msg {i}")

    everything = buf.recent(LOG_CAPACITY)
    latest = buf.recent(RECENT_LOGS_LIMIT)
    assert len(latest) == 20
    assert latest == everything[-20:]
    assert latest[0]['message'] == 'msg 15'
    assert latest[-1]['message'] == 'msg 34'


def test_recent_with_fewer_entries_than_requested():
    buf = LogBuffer()
    assert buf.recent() == []
    buf.add_log('a')
    buf.add_log('b')
    assert [e['message'] for e in buf.recent(20)] == ['a', 'b']
    assert buf.recent(0) == []


def test_recent_returns_copies():
    buf = LogBuffer()
    buf.add_log('original')
    buf.recent()[0]['message'] = 'tampered'
    assert buf.recent()[0]['message'] == 'original'


def test_utc_timestamp_is_iso8601():
    ts = utc_timestamp()
    parsed = datetime.fromisoformat(ts.replace('Z', '+00:00'))
    assert parsed.utcoffset().total_seconds() == 0
    # millisecond precision: 2024-01-01T00:00:00.000Z
    assert len(ts) == 24


def test_concurrent_appends_keep_cap_and_fifo_order():
    buf = LogBuffer()
    threads_count, per_thread = 8, 200
    start = threading.Barrier(threads_count)

    def writer(tid):
        start.wait()
        for seq in range(per_thread):
            buf.add_log(f"t{tid}:{seq}")

    threads = [threading.Thread(target=writer, args=(t,)) for t in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(buf) == LOG_CAPACITY
    survivors = [e['message'] for e in buf.recent(LOG_CAPACITY)]
    assert len(set(survivors)) == LOG_CAPACITY

    by_thread = {}
    for message in survivors:
        tid, seq = message[1:].split(':')
        by_thread.setdefault(int(tid), []).append(int(seq))

    for seqs in by_thread.values():
        # Each writer's survivors are its newest entries, still in the order written
        assert seqs == sorted(seqs)
        assert seqs == list(range(per_thread - len(seqs), per_thread))
