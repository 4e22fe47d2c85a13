import hashlib
import io

import pytest

from jhsiao.records import (
    BufferReader, BufferWriter, HashingReader, HashingWriter, StreamReader,
    StreamWriter, Writer)

import harness

words = harness.WORDS[-1]
expected = hashlib.sha256(b''.join(words)).digest()

class Recorder(object):
    def __init__(self):
        self.updates = []
    def update(self, data):
        self.updates.append(bytes(data))


def test_writer():
    for fmt in ('chunk', 'record', 'record32'):
        plain = BufferWriter(fmt)
        harness.write_records(plain, words)
        w = HashingWriter(BufferWriter(fmt), hashlib.sha256())
        harness.write_records(w, words)
        assert w.digest() == expected
        assert w.inner.getvalue() == plain.getvalue()

def test_reader():
    for fmt in ('record', 'record32'):
        w = BufferWriter(fmt)
        harness.write_records(w, words)
        r = HashingReader(BufferReader(w.getvalue(), fmt, 5), 'sha256')
        assert harness.read_records(r) == words
        assert r.digest() == expected
        assert r.hexdigest() == hashlib.sha256(b''.join(words)).hexdigest()

def test_chunk_independent():
    data = harness.TEXTS[-1]
    for write_size in harness.SIZES:
        buf = io.BytesIO()
        w = HashingWriter(StreamWriter(buf, 'chunk'), hashlib.md5())
        harness.write_chunks(w, data, write_size)
        w.flush()
        for read_size in harness.SIZES:
            r = HashingReader(
                StreamReader(io.BytesIO(buf.getvalue()), 'chunk', read_size),
                hashlib.md5())
            assert harness.read_chunks(r, read_size) == data
            assert r.digest() == w.digest() == hashlib.md5(data).digest()

def test_end_not_hashed():
    w = BufferWriter('record32')
    harness.write_records(w, [b'a', b'', b'bc'])
    rec = Recorder()
    r = HashingReader(BufferReader(w.getvalue(), 'record32', 2), rec)
    assert list(r) == [b'a', b'', b'bc']
    assert rec.updates == [b'a', b'', b'bc']
    assert r.maybe_read() is None
    assert rec.updates == [b'a', b'', b'bc']

def test_failed_not_hashed():
    r = HashingReader(
        BufferReader(b'\x00\x00\x00\x09', 'record32', 5), Recorder())
    with pytest.raises(ValueError):
        r.maybe_read()
    assert r.hasher.updates == []

    class Failing(Writer):
        def write(self, data):
            raise OSError('disk full')
    w = HashingWriter(Failing(), Recorder())
    with pytest.raises(OSError):
        w.write(b'abc')
    assert w.hasher.updates == []

def test_flush_forwarded():
    class Counting(Writer):
        flushes = 0
        def write(self, data):
            pass
        def flush(self):
            self.flushes += 1
    inner = Counting()
    w = HashingWriter(inner, Recorder())
    w.flush()
    w.flush()
    assert inner.flushes == 2

def test_nested():
    w = BufferWriter('record')
    outer = HashingWriter(HashingWriter(w, hashlib.sha1()), hashlib.sha256())
    harness.write_records(outer, words)
    assert outer.digest() == expected
    assert outer.inner.digest() == hashlib.sha1(b''.join(words)).digest()
    r = HashingReader(
        HashingReader(BufferReader.from_writer(w, 5), hashlib.sha256()),
        hashlib.sha256())
    first = r.read()
    assert first == b'hello'
    assert r.read() == b'world'
    with pytest.raises(ValueError):
        first.tobytes()
    r.readinto([])
    assert r.digest() == r.inner.digest() == expected

def test_with_closes_inner():
    buf = io.BytesIO()
    with HashingWriter(StreamWriter(buf, 'chunk'), 'sha256') as w:
        w.write(b'abc')
        assert buf.getvalue() == b'abc'
    assert buf.closed
    assert w.inner.f is None
    assert w.digest() == hashlib.sha256(b'abc').digest()

    with HashingWriter(BufferWriter('record32'), hashlib.md5()) as w:
        w.write(b'abc')
    assert w.inner.getvalue() == b'\x00\x00\x00\x03abc'

    src = io.BytesIO(b'abc')
    with HashingReader(StreamReader(src, 'chunk', 5), 'md5') as r:
        assert list(r) == [b'abc']
    assert src.closed

def test_detach():
    buf = io.BytesIO()
    w = HashingWriter(StreamWriter(buf, 'record32'), hashlib.sha256())
    w.write(b'hi')
    assert w.detach() is buf
    assert buf.getvalue() == b'\x00\x00\x00\x02hi'
    inner = BufferWriter('chunk')
    assert HashingWriter(inner, hashlib.sha256()).detach() is inner
