import io
import logging

from siohkdf import InvalidLengthError
from siohkdf.crypto.hkdf import check_okm_length, hkdf_expand_block

logger = logging.getLogger(__name__)


class HKDFReader(io.RawIOBase):
    """
    Lazily produce the output keying material of an HKDF expand, one
    read at a time.

    The bytes are the same as a single :meth:`HKDF.expand` call with the
    same pseudorandom key, info and length, whatever the sizes of the
    reads are. Only the last computed block is kept in memory.

    Once ``length`` bytes have been produced the reader is exhausted and
    further reads return ``b''``.

    Not thread-safe, reads mutate the cursor.
    """

    def __init__(self, digest, pseudorandom_key, info, length):
        if length < 0:
            e = f"invalid output length: {length}, it must not be negative"
            raise InvalidLengthError(e)
        if length:
            check_okm_length(digest, length)
        super().__init__()
        self._digest = digest
        self._prk = pseudorandom_key
        self._info = info
        self._length = length
        self._remaining = length
        self._previous = b''
        self._counter = 1
        self._buffer = b''

    @property
    def length(self):
        return self._length

    @property
    def remaining(self):
        return self._remaining

    @property
    def exhausted(self):
        return self._remaining == 0

    def readable(self):
        return True

    def readinto(self, buffer):
        if self.closed:
            e = "I/O operation on closed reader"
            raise ValueError(e)

        with memoryview(buffer) as view, view.cast('B') as out:
            n = min(len(out), self._remaining)
            pos = 0
            while pos < n:
                if not self._buffer:
                    self._next_block()
                chunk = self._buffer[:n - pos]
                out[pos:pos + len(chunk)] = chunk
                self._buffer = self._buffer[len(chunk):]
                pos += len(chunk)

        self._remaining -= n
        if n and not self._remaining:
            logger.debug("%d bytes derived, reader exhausted", self._length)
        return n

    def _next_block(self):
        self._previous = hkdf_expand_block(
            self._digest, self._prk, self._previous, self._info, self._counter)
        self._counter += 1
        self._buffer = self._previous

    def close(self):
        self._prk = self._info = self._previous = self._buffer = b''
        self._remaining = 0
        super().close()
