"""Split a byte stream into fixed-size blocks."""
from chaskeypy.primitives.block import BLOCK_SIZE
from chaskeypy.primitives.errors import InvalidInput


def to_bytes(data):
    """Return *data* as bytes, encoding text with UTF-8.

        >>> from chaskeypy.modes.buffer import to_bytes
        >>> to_bytes("ключ")
        b'\\xd0\\xba\\xd0\\xbb\\xd1\\x8e\\xd1\\x87'
        >>> to_bytes(3)
        Traceback (most recent call last):
         ...
        chaskeypy.primitives.errors.InvalidInput: expected bytes or text, got 'int'

    """
    if isinstance(data, str):
        return data.encode("utf-8")
    elif isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    else:
        msg = "expected bytes or text, got '{}'"
        raise InvalidInput(msg.format(type(data).__name__))


class Buffer(object):
    """Accumulate a byte stream and hand it out block by block.

    The buffer keeps three logical offsets, counted from the beginning
    of the session (the last `reset`):

    - ``len``: the number of bytes appended (or written by `pad`),
    - ``pos``: the read cursor, always a multiple of the block size,
    - ``capacity``: the end of the allocated storage, a multiple of the
      block size with ``len <= capacity``.

    Blocks are read with `block`, and the read cursor is advanced with
    `next` or `move` (which also writes the processed block back).
    `drain` returns the processed bytes and releases them, so that a
    long stream does not accumulate in memory.

        >>> from chaskeypy.modes.buffer import Buffer
        >>> buf = Buffer(4)
        >>> buf.append(b"abcdef")
        6
        >>> buf.len, buf.capacity, buf.full()
        (6, 8, True)
        >>> bytes(buf.block())
        b'abcd'
        >>> buf.move(b"ABCD")
        True
        >>> buf.full(), buf.available()
        (False, 2)
        >>> buf.pad(0x80)
        True
        >>> bytes(buf.block())
        b'ef\\x80\\x00'
        >>> buf.next()
        False
        >>> buf.drain()
        b'ABCDef\\x80\\x00'

    """

    def __init__(self, block_size=BLOCK_SIZE):
        assert isinstance(block_size, int) and block_size > 0
        self.block_size = block_size
        self._data = bytearray(block_size)
        self._base = 0
        self._len = 0
        self._pos = 0

    @property
    def len(self):
        """Number of bytes written in the current session."""
        return self._len

    @property
    def pos(self):
        """Offset of the block returned by `block`."""
        return self._pos

    @property
    def capacity(self):
        """Offset of the end of the allocated storage."""
        return self._base + len(self._data)

    def reset(self):
        """Zero the storage and start a new session."""
        for i in range(len(self._data)):
            self._data[i] = 0
        self._data = bytearray(self.block_size)
        self._base = 0
        self._len = 0
        self._pos = 0

    def append(self, data):
        """Append *data* and return the number of bytes appended.

        Text is encoded with UTF-8. The capacity grows to the next
        multiple of the block size.
        """
        data = to_bytes(data)
        end = self._len + len(data)
        if end > self.capacity:
            new_capacity = -(-end // self.block_size) * self.block_size
            self._data.extend(bytes(new_capacity - self.capacity))
        start = self._len - self._base
        self._data[start:start + len(data)] = data
        self._len = end
        return len(data)

    def pad(self, first_byte):
        """Fill the storage up to the capacity with *first_byte* and zeros.

        Return False (and do not pad) if the buffer is non-empty and
        already ends on a block boundary.
        """
        if self._len and self._len == self.capacity:
            return False
        start = self._len - self._base
        self._data[start] = first_byte
        for i in range(start + 1, len(self._data)):
            self._data[i] = 0
        self._len = self.capacity
        return True

    def last(self):
        """Return True if the read cursor points at the final block."""
        return self._pos + self.block_size >= self.capacity

    def full(self):
        """Return True if a whole block of written bytes is available."""
        return self._pos + self.block_size <= self._len

    def available(self):
        """Return the number of written bytes not read yet."""
        return self._len - self._pos

    def block(self):
        """Return a mutable view of the block at the read cursor.

        The view must not be kept across calls that resize the buffer
        (`append`, `drain`, `reset`).
        """
        start = self._pos - self._base
        return memoryview(self._data)[start:start + self.block_size]

    def next(self):
        """Advance the read cursor by one block.

        Return True while the cursor is still within the capacity.
        """
        self._pos += self.block_size
        return self._pos < self.capacity

    def move(self, data):
        """Write *data* over the current block and advance the read cursor."""
        data = to_bytes(data)
        assert len(data) == self.block_size
        start = self._pos - self._base
        self._data[start:start + self.block_size] = data
        return self.next()

    def bytes(self, n=None):
        """Return the first *n* retained bytes (default: all written ones).

        Before any `drain` the retained bytes start at session offset 0,
        so this is the first *n* bytes of the session. After a `drain`
        they start at the drained offset and *n* counts from there.
        """
        size = self._len - self._base
        if n is None or n > size:
            n = size
        return bytes(self._data[:n])

    def drain(self):
        """Return the processed bytes and release their storage."""
        end = min(self._pos, self._len) - self._base
        output = bytes(self._data[:end])
        del self._data[:self._pos - self._base]
        self._base = self._pos
        return output

    def __repr__(self):
        return "{}(len={}, pos={}, capacity={})".format(
            type(self).__name__, self._len, self._pos, self.capacity)
