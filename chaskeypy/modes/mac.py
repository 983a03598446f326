"""Chaskey message authentication code."""
from chaskeypy.modes.modes import Mode, equals
from chaskeypy.modes import vectors
from chaskeypy.primitives.block import Block
from chaskeypy.primitives.chaskey import DEFAULT_ROUNDS, derive
from chaskeypy.primitives.errors import InvalidState

# first byte of the 10* padding of the last message block
PADDING = 0x01


class Mac(Mode):
    """Chaskey MAC, a CMAC-like construction over the permutation.

    Two subkeys are derived from the key with `derive`. The last message
    block is masked with the first subkey if the message is a non-empty
    multiple of the block size and with the second one otherwise (the
    message is then padded with a single 1 bit followed by zeros).

        >>> from chaskeypy.modes.mac import Mac
        >>> from chaskeypy.modes.vectors import TEST_KEY
        >>> mac = Mac()
        >>> mac.set(TEST_KEY)
        >>> mac.sign(b"").hex()
        'e58f2e79aa87ce75b550142d0b979111'

    A message can also be authenticated in chunks:

        >>> mac.init()
        >>> mac.update(b"", is_last=False)
        >>> mac.update(b"", is_last=True)
        >>> mac.verify(bytes.fromhex("e58f2e79aa87ce75"))
        True

    """

    def __init__(self, rounds=DEFAULT_ROUNDS):
        super().__init__(rounds)
        self._subkey1 = None
        self._subkey2 = None
        self._finished = False

    def set(self, key):
        super().set(key)
        self._subkey1 = derive(self._key)
        self._subkey2 = derive(self._subkey1)
        self.init()

    @property
    def subkeys(self):
        """The pair of subkeys derived from the key."""
        self._check_key()
        return self._subkey1.copy(), self._subkey2.copy()

    def init(self):
        """Start a new message."""
        self._check_key()
        self._state.assign(self._key)
        self._buffer.reset()
        self._finished = False

    def _compress(self):
        self._state.xor(Block.from_bytes(self._buffer.block()))
        self.permutation.permute(self._state)
        self._buffer.next()

    def update(self, message, is_last=True):
        """Feed a chunk of the message.

        The last complete block is kept in the buffer until the final
        chunk (``is_last=True``) is given, since its processing depends
        on whether the message needs padding.
        """
        self._check_key()
        if self._finished:
            raise InvalidState("message already finished, call init() first")

        buf = self._buffer
        buf.append(message)
        while buf.available() > self.block_size:
            self._compress()

        if is_last:
            if buf.pad(PADDING):
                final_key = self._subkey2
            else:
                final_key = self._subkey1
            while buf.full():
                if buf.last():
                    self._state.xor(final_key)
                self._compress()
            self._state.xor(final_key)
            self._finished = True

        buf.drain()

    def digest(self):
        """Return the 16-byte tag of the finished message."""
        self._check_key()
        if not self._finished:
            raise InvalidState("message not finished, call update(..., is_last=True)")
        return self._state.raw()

    def sign(self, message):
        """Return the 16-byte tag of *message*."""
        self.init()
        self.update(message, is_last=True)
        tag = self.digest()
        self._buffer.reset()
        return tag

    def verify(self, tag):
        """Compare *tag* (possibly truncated) with the tag of the finished message."""
        return equals(self.digest(), tag)

    @classmethod
    def test(cls):
        mac = cls()
        mac.set(vectors.TEST_KEY)

        assert mac.subkeys == (Block(vectors.SUBKEY1), Block(vectors.SUBKEY2))

        message = bytes(range(len(vectors.MAC_VECTORS)))
        for i, tag in enumerate(vectors.MAC_VECTORS):
            assert Block.from_bytes(mac.sign(message[:i])) == tag, \
                "{}: invalid tag of message {}".format(cls.__name__, i)
