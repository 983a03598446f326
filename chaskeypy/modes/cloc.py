"""Chaskey in the CLOC mode of authenticated encryption.

CLOC (`Iwata et al., FSE 2014 <https://eprint.iacr.org/2014/157.pdf>`_)
processes the associated data and the nonce with a CBC-MAC-like hash,
then encrypts in CFB mode while the ciphertext is authenticated with a
second CBC-MAC. The linear tweak functions below separate the domains
(padded or unpadded associated data, empty or non-empty associated data).

Tweak functions act in place on a `Block` of words (X1, X2, X3, X4),
where ``X[i, j]`` denotes ``Xi ^ Xj``::

    f1(X) = (X[1, 3], X[2, 4], X[1, 2, 3], X[2, 3, 4])
    f2(X) = (X[2], X[3], X[4], X[1, 2])
    g1(X) = (X[3], X[4], X[1, 2], X[2, 3])
    g2(X) = (X[2], X[3], X[4], X[1, 2])
    h(X)  = (X[1, 2], X[2, 3], X[3, 4], X[1, 2, 4])

"""
import enum
import warnings

from chaskeypy.modes.modes import Mode, equals
from chaskeypy.modes.buffer import to_bytes
from chaskeypy.primitives.block import Block
from chaskeypy.primitives.chaskey import DEFAULT_ROUNDS
from chaskeypy.primitives.errors import InvalidInput, InvalidState

# first byte of the one-zero padding of associated data and nonces
PADDING = 0x80

MSB = 0x80000000


def f1(b):
    """Apply the tweak used after unpadded or empty associated data.

        >>> from chaskeypy.primitives.block import Block
        >>> from chaskeypy.modes.cloc import f1
        >>> b = Block([1, 2, 4, 8])
        >>> f1(b)
        >>> b
        Block(0x00000005, 0x0000000a, 0x00000007, 0x0000000e)

    """
    b[0] ^= b[2]
    t = b[1]
    b[1] ^= b[3]
    b[3] = b[2] ^ b[1]
    b[2] = b[0] ^ t


def f2(b):
    """Apply the tweak used after padded associated data.

        >>> from chaskeypy.primitives.block import Block
        >>> from chaskeypy.modes.cloc import f2
        >>> b = Block([1, 2, 4, 8])
        >>> f2(b)
        >>> b
        Block(0x00000002, 0x00000004, 0x00000008, 0x00000003)

    """
    t = b[0] ^ b[1]
    b[0] = b[1]
    b[1] = b[2]
    b[2] = b[3]
    b[3] = t


def g1(b):
    """Apply the tweak used on the tag when the associated data is empty.

        >>> from chaskeypy.primitives.block import Block
        >>> from chaskeypy.modes.cloc import g1
        >>> b = Block([1, 2, 4, 8])
        >>> g1(b)
        >>> b
        Block(0x00000004, 0x00000008, 0x00000003, 0x00000006)

    """
    t = b[0]
    b[0] = b[2]
    b[2] = b[1] ^ t
    t = b[1]
    b[1] = b[3]
    b[3] = b[0] ^ t


g2 = f2


def h(b):
    """Apply the tweak used when `fix0` cleared a bit.

        >>> from chaskeypy.primitives.block import Block
        >>> from chaskeypy.modes.cloc import h
        >>> b = Block([1, 2, 4, 8])
        >>> h(b)
        >>> b
        Block(0x00000003, 0x00000006, 0x0000000c, 0x0000000b)

    """
    b[0] ^= b[1]
    b[1] ^= b[2]
    b[2] ^= b[3]
    b[3] ^= b[0]


def fix0(b):
    """Clear the most significant bit of the first word.

    Return True if the bit was set.
    """
    fixed = bool(b[0][31])
    b[0] &= MSB - 1
    return fixed


def fix1(b):
    """Set the most significant bit of the first word."""
    b[0] |= MSB


class ClocPhase(enum.Enum):
    """Represent the phases of a CLOC session.

    The phases are traversed in order; `Cloc.init` starts a new session.

    Attributes:
        AssociatedData: associated data may be given with `Cloc.update`.
        AwaitingNonce: the associated data is processed, the nonce is expected.
        AwaitingFirstBlock: the nonce is processed, no message chunk yet.
        Streaming: message chunks are being processed.
        Finished: the final chunk was processed, the tag is available.

    """
    AssociatedData = enum.auto()
    AwaitingNonce = enum.auto()
    AwaitingFirstBlock = enum.auto()
    Streaming = enum.auto()
    Finished = enum.auto()


class Cloc(Mode):
    """Chaskey-CLOC authenticated encryption with associated data.

    A session is driven by `update` (associated data, optional), `nonce`
    (optional, empty by default), `encrypt` or `decrypt`, and `mac`:

        >>> from chaskeypy.modes.cloc import Cloc
        >>> cloc = Cloc()
        >>> cloc.set(b"0123456789abcdef")
        >>> cloc.update(b"header")
        >>> cloc.nonce(b"nonce")
        >>> ciphertext = cloc.encrypt(b"attack at dawn")
        >>> len(ciphertext)
        14
        >>> tag = cloc.mac()
        >>> cloc.init()
        >>> cloc.update(b"header")
        >>> cloc.nonce(b"nonce")
        >>> cloc.decrypt(ciphertext)
        b'attack at dawn'
        >>> cloc.verify(tag)
        True

    `decrypt` does not check the tag: the recovered plaintext must not
    be used before `verify` returned True.
    """

    def __init__(self, rounds=DEFAULT_ROUNDS):
        super().__init__(rounds)
        self._tag = Block()
        self._ozp = False
        self._ad_len = 0
        self.phase = None

    def set(self, key):
        super().set(key)
        self.init()

    def init(self):
        """Start a new session."""
        self._check_key()
        self._state.assign(self._key)
        self._tag = Block()
        self._ozp = False
        self._ad_len = 0
        self._buffer.reset()
        self.phase = ClocPhase.AssociatedData

    def _check_phase(self, *phases):
        if self.phase not in phases:
            msg = "{}: call not allowed in phase {}".format(
                type(self).__name__, self.phase.name)
            raise InvalidState(msg)

    def _absorb(self, is_final):
        # fix0 and h wrap the final associated-data block only
        fixed0 = fix0(self._state) if is_final else False
        self._state.xor(Block.from_bytes(self._buffer.block()))
        self.permutation.permute(self._state)
        self._state.xor(self._key)
        if fixed0:
            h(self._state)
        self._buffer.next()

    def update(self, associated_data, is_last=True):
        """Feed a chunk of associated data.

        The last complete block is kept in the buffer until the final
        chunk (``is_last=True``) is given. Empty associated data is
        processed as a single padding block.
        """
        self._check_key()
        self._check_phase(ClocPhase.AssociatedData)

        buf = self._buffer
        self._ad_len += buf.append(associated_data)
        while buf.available() > self.block_size:
            self._absorb(False)

        if is_last:
            self._ozp = buf.pad(PADDING)
            while buf.full():
                self._absorb(buf.last())
            buf.reset()
            self.phase = ClocPhase.AwaitingNonce
        else:
            buf.drain()

    def nonce(self, nonce):
        """Process the nonce (at most 16 bytes).

        Pending associated data is finished first.
        """
        self._check_key()
        self._check_phase(ClocPhase.AssociatedData, ClocPhase.AwaitingNonce)
        nonce = to_bytes(nonce)
        if len(nonce) > self.block_size:
            msg = "nonce must be at most {} bytes, got {}"
            raise InvalidInput(msg.format(self.block_size, len(nonce)))

        if self.phase == ClocPhase.AssociatedData:
            self.update(b"", is_last=True)

        buf = self._buffer
        buf.append(nonce)
        buf.pad(PADDING)
        self._state.xor(Block.from_bytes(buf.block()))
        if self._ozp and self._ad_len:
            f2(self._state)
        else:
            f1(self._state)
        self._tag = self._state.copy()
        self.permutation.permute(self._state)
        self._state.xor(self._key)
        buf.reset()
        self.phase = ClocPhase.AwaitingFirstBlock

    def _start(self):
        if self.phase in (ClocPhase.AssociatedData, ClocPhase.AwaitingNonce):
            self.nonce(b"")
        self._check_phase(ClocPhase.AwaitingFirstBlock, ClocPhase.Streaming)
        if self.phase == ClocPhase.AwaitingFirstBlock:
            if self._ad_len:
                g2(self._tag)
            else:
                g1(self._tag)
            self.permutation.permute(self._tag)
            self._tag.xor(self._key)
            self.phase = ClocPhase.Streaming

    def _process(self, data, is_last, decrypting):
        self._check_key()
        self._start()

        buf = self._buffer
        buf.append(data)
        while buf.full():
            block = bytes(buf.block())
            output = bytes(a ^ b for a, b in zip(block, self._state.raw()))
            ciphertext = Block.from_bytes(block if decrypting else output)
            self._tag.xor(ciphertext)
            self._encipher(self._tag)
            fix1(ciphertext)
            self._encipher(ciphertext)
            self._state.assign(ciphertext)
            buf.move(output)

        if is_last:
            size = buf.available()
            if size:
                block = bytes(buf.block())[:size]
                output = bytes(a ^ b for a, b in zip(block, self._state.raw()))
                self._tag.xor_bytes(block if decrypting else output)
                self._encipher(self._tag)
                buf.move(output + bytes(self.block_size - size))
            output = buf.drain()
            buf.reset()
            self.phase = ClocPhase.Finished
            return output

        return buf.drain()

    def encrypt(self, message, is_last=True):
        """Encrypt a chunk of the message and return the ciphertext produced.

        Only complete blocks are encrypted before the final chunk, so the
        ciphertext is the same however the message is split.
        """
        return self._process(message, is_last, False)

    def decrypt(self, ciphertext, is_last=True):
        """Decrypt a chunk of the ciphertext and return the plaintext produced.

        The tag is not checked; see `verify`.
        """
        return self._process(ciphertext, is_last, True)

    def mac(self):
        """Return the 16-byte tag of the session."""
        self._check_key()
        if self.phase != ClocPhase.Finished:
            warnings.warn("{}: tag requested before the final chunk".format(
                type(self).__name__), RuntimeWarning)
        return self._tag.raw()

    def verify(self, tag):
        """Compare *tag* (possibly truncated) with the tag of the session."""
        return equals(self.mac(), tag)
