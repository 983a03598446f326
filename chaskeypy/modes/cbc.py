"""Chaskey in the cipher block chaining (CBC) mode."""
import warnings

from chaskeypy.modes.modes import Mode
from chaskeypy.modes import vectors
from chaskeypy.primitives.block import Block
from chaskeypy.primitives.chaskey import derive


class Cbc(Mode):
    """Chaskey block cipher in CBC mode.

    The chaining state starts as the key XOR the IV. Each plaintext block
    is XORed into the state, which is then permuted; the result is both
    the ciphertext block and the next chaining state. The key only enters
    through the initial state.

    The IV is either given directly with `init_iv` or derived from a
    nonce with `init` (method 1 of NIST SP 800-38A, appendix C: the
    nonce is enciphered, here under the doubled key).

    The last chunk is padded with zeros to a whole block. Zero padding
    is not self-delimiting: `decrypt` returns the padded plaintext and
    the caller must know the original length.

        >>> from chaskeypy.modes.cbc import Cbc
        >>> cbc = Cbc()
        >>> cbc.set(b"0123456789abcdef")
        >>> cbc.init(b"nonce")
        >>> ciphertext = cbc.encrypt(b"attack at dawn")
        >>> len(ciphertext)
        16
        >>> cbc.init(b"nonce")
        >>> cbc.decrypt(ciphertext)
        b'attack at dawn\\x00\\x00'

    """

    def init(self, nonce):
        """Start the chaining state as *nonce* enciphered under the doubled key."""
        self._check_key()
        self._state.assign(derive(self._key))
        buf = self._buffer
        buf.reset()
        buf.append(nonce)
        buf.pad(0)
        while buf.full():
            self._encrypt_block()
            buf.next()
        buf.reset()

    def init_iv(self, iv):
        """Use *iv* (16 bytes or four 32-bit words) as the IV."""
        self._check_key()
        self._state.assign(self._key)
        self._state.xor(Block(iv))
        self._buffer.reset()

    def _encrypt_block(self):
        self._state.xor(Block.from_bytes(self._buffer.block()))
        self.permutation.permute(self._state)

    def _decrypt_block(self):
        ciphertext = Block.from_bytes(self._buffer.block())
        plaintext = ciphertext.copy()
        self.permutation.inv_permute(plaintext)
        plaintext.xor(self._state)
        self._state.assign(ciphertext)
        return plaintext

    def encrypt(self, message, is_last=True):
        """Encrypt a chunk of the message.

        Return the ciphertext of the blocks completed by this chunk. With
        ``is_last=True`` the pending bytes are padded with zeros.
        """
        self._check_key()
        buf = self._buffer
        buf.append(message)
        if is_last:
            buf.pad(0)
        while buf.full():
            self._encrypt_block()
            buf.move(self._state.raw())
        output = buf.drain()
        if is_last:
            buf.reset()
        return output

    def decrypt(self, ciphertext, is_last=True):
        """Decrypt a chunk of the ciphertext.

        Return the plaintext of the blocks completed by this chunk
        (empty if no whole block is available yet).
        """
        self._check_key()
        buf = self._buffer
        buf.append(ciphertext)
        while buf.full():
            plaintext = self._decrypt_block()
            buf.move(plaintext.raw())
        output = buf.drain()
        if is_last:
            if buf.available():
                warnings.warn("{}: ignoring {} trailing bytes of a partial "
                              "block".format(type(self).__name__, buf.available()),
                              RuntimeWarning)
            buf.reset()
        return output

    @classmethod
    def test(cls):
        cbc = cls()
        for i in range(1, len(vectors.CBC_MASTERS) + 1):
            cbc.set(vectors.MAC_VECTORS[i])
            cbc.init_iv([0, 0, 0, 0])
            ciphertext = cbc.encrypt(vectors.PLAINTEXT[:i])
            assert ciphertext == vectors.CBC_MASTERS[i - 1], \
                "{}: invalid ciphertext of length {}".format(cls.__name__, i)
            cbc.init_iv([0, 0, 0, 0])
            plaintext = cbc.decrypt(ciphertext)
            assert plaintext[:i] == vectors.PLAINTEXT[:i]
