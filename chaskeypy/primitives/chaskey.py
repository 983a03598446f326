"""Permutation :math:`\\pi` of Chaskey, its inverse and the key doubling."""
from chaskeypy.bitvector.core import Constant
from chaskeypy.bitvector.operation import RotateLeft, RotateRight

from chaskeypy.primitives.block import Block
from chaskeypy.primitives.primitives import BvFunction

DEFAULT_ROUNDS = 8

# reduction constant of x^128 + x^7 + x^2 + x + 1
REDUCTION = 0x87


class ChaskeyPi(BvFunction):
    """The Chaskey permutation over four 32-bit words.

        >>> from chaskeypy.primitives.chaskey import ChaskeyPi
        >>> ChaskeyPi.round_function(1, 0, 0, 0)
        (0x00010000, 0x00000081, 0x00010000, 0x00010000)

    """

    rounds = DEFAULT_ROUNDS
    input_widths = [32, 32, 32, 32]
    output_widths = [32, 32, 32, 32]

    @classmethod
    def round_function(cls, v0, v1, v2, v3):
        """Apply a single round to the words v0, v1, v2, v3."""
        if isinstance(v0, int):
            v0, v1, v2, v3 = [Constant(v, 32) for v in (v0, v1, v2, v3)]

        v0 += v1
        v1 = RotateLeft(v1, 5)
        v1 ^= v0
        v0 = RotateLeft(v0, 16)

        v2 += v3
        v3 = RotateLeft(v3, 8)
        v3 ^= v2

        v0 += v3
        v3 = RotateLeft(v3, 13)
        v3 ^= v0

        v2 += v1
        v1 = RotateLeft(v1, 7)
        v1 ^= v2
        v2 = RotateLeft(v2, 16)

        return v0, v1, v2, v3

    @classmethod
    def eval(cls, v0, v1, v2, v3):
        for i in range(cls.rounds):
            v0, v1, v2, v3 = cls.round_function(v0, v1, v2, v3)

        return v0, v1, v2, v3

    @classmethod
    def test(cls):
        old_rounds = cls.rounds
        cls.set_rounds(DEFAULT_ROUNDS)

        pt = [
            Constant(0x00000000, 32)
        ] * 4
        ct = [
            Constant(0x00000000, 32)
        ] * 4
        assert cls(*pt) == tuple(ct)

        pt = (0x833D3433, 0x009F389F, 0x2398E64F, 0x417ACF39)
        assert ChaskeyPiInverse.with_rounds(cls.rounds)(*cls(*pt)) == pt

        cls.set_rounds(old_rounds)


class ChaskeyPiInverse(BvFunction):
    """The inverse of `ChaskeyPi`.

        >>> from chaskeypy.primitives.chaskey import ChaskeyPi, ChaskeyPiInverse
        >>> ChaskeyPiInverse.inverse_round_function(*ChaskeyPi.round_function(1, 2, 3, 4))
        (0x00000001, 0x00000002, 0x00000003, 0x00000004)

    """

    rounds = DEFAULT_ROUNDS
    input_widths = [32, 32, 32, 32]
    output_widths = [32, 32, 32, 32]

    @classmethod
    def inverse_round_function(cls, v0, v1, v2, v3):
        """Undo a single round of `ChaskeyPi` on the words v0, v1, v2, v3."""
        if isinstance(v0, int):
            v0, v1, v2, v3 = [Constant(v, 32) for v in (v0, v1, v2, v3)]

        v2 = RotateRight(v2, 16)
        v1 ^= v2
        v1 = RotateRight(v1, 7)
        v2 -= v1

        v3 ^= v0
        v3 = RotateRight(v3, 13)
        v0 -= v3

        v3 ^= v2
        v3 = RotateRight(v3, 8)
        v2 -= v3

        v0 = RotateRight(v0, 16)
        v1 ^= v0
        v1 = RotateRight(v1, 5)
        v0 -= v1

        return v0, v1, v2, v3

    @classmethod
    def eval(cls, v0, v1, v2, v3):
        for i in range(cls.rounds):
            v0, v1, v2, v3 = cls.inverse_round_function(v0, v1, v2, v3)

        return v0, v1, v2, v3


def derive(block):
    """Multiply a block by 2 in :math:`GF(2^{128})`.

    The block is shifted left by one bit across the words and, if the
    most significant bit was set, the reduction constant 0x87 is XORed
    into the first word. The given block is not modified.

        >>> from chaskeypy.primitives.block import Block
        >>> from chaskeypy.primitives.chaskey import derive
        >>> derive(Block([0x833D3433, 0x009F389F, 0x2398E64F, 0x417ACF39]))
        Block(0x067a6866, 0x013e713f, 0x4731cc9e, 0x82f59e72)
        >>> derive(Block([0, 0, 0, 0x80000000]))
        Block(0x00000087, 0x00000000, 0x00000000, 0x00000000)

    """
    v0, v1, v2, v3 = block
    carry = v3[31]
    return Block([
        (v0 << 1) ^ (REDUCTION if carry else 0),
        (v1 << 1) | (v0 >> 31),
        (v2 << 1) | (v1 >> 31),
        (v3 << 1) | (v2 >> 31),
    ])


class Permutation(object):
    """Chaskey permutation with a per-instance number of rounds.

    Each instance owns its own `ChaskeyPi` and `ChaskeyPiInverse`
    subclasses, so that instances with different rounds do not
    interfere. The methods act in place on a `Block`.

        >>> from chaskeypy.primitives.block import Block
        >>> from chaskeypy.primitives.chaskey import Permutation
        >>> p = Permutation()
        >>> b = Block([1, 2, 3, 4])
        >>> p.permute(b)
        >>> b != Block([1, 2, 3, 4])
        True
        >>> p.inv_permute(b)
        >>> b
        Block(0x00000001, 0x00000002, 0x00000003, 0x00000004)

    """

    derive = staticmethod(derive)

    def __init__(self, rounds=DEFAULT_ROUNDS):
        self.pi = ChaskeyPi.with_rounds(rounds)
        self.inverse_pi = ChaskeyPiInverse.with_rounds(rounds)

    @property
    def rounds(self):
        return self.pi.rounds

    def round(self, block):
        block.assign(self.pi.round_function(*block))

    def inv_round(self, block):
        block.assign(self.inverse_pi.inverse_round_function(*block))

    def permute(self, block):
        """Apply the round function ``rounds`` times to *block*."""
        block.assign(self.pi(*block))

    def inv_permute(self, block):
        """Apply the inverse round function ``rounds`` times to *block*."""
        block.assign(self.inverse_pi(*block))

    def __repr__(self):
        return "{}(rounds={})".format(type(self).__name__, self.rounds)
