"""Provide the bit-vector terms: constants, variables and expressions."""
from sympy import Basic, Atom


def _operator(name, reflected=False):
    def method(self, other):
        from chaskeypy.bitvector import operation
        op = getattr(operation, name)
        return op(other, self) if reflected else op(self, other)

    method.__name__ = name
    return method


class Term(Basic):
    """Represent fixed-width bit-vector terms.

    A term is a `Constant`, a `Variable` or an operation applied to
    other terms (see `operation`). The Chaskey permutation only needs
    the operators ``+ - ^ & | ~ << >>``, the rotations and bit
    extraction ``t[i]``/``t[i:j]``; with `Constant` operands they
    return the evaluated `Constant`, otherwise a symbolic expression.

    Terms are SymPy `Basic` objects, so that expressions can be
    traversed (``atoms``) and substituted (``xreplace``).

    This class is not meant to be instantiated directly.
    """

    __slots__ = ["_width"]

    def __new__(cls, *args, width):
        assert isinstance(width, int) and 0 < width
        obj = Basic.__new__(cls, *args)
        obj._width = width
        return obj

    __and__ = _operator("BvAnd")
    __rand__ = _operator("BvAnd", reflected=True)
    __or__ = _operator("BvOr")
    __ror__ = _operator("BvOr", reflected=True)
    __xor__ = _operator("BvXor")
    __rxor__ = _operator("BvXor", reflected=True)
    __lshift__ = _operator("BvShl")
    __rshift__ = _operator("BvLshr")
    __add__ = _operator("BvAdd")
    __radd__ = _operator("BvAdd", reflected=True)
    __sub__ = _operator("BvSub")
    __rsub__ = _operator("BvSub", reflected=True)

    def __invert__(self):
        from chaskeypy.bitvector import operation
        return operation.BvNot(self)

    def __getitem__(self, key):
        """Extract a bit (``t[i]``) or a range of bits (``t[i:j]``, i >= j)."""
        from chaskeypy.bitvector import operation

        if isinstance(key, int):
            high = low = key
        elif isinstance(key, slice):
            assert key.step in (None, 1)
            high = self.width - 1 if key.start is None else key.start
            low = 0 if key.stop is None else key.stop
        else:
            raise TypeError("bit index must be int or slice")

        if not self.width > high >= low >= 0:
            raise IndexError("bits [{}:{}] out of range for width {}".format(
                high, low, self.width))
        return operation.Extract(self, high, low)

    def __iter__(self):
        # __getitem__ would make terms iterable otherwise
        raise AttributeError("Term is not iterable")

    def __str__(self):
        return "{}(width={})".format(type(self).__name__, self.width)

    __repr__ = __str__

    def _hashable_content(self):
        return self.args + (self.width, )

    @property
    def width(self):
        """The bit-width of the term."""
        return self._width

    def doit(self):
        """Rebuild the term, evaluating the operations on constants.

        Useful for expressions built with `Evaluation` disabled or
        obtained by substituting constants with ``xreplace``.
        """
        args = [a.doit() if isinstance(a, Term) else a for a in self.args]
        return type(self)(*args)


class Constant(Atom, Term):
    """Represent bit-vector constants.

    The value is an unsigned integer smaller than ``2**width``. Constants
    compare equal to plain integers with the same value, and are printed
    in hexadecimal when the width is a multiple of 4 (in binary otherwise).

        >>> from chaskeypy.bitvector.core import Constant
        >>> Constant(0x833D3433, 32)
        0x833d3433
        >>> Constant(3, 6)
        0b000011
        >>> Constant(0x87, 32) == 0x87
        True

    """

    __slots__ = ["_val"]

    def __new__(cls, val, width):
        assert isinstance(val, int) and 0 <= val < 2 ** width
        obj = Term.__new__(cls, width=width)
        obj._val = val
        return obj

    @classmethod
    def from_bytes(cls, data, byteorder="little"):
        """Return the constant whose byte view is *data*.

            >>> from chaskeypy.bitvector.core import Constant
            >>> Constant.from_bytes(b"\\x01\\x00\\x00\\x80")
            0x80000001

        """
        return cls(int.from_bytes(data, byteorder), 8 * len(data))

    def to_bytes(self, byteorder="little"):
        """Return the byte view of the constant (the width must be a multiple of 8)."""
        assert self.width % 8 == 0
        return self.val.to_bytes(self.width // 8, byteorder)

    def __int__(self):
        return self.val

    def __eq__(self, other):
        if isinstance(other, Constant):
            return self.width == other.width and self.val == other.val
        elif isinstance(other, int):
            return self.val == other
        return False

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return super().__hash__()

    def __bool__(self):
        if self.width != 1:
            raise AttributeError("only 1-bit constants implement bool()")
        return self.val == 1

    def _hashable_content(self):
        return self.val, self.width

    def __str__(self):
        return self.hex() if self.width % 4 == 0 else self.bin()

    __repr__ = __str__

    def doit(self):
        return self

    @property
    def val(self):
        """The unsigned integer value."""
        return self._val

    def bin(self):
        """Return the binary representation, padded to the width.

            >>> from chaskeypy.bitvector.core import Constant
            >>> Constant(1, 32)[31:28].bin()
            '0b0000'

        """
        return "0b" + format(self.val, "0{}b".format(self.width))

    def hex(self):
        """Return the hexadecimal representation, padded to the width."""
        assert self.width % 4 == 0
        return "0x" + format(self.val, "0{}x".format(self.width // 4))


class Variable(Atom, Term):
    """Represent bit-vector variables.

    Variables are placeholders used to trace functions symbolically,
    e.g. a round of the Chaskey permutation:

        >>> from chaskeypy.bitvector.core import Variable
        >>> v0, v1 = Variable("v0", 32), Variable("v1", 32)
        >>> v0 + v1
        v0 + v1

    """

    __slots__ = ["_name"]

    def __new__(cls, name, width):
        assert isinstance(name, str)
        obj = Term.__new__(cls, width=width)
        obj._name = name
        return obj

    def _hashable_content(self):
        return self.name, self.width

    def __str__(self):
        return self.name

    __repr__ = __str__

    def doit(self):
        return self

    @property
    def name(self):
        return self._name


def bitvectify(t, width):
    """Convert an int, a name or a term to a term of the given width.

        >>> from chaskeypy.bitvector.core import bitvectify
        >>> bitvectify(0x87, 32)
        0x00000087
        >>> bitvectify("k0", 32)
        k0

    """
    if isinstance(t, Term):
        assert t.width == width
        return t
    elif isinstance(t, int):
        return Constant(t, width)
    elif isinstance(t, str):
        return Variable(t, width)
    else:
        raise TypeError("cannot convert '{}' to a bit-vector".format(type(t).__name__))
