"""Provide the bit-vector operations used by ARX permutations."""
from chaskeypy.bitvector import context
from chaskeypy.bitvector import core


class Operation(core.Term):
    """Represent bit-vector operations.

    An operation is applied with the operator ``()`` to some term
    operands followed by some scalar (`int`) operands. If every term
    operand is a `Constant` the result is computed right away and a
    `Constant` is returned; otherwise the operation node itself is
    returned, so that functions can be traced with `Variable` inputs.
    The `Evaluation` context disables the evaluation and the
    `Validation` context disables the checks of the operands.

    This class is not meant to be instantiated but to provide a base
    class for the concrete operations.

    Attributes:
        arity: a pair (number of term operands, number of scalar operands).
        is_simple: True if the term operands share a width. Simple
            operations accept plain integers in place of terms
            (*Automatic Constant Conversion*)::

                >>> from chaskeypy.bitvector.core import Constant
                >>> Constant(0xffffffff, 32) + 1
                0x00000000

        operand_types: the types of the operands, if not all of them are terms.
        unary_symbol: prefix symbol used by ``str`` (optional).
        infix_symbol: infix symbol used by ``str`` (optional).

    """

    is_Atom = False
    is_simple = False

    def __new__(cls, *args, **options):
        validate = options.pop("validate_operands", context.Validation.current_context)
        evaluate = options.pop("evaluate", context.Evaluation.current_context)
        if options:
            raise TypeError("unexpected options {}".format(list(options)))

        if validate:
            args = cls._parse_args(*args)

        terms = args[:cls.arity[0]]
        if evaluate and all(isinstance(t, core.Constant) for t in terms):
            return cls.eval(*args)

        return super().__new__(cls, *args, width=cls.output_width(*args))

    @classmethod
    def _parse_args(cls, *args):
        if cls.is_simple:
            widths = [a.width for a in args if isinstance(a, core.Term)]
            if not widths:
                raise TypeError("{} expects at least 1 term operand".format(cls.__name__))
            args = [core.Constant(a, widths[0]) if isinstance(a, int) else a
                    for a in args]

        types = getattr(cls, "operand_types", [core.Term] * len(args))
        for expected, arg in zip(types, args):
            if not isinstance(arg, expected):
                raise TypeError("{} expects {} operands, got '{}'".format(
                    cls.__name__, expected.__name__, type(arg).__name__))

        num_terms = sum(1 for a in args if isinstance(a, core.Term))
        num_scalars = sum(1 for a in args if isinstance(a, int))
        if num_terms + num_scalars != len(args):
            raise TypeError("invalid operands for {}".format(cls.__name__))
        assert tuple(cls.arity) == (num_terms, num_scalars), \
            "{} expects {} term and {} scalar operands".format(cls.__name__, *cls.arity)

        assert cls.condition(*args), "{}.condition({}) did not hold".format(
            cls.__name__, ", ".join(str(a) for a in args))

        return tuple(args)

    @classmethod
    def condition(cls, *args):
        """Return True if the operands satisfy the restrictions of the operation."""
        return True

    @classmethod
    def output_width(cls, *args):
        """Return the bit-width of the result."""
        raise NotImplementedError("subclasses need to override this method")

    @classmethod
    def eval(cls, *args):
        """Compute the operation on constant operands (internal method)."""
        raise NotImplementedError("subclasses need to override this method")

    def __str__(self):
        def operand(arg):
            return "({})".format(arg) if isinstance(arg, Operation) else str(arg)

        if getattr(self, "unary_symbol", None) is not None:
            return self.unary_symbol + operand(self.args[0])
        elif getattr(self, "infix_symbol", None) is not None:
            return " {} ".format(self.infix_symbol).join(operand(a) for a in self.args)
        return "{}({})".format(type(self).__name__, ", ".join(map(str, self.args)))

    __repr__ = __str__


class BinaryOperation(Operation):
    """Base class of the operations on two terms of the same width.

    Subclasses implement ``_apply(x, y, width)`` on integers; the result
    is reduced modulo ``2**width``.
    """

    arity = [2, 0]
    is_simple = True

    @classmethod
    def condition(cls, x, y):
        return x.width == y.width

    @classmethod
    def output_width(cls, x, y):
        return x.width

    @classmethod
    def eval(cls, x, y):
        value = cls._apply(int(x), int(y), x.width)
        return core.Constant(value % (2 ** x.width), x.width)


class BvNot(Operation):
    """Bitwise negation, the operator ``~``.

        >>> from chaskeypy.bitvector.core import Constant, Variable
        >>> ~Constant(0b1010101, 7)
        0b0101010
        >>> ~Variable("x", 8)
        ~x

    """

    arity = [1, 0]
    unary_symbol = "~"

    @classmethod
    def output_width(cls, x):
        return x.width

    @classmethod
    def eval(cls, x):
        return core.Constant(int(x) ^ (2 ** x.width - 1), x.width)


class BvAnd(BinaryOperation):
    """Bitwise AND, the operator ``&``.

        >>> from chaskeypy.bitvector.core import Constant
        >>> Constant(5, 8) & 3
        0x01

    """

    infix_symbol = "&"

    @staticmethod
    def _apply(x, y, width):
        return x & y


class BvOr(BinaryOperation):
    """Bitwise OR, the operator ``|``."""

    infix_symbol = "|"

    @staticmethod
    def _apply(x, y, width):
        return x | y


class BvXor(BinaryOperation):
    """Bitwise XOR, the operator ``^``.

        >>> from chaskeypy.bitvector.core import Constant, Variable
        >>> Constant(5, 8) ^ 3
        0x06
        >>> Variable("x", 8) ^ Variable("y", 8)
        x ^ y

    """

    infix_symbol = "^"

    @staticmethod
    def _apply(x, y, width):
        return x ^ y


class BvShl(BinaryOperation):
    """Left shift, the operator ``<<``; the bits shifted out are lost.

        >>> from chaskeypy.bitvector.core import Constant
        >>> Constant(0x80000001, 32) << 1
        0x00000002

    """

    infix_symbol = "<<"

    @staticmethod
    def _apply(x, y, width):
        return x << y if y < width else 0


class BvLshr(BinaryOperation):
    """Logical right shift, the operator ``>>``.

        >>> from chaskeypy.bitvector.core import Constant
        >>> Constant(0x80000001, 32) >> 31
        0x00000001

    """

    infix_symbol = ">>"

    @staticmethod
    def _apply(x, y, width):
        return x >> y


class BvAdd(BinaryOperation):
    """Modular addition, the operator ``+``.

        >>> from chaskeypy.bitvector.core import Constant, Variable
        >>> Constant(0xff, 8) + 2
        0x01
        >>> Variable("v0", 32) + Variable("v1", 32)
        v0 + v1

    """

    infix_symbol = "+"

    @staticmethod
    def _apply(x, y, width):
        return x + y


class BvSub(BinaryOperation):
    """Modular subtraction, the operator ``-``.

        >>> from chaskeypy.bitvector.core import Constant
        >>> Constant(1, 8) - 2
        0xff

    """

    infix_symbol = "-"

    @staticmethod
    def _apply(x, y, width):
        return x - y


class Rotation(Operation):
    """Base class of the circular rotations by a fixed amount."""

    arity = [1, 1]
    operand_types = [core.Term, int]

    @classmethod
    def condition(cls, x, r):
        return x.width > r >= 0

    @classmethod
    def output_width(cls, x, r):
        return x.width

    @classmethod
    def eval(cls, x, r):
        width = x.width
        val = int(x)
        if cls is RotateRight:
            r = (width - r) % width
        rotated = (val << r) | (val >> (width - r))
        return core.Constant(rotated % (2 ** width), width)


class RotateLeft(Rotation):
    """Circular left rotation.

        >>> from chaskeypy.bitvector.core import Constant, Variable
        >>> from chaskeypy.bitvector.operation import RotateLeft
        >>> RotateLeft(Constant(0x80000001, 32), 16)
        0x00018000
        >>> RotateLeft(Variable("v1", 32), 5)
        v1 <<< 5

    """

    infix_symbol = "<<<"


class RotateRight(Rotation):
    """Circular right rotation, the inverse of `RotateLeft`.

        >>> from chaskeypy.bitvector.core import Constant
        >>> from chaskeypy.bitvector.operation import RotateRight
        >>> RotateRight(Constant(0x00018000, 32), 16)
        0x80000001

    """

    infix_symbol = ">>>"


class Extract(Operation):
    """Extraction of the bits from position ``i`` down to ``j`` (both included).

    Position 0 is the least significant bit; ``Extract(t, i, j)`` is
    also written ``t[i:j]`` and ``Extract(t, i, i)`` is ``t[i]``.

        >>> from chaskeypy.bitvector.core import Constant, Variable
        >>> Constant(0x80000000, 32)[31]
        0b1
        >>> Variable("v3", 32)[31]
        v3[31]

    """

    arity = [1, 2]
    operand_types = [core.Term, int, int]

    @classmethod
    def condition(cls, t, i, j):
        return t.width > i >= j >= 0

    @classmethod
    def output_width(cls, t, i, j):
        return i - j + 1

    @classmethod
    def eval(cls, t, i, j):
        width = i - j + 1
        return core.Constant((int(t) >> j) % (2 ** width), width)

    def __str__(self):
        t, i, j = self.args
        t = "({})".format(t) if isinstance(t, Operation) else str(t)
        return "{}[{}]".format(t, i) if i == j else "{}[{}:{}]".format(t, i, j)

    __repr__ = __str__


class Concat(Operation):
    """Concatenation, ``Concat(x, y)`` places ``x`` in the most significant bits.

        >>> from chaskeypy.bitvector.core import Constant
        >>> from chaskeypy.bitvector.operation import Concat
        >>> Concat(Constant(0x12, 8), Constant(0x345, 12))
        0x12345

    """

    arity = [2, 0]
    infix_symbol = "::"

    @classmethod
    def output_width(cls, x, y):
        return x.width + y.width

    @classmethod
    def eval(cls, x, y):
        return core.Constant((int(x) << y.width) | int(y), x.width + y.width)
