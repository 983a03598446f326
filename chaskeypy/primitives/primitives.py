"""Represent fixed-width bit-vector primitives."""
import collections

from chaskeypy.bitvector import core


class BvFunction(object):
    """Represent (iterated) fixed-width bit-vector functions.

    A `BvFunction` is called like a function with one operand per entry
    of ``input_widths`` and returns a tuple with one `Constant` per entry
    of ``output_widths``. Integer operands are converted to constants of
    the right width. Symbolic operands (`Variable` or expressions) are
    rejected unless ``symbolic_inputs=True`` is given, in which case the
    outputs are expressions in those operands.

        >>> from chaskeypy.bitvector.core import Variable
        >>> from chaskeypy.primitives.chaskey import ChaskeyPi
        >>> ChaskeyPi(0, 0, 0, 0)
        (0x00000000, 0x00000000, 0x00000000, 0x00000000)
        >>> v = [Variable("v{}".format(i), 32) for i in range(4)]
        >>> ChaskeyPi.with_rounds(1)(*v, symbolic_inputs=True)[0]
        ((v0 + v1) <<< 16) + ((v3 <<< 8) ^ (v2 + v3))

    Attributes:
        input_widths: the widths of the inputs.
        output_widths: the widths of the outputs.
        rounds: the number of times the round function is iterated.

    """
    input_widths = None
    output_widths = None
    rounds = None

    def __new__(cls, *args, symbolic_inputs=False):
        if len(args) != len(cls.input_widths):
            raise ValueError("{} takes {} inputs, got {}".format(
                cls.__name__, len(cls.input_widths), len(args)))
        args = [core.bitvectify(a, w) for a, w in zip(args, cls.input_widths)]

        if not symbolic_inputs and not all(isinstance(a, core.Constant) for a in args):
            raise TypeError("{} expects constant inputs".format(cls.__name__))

        result = cls.eval(*args)
        assert isinstance(result, collections.abc.Sequence)
        assert len(result) == len(cls.output_widths)
        return tuple(core.bitvectify(r, w) for r, w in zip(result, cls.output_widths))

    @classmethod
    def eval(cls, *args):
        """Evaluate the function (internal method)."""
        raise NotImplementedError("subclasses need to override this method")

    @classmethod
    def set_rounds(cls, new_rounds):
        """Change the number of rounds."""
        if not isinstance(new_rounds, int) or new_rounds < 0:
            raise ValueError("invalid number of rounds: {}".format(new_rounds))
        cls.rounds = new_rounds

    @classmethod
    def with_rounds(cls, rounds):
        """Return a subclass of the function iterated *rounds* times.

        The class attributes of the original function are not modified.

            >>> from chaskeypy.primitives.chaskey import ChaskeyPi
            >>> Pi4 = ChaskeyPi.with_rounds(4)
            >>> Pi4.rounds, ChaskeyPi.rounds
            (4, 8)

        """
        new_cls = type(cls.__name__, (cls, ), {})
        new_cls.set_rounds(rounds)
        return new_cls
