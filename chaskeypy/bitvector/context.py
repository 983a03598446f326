"""Provide context managers to change how bit-vector operations behave."""
import contextlib


class StatefulContext(contextlib.AbstractContextManager):
    """Base class of the contexts holding a class-level current value.

    Entering the context replaces ``current_context`` and exiting it
    restores the previous value, so contexts can be nested.
    """

    current_context = None

    def __init__(self, new_context):
        self.new_context = new_context

    def __enter__(self):
        self.previous_context = type(self).current_context
        type(self).current_context = self.new_context

    def __exit__(self, *args):
        type(self).current_context = self.previous_context


class _Switch(StatefulContext):
    """A context that is either enabled (True) or disabled (False)."""

    current_context = True

    def __init__(self, new_context):
        assert new_context in [True, False]
        super().__init__(new_context)


class Evaluation(_Switch):
    """Control whether operations on constants are evaluated.

    Enabled by default. When disabled, operations return expression
    nodes even for constant operands; ``doit`` evaluates them later.

        >>> from chaskeypy.bitvector.core import Constant
        >>> from chaskeypy.bitvector.context import Evaluation
        >>> with Evaluation(False):
        ...     expr = Constant(1, 8) + Constant(1, 8)
        >>> expr
        0x01 + 0x01
        >>> expr.doit()
        0x02

    """


class Validation(_Switch):
    """Control whether the operands of the operations are checked.

    Enabled by default. When disabled, Automatic Constant Conversion is
    no longer available (see `Operation`) and operands of mismatched
    widths are no longer rejected.

        >>> from chaskeypy.bitvector.core import Constant
        >>> from chaskeypy.bitvector.context import Validation
        >>> Constant(1, 8) + Constant(1, 4)
        Traceback (most recent call last):
         ...
        AssertionError: BvAdd.condition(0x01, 0x1) did not hold
        >>> with Validation(False):
        ...     Constant(1, 8) + Constant(1, 8)
        0x02

    Note:
        Disabling `Validation` speeds up the evaluation of the
        permutation and of the modes built on it.
    """
