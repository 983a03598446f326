"""Manipulate bit-vector expressions.

This module manipulates fixed-width bit-vector expressions in a numeric
and symbolic way. It implements the bit-vector operations used by the
Chaskey permutation (modular addition, rotations, XOR, shifts) and
follows the syntax and semantics of the bit-vector theory of the
`SMT_LIBv2 <http://smtlib.cs.uiowa.edu/theories-FixedSizeBitVectors.shtml>`_
format.

"""
