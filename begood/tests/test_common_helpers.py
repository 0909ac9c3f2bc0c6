# Copyright (c) 2020-2026 NASK. All rights reserved.

import unittest

from unittest_expander import (
    expand,
    foreach,
    param,
)

from begood.class_helpers import MISSING
from begood.common_helpers import (
    CUT_INDICATOR,
    MAX_DISPLAY_LENGTH,
    describe_value,
    display_value,
    type_tag,
)


@expand
class Test__display_value(unittest.TestCase):

    @foreach(
        param('20', "'20'"),
        param(20, '20'),
        param(None, 'None'),
        param(MISSING, '<missing>'),
        param([1, 'a'], "[1, 'a']"),
        param('ł', "'\\u0142'"),
        param(b'\xff', "b'\\xff'"),
    )
    def test_short(self, value, expected_result):
        self.assertEqual(display_value(value), expected_result)

    def test_long_is_cut_to_max_length(self):
        result = display_value('x' * 1000)
        self.assertEqual(len(result), MAX_DISPLAY_LENGTH)
        self.assertTrue(result.startswith("'xxx"))
        self.assertTrue(result.endswith(CUT_INDICATOR))

    def test_exactly_max_length_is_not_cut(self):
        value = 'x' * (MAX_DISPLAY_LENGTH - 2)
        self.assertEqual(display_value(value), "'" + value + "'")

    def test_custom_max_length(self):
        self.assertEqual(display_value('abcdefghij', max_length=8), "'ab" + CUT_INDICATOR)

    def test_broken_repr(self):
        class Nasty(object):
            def __repr__(self):
                raise ValueError('no way')

        result = display_value(Nasty())
        self.assertTrue(result.startswith('<'))
        self.assertIn('Nasty object at', result)


@expand
class Test__type_tag__describe_value(unittest.TestCase):

    @foreach(
        param('x', 'str'),
        param(1, 'int'),
        param(True, 'bool'),
        param(None, 'NoneType'),
        param({}, 'dict'),
        param(MISSING, 'missing'),
    )
    def test_type_tag(self, value, expected_result):
        self.assertEqual(type_tag(value), expected_result)

    def test_nested_class_qualname(self):
        class Outer(object):
            class Inner(object):
                pass

        self.assertTrue(type_tag(Outer.Inner()).endswith('Outer.Inner'))

    @foreach(
        param('20', "'20' (str)"),
        param(MISSING, '<missing> (missing)'),
        param(3.5, '3.5 (float)'),
    )
    def test_describe_value(self, value, expected_result):
        self.assertEqual(describe_value(value), expected_result)
