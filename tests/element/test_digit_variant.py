# Copyright 2022 vkit-x Administrator. All Rights Reserved.
#
# This project (vkit-x/zenkaku) is dual-licensed under commercial and SSPL licenses.
#
# The commercial license gives you the full rights to create and distribute software
# on your own terms without any SSPL license obligations. For more information,
# please see the "LICENSE_COMMERCIAL.txt" file.
#
# This project is also available under Server Side Public License (SSPL).
# The SSPL licensing is ideal for use cases such as open source projects with
# SSPL distribution, student/academic purposes, hobby projects, internal research
# projects without external distribution, or other projects where all SSPL
# obligations can be met. For more information, please see the "LICENSE_SSPL.txt" file.
import attrs
import pytest

from zenkaku.element import (
    DigitVariant,
    BytePatternRule,
    build_byte_pattern_rules,
    validate_byte_pattern_rules,
)
from zenkaku.utility.text.const import digit


def test_build_byte_pattern_rules_with_single_range():
    assert build_byte_pattern_rules(digit.FULLWIDTH_DIGIT_CODE_POINTS) == (
        BytePatternRule(b'\xef\xbc', 0x90, 0x99, 0),
    )
    assert build_byte_pattern_rules(digit.THAI_DIGIT_CODE_POINTS) == (
        BytePatternRule(b'\xe0\xb9', 0x90, 0x99, 0),
    )


def test_build_byte_pattern_rules_with_outlier_zero():
    assert build_byte_pattern_rules(digit.CIRCLE_DIGIT_CODE_POINTS) == (
        BytePatternRule(b'\xe2\x93', 0xAA, 0xAA, 0),
        BytePatternRule(b'\xe2\x91', 0xA0, 0xA8, 1),
    )
    assert build_byte_pattern_rules(digit.ROMAN_DIGIT_CODE_POINTS) == (
        BytePatternRule(b'\xef\xbc', 0x90, 0x90, 0),
        BytePatternRule(b'\xe2\x85', 0xA0, 0xA8, 1),
    )


def test_build_byte_pattern_rules_without_range():
    rules = build_byte_pattern_rules(digit.CHINESE_DIGIT_CODE_POINTS)
    assert len(rules) == 10
    for digit_value, rule in enumerate(rules):
        assert rule.last_byte_begin == rule.last_byte_end
        assert rule.digit_begin == digit_value
        assert rule.get_patterns() == [chr(digit.CHINESE_DIGIT_CODE_POINTS[digit_value]).encode()]


def test_match_at():
    digit_variant = DigitVariant(name='circle', code_points=digit.CIRCLE_DIGIT_CODE_POINTS)
    data = 'a⑤⓪'.encode()
    assert digit_variant.match_at(data, 0) is None
    assert digit_variant.match_at(data, 1) == (5, 3)
    # Inside of ⑤.
    assert digit_variant.match_at(data, 2) is None
    assert digit_variant.match_at(data, 4) == (0, 3)
    assert digit_variant.match_at(data, len(data)) is None


def test_match_at_truncated():
    digit_variant = DigitVariant(name='circle', code_points=digit.CIRCLE_DIGIT_CODE_POINTS)
    data = '⑤'.encode()[:2]
    assert digit_variant.match_at(data, 0) is None
    assert digit_variant.decode_bytes(data) == data


def test_lookup_encode():
    digit_variant = DigitVariant(name='thai', code_points=digit.THAI_DIGIT_CODE_POINTS)
    assert digit_variant.lookup_encode(0) == 0x0E50
    assert digit_variant.lookup_encode(9) == 0x0E59


def test_encode_bytes():
    digit_variant = DigitVariant(name='fullwidth', code_points=digit.FULLWIDTH_DIGIT_CODE_POINTS)
    assert digit_variant.encode_bytes(b'') == b''
    assert digit_variant.encode_bytes(b'a1') == 'a１'.encode()
    assert digit_variant.encode_bytes(b'\xff9\xe2') == b'\xff' + '９'.encode() + b'\xe2'


def test_decode_bytes_with_malformed_input():
    digit_variant = DigitVariant(name='circle', code_points=digit.CIRCLE_DIGIT_CODE_POINTS)
    data = '⑤'.encode() + b'\xff' + '⓪'.encode() + b'\xe2\x91'
    assert digit_variant.decode_bytes(data) == b'5\xff0\xe2\x91'
    assert len(digit_variant.decode_bytes(b'\xe2\x91\xe2\x91')) == 4


def test_encode_and_decode_with_undecodable_bytes():
    digit_variant = DigitVariant(name='fullwidth', code_points=digit.FULLWIDTH_DIGIT_CODE_POINTS)
    text = b'\xff12'.decode('utf-8', errors='surrogateescape')
    encoded = digit_variant.encode(text)
    assert encoded == '\udcff１２'
    assert digit_variant.decode(encoded) == text


def test_single_byte_code_points():
    digit_variant = DigitVariant(name='letter', code_points=range(ord('a'), ord('k')))
    assert digit_variant.byte_pattern_rules == (BytePatternRule(b'', 0x61, 0x6A, 0),)
    assert digit_variant.encode('019') == 'abj'
    assert digit_variant.decode('xajk') == 'x09k'


def test_evolve():
    digit_variant = DigitVariant(name='thai', code_points=digit.THAI_DIGIT_CODE_POINTS)
    evolved = attrs.evolve(digit_variant, name='thai2')
    assert evolved.name == 'thai2'
    assert evolved.encode('1') == '๑'
    assert evolved.decode('๑') == '1'


def test_invalid_code_points():
    with pytest.raises(RuntimeError):
        DigitVariant(name='foo', code_points=range(0xFF10, 0xFF19))
    with pytest.raises(RuntimeError):
        DigitVariant(name='foo', code_points=[0xFF10] * 10)
    with pytest.raises(RuntimeError):
        DigitVariant(name='', code_points=digit.FULLWIDTH_DIGIT_CODE_POINTS)


def test_invalid_byte_pattern_rules():
    code_points = digit.FULLWIDTH_DIGIT_CODE_POINTS
    validate_byte_pattern_rules('foo', code_points, build_byte_pattern_rules(code_points))

    # Missing 9.
    with pytest.raises(RuntimeError):
        validate_byte_pattern_rules(
            'foo',
            code_points,
            [BytePatternRule(b'\xef\xbc', 0x90, 0x98, 0)],
        )
    # Ambiguous.
    with pytest.raises(RuntimeError):
        validate_byte_pattern_rules(
            'foo',
            code_points,
            [
                BytePatternRule(b'\xef\xbc', 0x90, 0x99, 0),
                BytePatternRule(b'\xef', 0xBC, 0xBC, 0),
            ],
        )
    # Duplicated.
    with pytest.raises(RuntimeError):
        validate_byte_pattern_rules(
            'foo',
            code_points,
            [
                BytePatternRule(b'\xef\xbc', 0x90, 0x99, 0),
                BytePatternRule(b'\xef\xbc', 0x91, 0x91, 1),
            ],
        )


def test_evolve_code_points():
    digit_variant = DigitVariant(name='foo', code_points=digit.FULLWIDTH_DIGIT_CODE_POINTS)
    evolved = attrs.evolve(digit_variant, code_points=digit.THAI_DIGIT_CODE_POINTS)
    assert evolved.byte_pattern_rules == build_byte_pattern_rules(digit.THAI_DIGIT_CODE_POINTS)
    assert evolved.encode('9') == '๙'
    assert evolved.decode('๙１') == '9１'


def test_encode_and_decode_with_lone_surrogate():
    digit_variant = DigitVariant(name='circle', code_points=digit.CIRCLE_DIGIT_CODE_POINTS)
    text = '1\ud8005\udcff'
    encoded = digit_variant.encode(text)
    assert encoded == '①\ud800⑤\udcff'
    assert digit_variant.decode(encoded) == text
    assert digit_variant.decode('\ud800⓪') == '\ud8000'
