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
from typing import Callable, Optional, Sequence, Tuple, Mapping, List, Dict

import attrs

from zenkaku.utility import attrs_lazy_field
from zenkaku.utility.text import (
    is_ascii_digit_byte,
    encode_code_point,
    text_to_utf8_bytes,
    utf8_bytes_to_text,
)
from zenkaku.utility.text.opt import ASCII_DIGIT_ZERO

NUM_DIGITS = 10


@attrs.define(frozen=True)
class BytePatternRule:
    '''
    Matches ``prefix`` followed by one byte within ``[last_byte_begin, last_byte_end]``.
    The last byte maps to a digit by a linear offset from ``digit_begin``.
    A single sequence is the ``last_byte_begin == last_byte_end`` case.
    '''
    prefix: bytes
    last_byte_begin: int
    last_byte_end: int
    digit_begin: int

    @property
    def num_bytes(self):
        return len(self.prefix) + 1

    @property
    def digit_end(self):
        return self.digit_begin + self.last_byte_end - self.last_byte_begin

    @property
    def lead_bytes(self):
        if self.prefix:
            return (self.prefix[0],)
        else:
            return tuple(range(self.last_byte_begin, self.last_byte_end + 1))

    def get_patterns(self):
        return [
            self.prefix + bytes((last_byte,))
            for last_byte in range(self.last_byte_begin, self.last_byte_end + 1)
        ]

    def match_at(self, data: bytes, offset: int) -> Optional[int]:
        end = offset + self.num_bytes
        if end > len(data):
            return None
        if data[offset:end - 1] != self.prefix:
            return None
        last_byte = data[end - 1]
        if not self.last_byte_begin <= last_byte <= self.last_byte_end:
            return None
        return self.digit_begin + last_byte - self.last_byte_begin


def build_byte_pattern_rules(code_points: Sequence[int]) -> Sequence[BytePatternRule]:
    rules: List[BytePatternRule] = []

    for digit, code_point in enumerate(code_points):
        pattern = encode_code_point(code_point)
        prefix = pattern[:-1]
        last_byte = pattern[-1]

        if rules:
            # Extend the previous range if possible.
            prev_rule = rules[-1]
            if prev_rule.prefix == prefix and prev_rule.last_byte_end + 1 == last_byte:
                rules[-1] = attrs.evolve(prev_rule, last_byte_end=last_byte)
                continue

        rules.append(
            BytePatternRule(
                prefix=prefix,
                last_byte_begin=last_byte,
                last_byte_end=last_byte,
                digit_begin=digit,
            )
        )

    return tuple(rules)


def validate_byte_pattern_rules(
    name: str,
    code_points: Sequence[int],
    rules: Sequence[BytePatternRule],
):
    pattern_to_digit: Dict[bytes, int] = {}
    for rule in rules:
        if rule.last_byte_begin > rule.last_byte_end:
            raise RuntimeError(f'name={name}, invalid rule={rule}.')
        for digit, pattern in enumerate(rule.get_patterns(), start=rule.digit_begin):
            if pattern in pattern_to_digit:
                raise RuntimeError(f'name={name}, duplicated pattern={pattern!r}.')
            pattern_to_digit[pattern] = digit

    patterns = sorted(pattern_to_digit)
    for pattern, next_pattern in zip(patterns, patterns[1:]):
        # A prefix sorts right before its extensions.
        if next_pattern.startswith(pattern):
            raise RuntimeError(
                f'name={name}, pattern={pattern!r} is a prefix of {next_pattern!r}.'
            )

    # Decode must invert encode.
    expected_pattern_to_digit = {
        encode_code_point(code_point): digit
        for digit, code_point in enumerate(code_points)
    }
    if pattern_to_digit != expected_pattern_to_digit:
        raise RuntimeError(f'name={name}, rules do not match the code points.')


@attrs.define(frozen=True)
class DigitVariant:
    name: str
    code_points: Sequence[int] = attrs.field(converter=tuple)

    # Derived from code_points, hence rebuilt by attrs.evolve.
    _byte_pattern_rules: Optional[Sequence[BytePatternRule]] = attrs_lazy_field()
    _digit_to_pattern: Optional[Sequence[bytes]] = attrs_lazy_field()
    _lead_byte_to_rules: Optional[Mapping[int, Sequence[BytePatternRule]]] = attrs_lazy_field()

    def __attrs_post_init__(self):
        self.validate_code_points()

        byte_pattern_rules = build_byte_pattern_rules(self.code_points)
        validate_byte_pattern_rules(self.name, self.code_points, byte_pattern_rules)
        object.__setattr__(self, '_byte_pattern_rules', byte_pattern_rules)

        object.__setattr__(
            self,
            '_digit_to_pattern',
            tuple(encode_code_point(code_point) for code_point in self.code_points),
        )

        lead_byte_to_rules: Dict[int, List[BytePatternRule]] = {}
        for rule in byte_pattern_rules:
            for lead_byte in rule.lead_bytes:
                lead_byte_to_rules.setdefault(lead_byte, []).append(rule)
        object.__setattr__(
            self,
            '_lead_byte_to_rules',
            {lead_byte: tuple(rules) for lead_byte, rules in lead_byte_to_rules.items()},
        )

    def validate_code_points(self):
        if not self.name:
            raise RuntimeError('Empty name.')

        if len(self.code_points) != NUM_DIGITS:
            raise RuntimeError(
                f'name={self.name}, expect {NUM_DIGITS} code points '
                f'but got {len(self.code_points)}.'
            )
        if len(set(self.code_points)) != NUM_DIGITS:
            raise RuntimeError(f'name={self.name}, code points are not distinct.')

    @property
    def byte_pattern_rules(self):
        assert self._byte_pattern_rules is not None
        return self._byte_pattern_rules

    @property
    def digit_to_pattern(self):
        assert self._digit_to_pattern is not None
        return self._digit_to_pattern

    @property
    def lead_byte_to_rules(self):
        assert self._lead_byte_to_rules is not None
        return self._lead_byte_to_rules

    def lookup_encode(self, digit: int) -> int:
        return self.code_points[digit]

    def match_at(self, data: bytes, offset: int) -> Optional[Tuple[int, int]]:
        '''
        Returns ``(digit, num_bytes)`` if a decorative digit starts at ``offset``.
        '''
        if offset >= len(data):
            return None
        for rule in self.lead_byte_to_rules.get(data[offset], ()):
            digit = rule.match_at(data, offset)
            if digit is not None:
                return digit, rule.num_bytes
        return None

    def encode_bytes(self, data: bytes) -> bytes:
        encoded = bytearray()
        for byte in data:
            if is_ascii_digit_byte(byte):
                encoded.extend(self.digit_to_pattern[byte - ASCII_DIGIT_ZERO])
            else:
                encoded.append(byte)
        return bytes(encoded)

    def decode_bytes(self, data: bytes) -> bytes:
        decoded = bytearray()
        offset = 0
        while offset < len(data):
            match = self.match_at(data, offset)
            if match is None:
                # Passthrough.
                decoded.append(data[offset])
                offset += 1
            else:
                digit, num_bytes = match
                decoded.append(ASCII_DIGIT_ZERO + digit)
                offset += num_bytes
        return bytes(decoded)

    def transform_text(self, text: str, func: Callable[[bytes], bytes]) -> str:
        data, errors = text_to_utf8_bytes(text)
        return utf8_bytes_to_text(func(data), errors=errors)

    def encode(self, text: str) -> str:
        return self.transform_text(text, self.encode_bytes)

    def decode(self, text: str) -> str:
        return self.transform_text(text, self.decode_bytes)
