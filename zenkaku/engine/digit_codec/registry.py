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
from typing import Dict, Optional, Sequence, Iterable
import logging

from zenkaku.element import DigitVariant
from .variant import DIGIT_VARIANTS

logger = logging.getLogger(__name__)


class DigitCodecRegistry:

    def __init__(self, digit_variants: Iterable[DigitVariant] = ()):
        self.name_to_digit_variant: Dict[str, DigitVariant] = {}
        for digit_variant in digit_variants:
            self.register(digit_variant)

    def register(self, digit_variant: DigitVariant):
        name = digit_variant.name
        if name in self.name_to_digit_variant:
            logger.debug(f'Overriding name={name}.')
        self.name_to_digit_variant[name] = digit_variant

    def get(self, name: str) -> Optional[DigitVariant]:
        return self.name_to_digit_variant.get(name)

    def get_or_raise(self, name: str) -> DigitVariant:
        digit_variant = self.get(name)
        if digit_variant is None:
            raise KeyError(f'type={name} not found')
        return digit_variant

    def list_names(self) -> Sequence[str]:
        return sorted(self.name_to_digit_variant)

    def __contains__(self, name: str):
        return name in self.name_to_digit_variant

    def __len__(self):
        return len(self.name_to_digit_variant)


def build_digit_codec_registry():
    return DigitCodecRegistry(DIGIT_VARIANTS)


# Built once, read-only afterward.
digit_codec_registry = build_digit_codec_registry()
