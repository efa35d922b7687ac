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
'''
Consts for the decorative digit code points.

Every table is indexed by digit value, i.e. ``TABLE[d]`` is the code point standing for ``d``.
'''
from typing import Sequence

#: Fullwidth digits, U+FF10 - U+FF19.
FULLWIDTH_DIGIT_CODE_POINTS: Sequence[int] = tuple(range(0xFF10, 0xFF1A))

#: Circled digits.
CIRCLE_DIGIT_CODE_POINTS: Sequence[int] = (
    # ⓪ lives outside of the ① - ⑨ block.
    0x24EA,
    *range(0x2460, 0x2469),
)

#: Roman numerals.
ROMAN_DIGIT_CODE_POINTS: Sequence[int] = (
    # No roman numeral for zero, borrow the fullwidth one.
    0xFF10,
    # Ⅰ - Ⅸ
    *range(0x2160, 0x2169),
)

#: Chinese numerals.
CHINESE_DIGIT_CODE_POINTS: Sequence[int] = (
    # 〇
    0x3007,
    # 一
    0x4E00,
    # 二
    0x4E8C,
    # 三
    0x4E09,
    # 四
    0x56DB,
    # 五
    0x4E94,
    # 六
    0x516D,
    # 七
    0x4E03,
    # 八
    0x516B,
    # 九
    0x4E5D,
)

#: Thai digits, U+0E50 - U+0E59.
THAI_DIGIT_CODE_POINTS: Sequence[int] = tuple(range(0x0E50, 0x0E5A))
