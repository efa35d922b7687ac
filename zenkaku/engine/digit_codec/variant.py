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
from zenkaku.element import DigitVariant
from zenkaku.utility.text.const import digit

fullwidth_digit_variant = DigitVariant(
    name='fullwidth',
    code_points=digit.FULLWIDTH_DIGIT_CODE_POINTS,
)

circle_digit_variant = DigitVariant(
    name='circle',
    code_points=digit.CIRCLE_DIGIT_CODE_POINTS,
)

roman_digit_variant = DigitVariant(
    name='roman',
    code_points=digit.ROMAN_DIGIT_CODE_POINTS,
)

chinese_digit_variant = DigitVariant(
    name='chinese',
    code_points=digit.CHINESE_DIGIT_CODE_POINTS,
)

thai_digit_variant = DigitVariant(
    name='thai',
    code_points=digit.THAI_DIGIT_CODE_POINTS,
)

DIGIT_VARIANTS = (
    fullwidth_digit_variant,
    circle_digit_variant,
    roman_digit_variant,
    chinese_digit_variant,
    thai_digit_variant,
)
