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
from zenkaku.engine.digit_codec import digit_codec_registry

__version__ = '1.0.0'
