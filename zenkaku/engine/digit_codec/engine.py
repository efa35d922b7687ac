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
import logging

from zenkaku.engine.interface import Engine, EngineExecutorFactory
from .type import DigitCodecEngineInitConfig, DigitCodecEngineRunConfig
from .registry import digit_codec_registry

logger = logging.getLogger(__name__)


class DigitCodecEngine(
    Engine[
        DigitCodecEngineInitConfig,
        DigitCodecEngineRunConfig,
        str,
    ]
):  # yapf: disable

    def __init__(self, init_config: DigitCodecEngineInitConfig):
        super().__init__(init_config)

        # Reject unknown type before processing any text.
        self.digit_variant = digit_codec_registry.get_or_raise(init_config.type)
        logger.debug(f'type={init_config.type}, reverse={init_config.reverse}')

    def run(self, run_config: DigitCodecEngineRunConfig) -> str:
        if self.init_config.reverse:
            return self.digit_variant.decode(run_config.text)
        else:
            return self.digit_variant.encode(run_config.text)

    def run_bytes(self, data: bytes) -> bytes:
        if self.init_config.reverse:
            return self.digit_variant.decode_bytes(data)
        else:
            return self.digit_variant.encode_bytes(data)


digit_codec_engine_executor_factory = EngineExecutorFactory(DigitCodecEngine)
