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
from typing import (
    Generic,
    Type,
    TypeVar,
    Mapping,
    Any,
    Optional,
    Union,
)

from zenkaku.utility import (
    dyn_structure,
    get_generic_classes,
    PathType,
)

_T_INIT_CONFIG = TypeVar('_T_INIT_CONFIG')
_T_RUN_CONFIG = TypeVar('_T_RUN_CONFIG')
_T_RUN_OUTPUT = TypeVar('_T_RUN_OUTPUT')


class Engine(Generic[_T_INIT_CONFIG, _T_RUN_CONFIG, _T_RUN_OUTPUT]):

    def __init__(self, init_config: _T_INIT_CONFIG):
        self.init_config = init_config

    def run(self, run_config: _T_RUN_CONFIG) -> _T_RUN_OUTPUT:
        raise NotImplementedError()


class EngineExecutor(Generic[_T_INIT_CONFIG, _T_RUN_CONFIG, _T_RUN_OUTPUT]):

    def __init__(self, engine: Engine[_T_INIT_CONFIG, _T_RUN_CONFIG, _T_RUN_OUTPUT]):
        self.engine = engine

    def get_run_config_cls(self) -> Type[_T_RUN_CONFIG]:
        return get_generic_classes(type(self.engine))[1]  # type: ignore

    def run(
        self,
        run_config: Union[
            Mapping[str, Any],
            _T_RUN_CONFIG,
        ],
    ) -> _T_RUN_OUTPUT:  # yapf: disable
        run_config = dyn_structure(run_config, self.get_run_config_cls())
        return self.engine.run(run_config)


class EngineExecutorFactory(Generic[_T_INIT_CONFIG, _T_RUN_CONFIG, _T_RUN_OUTPUT]):

    def __init__(
        self,
        engine_cls: Type[Engine[_T_INIT_CONFIG, _T_RUN_CONFIG, _T_RUN_OUTPUT]],
    ):
        self.engine_cls = engine_cls

    def get_init_config_cls(self) -> Type[_T_INIT_CONFIG]:
        return get_generic_classes(self.engine_cls)[0]  # type: ignore

    def create(
        self,
        init_config: Optional[
            Union[
                Mapping[str, Any],
                PathType,
                _T_INIT_CONFIG,
            ]
        ] = None,
    ):  # yapf: disable
        init_config = dyn_structure(
            init_config,
            self.get_init_config_cls(),
            support_path_type=True,
            support_none_type=True,
        )
        return EngineExecutor(self.engine_cls(init_config))
