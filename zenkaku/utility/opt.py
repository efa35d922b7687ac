from typing import (
    get_args,
    Any,
    Type,
    TypeVar,
)
from os import PathLike
from collections import abc

import attrs
import iolite as io
import cattrs
from cattrs.errors import ClassValidationError

from zenkaku.utility.type import PathType


def is_path_type(path: Any):
    return isinstance(path, (str, PathLike))  # type: ignore


def read_json_file(path: PathType):
    return io.read_json(path, expandvars=True)


def attrs_lazy_field():
    # Excluded from __init__, hence reset by attrs.evolve.
    return attrs.field(default=None, init=False, repr=False, eq=False)


_T_TARGET = TypeVar('_T_TARGET')

_cattrs = cattrs.GenConverter(forbid_extra_keys=True)


def dyn_structure(
    dyn_object: Any,
    target_cls: Type[_T_TARGET],
    support_path_type: bool = False,
    force_path_type: bool = False,
    support_none_type: bool = False,
) -> _T_TARGET:
    if support_none_type and dyn_object is None:
        return target_cls()

    if support_path_type or force_path_type:
        dyn_object_is_path_type = is_path_type(dyn_object)
        if force_path_type:
            assert dyn_object_is_path_type
        if dyn_object_is_path_type:
            dyn_object = read_json_file(dyn_object)

    if isinstance(dyn_object, target_cls):
        # Do nothing.
        pass
    elif isinstance(dyn_object, abc.Mapping):
        try:
            dyn_object = _cattrs.structure(dyn_object, target_cls)
        except ClassValidationError:
            # cattrs cannot handle Class with hierarchy structure,
            # in such case, fallback to manually initialization.
            # NOTE: extra keys end up here and raise TypeError.
            dyn_object = target_cls(**dyn_object)
    else:
        raise NotImplementedError()

    return dyn_object


def get_generic_classes(cls: Type[Any]):
    return get_args(cls.__orig_bases__[0])  # type: ignore
