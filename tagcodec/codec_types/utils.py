# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from collections.abc import Mapping
from dataclasses import is_dataclass
from functools import reduce
from operator import or_
from types import NoneType, UnionType
from typing import TYPE_CHECKING, Any, TypeAlias, TypeVar, Union, get_args, get_origin

from structlog import get_logger

if TYPE_CHECKING:
    from tagcodec.codec_types import CodecType


logger = get_logger()

T = TypeVar('T')
TypeAliasMap: TypeAlias = Mapping[Any, type]
# keys are types, `dataclass` (for any dataclass) or a frozenset of types (for a non-optional union)
TypeToCodecTypeMap: TypeAlias = Mapping[Any, type['CodecType']]

_UNION_ORIGINS = (Union, UnionType)


def is_subclass(type_: Any, class_: type) -> bool:
    """ Like `issubclass` but returns `False` instead of failing when `type_` is not a class.

    >>> is_subclass(bool, int)
    True
    >>> is_subclass('int', int)
    False
    """
    return isinstance(type_, type) and issubclass(type_, class_)


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(int), pretty_type(None), pretty_type(tuple[str, ...])
    ('int', 'None', 'tuple[str, ...]')
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif hasattr(type_, '__args__'):
        return str(type_)
    else:
        return getattr(type_, '__name__', repr(type_))


def get_aliased_type(type_: Any, alias_map: TypeAliasMap, *, _verbose: bool = True) -> Any:
    """ Map a type to its usable alias including the type's arguments.

    For example, `list` is mapped to `tuple` in the default alias map, with an ellipsis added so that the resulting
    `tuple[T, ...]` still means a variable length sequence:

    >>> from tagcodec.codec_types import DEFAULT_TYPE_ALIAS_MAP as alias_map
    >>> get_aliased_type(list[tuple[str, list[int]]], alias_map, _verbose=False)
    tuple[tuple[str, tuple[int, ...]], ...]
    """
    new_type, replaced = _get_aliased_type(type_, alias_map)
    if replaced and _verbose:
        logger.debug('type replaced', old=pretty_type(type_), new=pretty_type(new_type))
    return new_type


def _get_aliased_type(type_: Any, alias_map: TypeAliasMap) -> tuple[Any, bool]:
    """ Implementation of get_aliased_type with indication of whether there was a replacement.
    """
    origin_type = get_origin(type_) or type_
    replaced = False

    if origin_type in _UNION_ORIGINS:
        aliased_origin: Any = UnionType
    elif origin_type in alias_map:
        aliased_origin = alias_map[origin_type]
        replaced = True
    else:
        aliased_origin = origin_type

    type_args = get_args(type_)
    if not type_args:
        return aliased_origin, replaced

    aliased_args_replaced = [_get_aliased_type(arg, alias_map) if arg is not Ellipsis else (arg, False)
                             for arg in type_args]
    aliased_args, args_replaced = zip(*aliased_args_replaced)
    replaced |= any(args_replaced)

    if aliased_origin is UnionType:
        # XXX: UnionType can't be instantiated directly, this is the simplest way to do it
        return reduce(or_, aliased_args), replaced

    # XXX: special case, the equivalent type for `list[T]` is `tuple[T, ...]`
    if is_subclass(origin_type, list) and is_subclass(aliased_origin, tuple):
        if len(aliased_args) != 1:
            raise TypeError('to make an alias from `list` to `tuple` exactly 1 argument is required')
        aliased_arg, = aliased_args
        return aliased_origin[aliased_arg, ...], replaced

    return aliased_origin[tuple(aliased_args)], replaced


def get_usable_origin_type(type_: Any, /, *, type_map: 'CodecType.TypeMap') -> Any:
    """ Map a given type into a key that is usable in a `CodecType.TypeMap`.

    The returned key is guaranteed to exist in `type_map.codec_types_map`, otherwise a `TypeError` is raised. The
    lookup is, in order: the origin type itself, `dataclass` for any dataclass, and the most specific registered base
    class (so a `StrEnum` subclass finds `StrEnum` even though it is also a `str`).
    """
    if isinstance(type_, str):
        raise NotImplementedError('string annotations are not currently supported')

    codec_types_map = type_map.codec_types_map
    aliased_type = get_aliased_type(type_, type_map.alias_map, _verbose=False)
    origin = get_origin(aliased_type) or aliased_type

    if origin in _UNION_ORIGINS:
        args = get_args(aliased_type)
        if NoneType in args:
            return UnionType
        # When it's an union and None is not in it, it's not Optional, so we index by its set of members
        members = frozenset(args)
        if members not in codec_types_map:
            raise TypeError(f'union type {pretty_type(type_)} is not supported')
        return members

    if origin in codec_types_map:
        return origin

    from dataclasses import dataclass
    if is_dataclass(origin) and dataclass in codec_types_map:
        return dataclass

    candidates = [key for key in codec_types_map if isinstance(key, type) and is_subclass(origin, key)]
    if not candidates:
        raise TypeError(f'type {pretty_type(type_)} is not supported')
    return max(candidates, key=lambda key: len(key.__mro__))
