import copy
import os
from os.path import isfile, dirname, join, isabs
from typing import Union, List, Dict, Any, Optional

import pytomlpp

ConfigPath = Union[str, int, List[Union[str, int]]]

ComplexItem = Union['ConfigList', 'ConfigObject']
ConfigValue = Union[int, str, float, bool, ComplexItem]

StdValue = Union[int, str, float, bool, List[Any], Dict[str, Any]]

CONFIG_ENV = 'INTRANGE_CONFIG'
DEFAULT_CONFIG_FILE = 'config.toml'


class ConfigBase:
    def get(self, path: ConfigPath, default: Optional[ConfigValue] = None) -> ConfigValue:
        val = self[path]

        if val is not None:
            return val
        elif default is not None:
            return default
        else:
            raise ValueError(f"No configuration setting with key {path} found")

    def get_str(self, path: ConfigPath, default: Optional[str] = None) -> str:
        return str(self.get(path, default))

    def get_int(self, path: ConfigPath, default: Optional[int] = None) -> int:
        val = self.get(path, default)

        if isinstance(val, bool) or not isinstance(val, (int, str)):
            raise ValueError(f"Setting {path} is not an integer: {val}")

        return int(val)

    def get_bool(self, path: ConfigPath, default: Optional[bool] = None) -> bool:
        return bool(self.get(path, default))

    def get_list(self, path: ConfigPath, default: Optional['ConfigList'] = None) -> 'ConfigList':
        val = self.get(path, ConfigList([]) if default is None else default)

        if isinstance(val, ConfigList):
            return val
        else:
            raise ValueError(f"Not a list: {val}")

    def get_obj(self, path: ConfigPath, default: Optional['ConfigObject'] = None) -> 'ConfigObject':
        val = self.get(path, ConfigObject({}) if default is None else default)

        if isinstance(val, ConfigObject):
            return val
        else:
            raise ValueError(f"Not an object: {val}")

    def __contains__(self, path: ConfigPath) -> bool:
        return self[path] is not None

    def __getitem__(self, path: ConfigPath) -> Optional[ConfigValue]:
        if isinstance(path, int):
            return self._get_int_idx(path)
        elif isinstance(path, str) and '.' not in path:
            return self._get_str_idx(path)
        elif isinstance(path, str):
            return self[path.split('.')]
        elif len(path) == 0:
            return self

        val = self[path[0]]

        if val is None or len(path) == 1:
            return val
        elif isinstance(val, ConfigBase):
            return val[path[1:]]
        else:
            return None

    def _get_int_idx(self, idx: int) -> Optional[ConfigValue]:
        ...

    def _get_str_idx(self, idx: str) -> Optional[ConfigValue]:
        ...


class ConfigList(ConfigBase):
    def __init__(self, __list: List[ConfigValue]):
        self.__list = __list

    def __iter__(self):
        return iter(self.__list)

    def __len__(self):
        return len(self.__list)

    def __repr__(self):
        return repr(self.__list)

    def as_list(self) -> List[StdValue]:
        return [_to_stdlib(value) for value in self.__list]

    def _get_int_idx(self, idx: int) -> Optional[ConfigValue]:
        return self.__list[idx] if 0 <= idx < len(self) else None

    def _get_str_idx(self, idx: str) -> Optional[ConfigValue]:
        try:
            return self[int(idx)]
        except ValueError:
            return None


class ConfigObject(ConfigBase):
    def __init__(self, __dict: Dict[str, ConfigValue]):
        self.__dict = __dict

    def __iter__(self):
        return iter(self.__dict)

    def __len__(self):
        return len(self.__dict)

    def __repr__(self):
        return repr(self.__dict)

    def as_dict(self) -> Dict[str, StdValue]:
        return {key: _to_stdlib(value) for key, value in self.__dict.items()}

    def _get_int_idx(self, idx: int) -> Optional[ConfigValue]:
        return self[str(idx)]

    def _get_str_idx(self, idx: str) -> Optional[ConfigValue]:
        return self.__dict.get(idx)


def _to_stdlib(value: ConfigValue) -> StdValue:
    if isinstance(value, ConfigList):
        return value.as_list()
    elif isinstance(value, ConfigObject):
        return value.as_dict()

    return value


def _to_config_value(value: StdValue) -> ConfigValue:
    if isinstance(value, list):
        return ConfigList([_to_config_value(val) for val in value])
    elif isinstance(value, dict):
        return ConfigObject({key: _to_config_value(val) for key, val in value.items()})

    return value


def load(path: Optional[str] = None) -> ConfigObject:
    """
    Loads the configuration file.

    :param path: the file to load. Defaults to the value of the INTRANGE_CONFIG environment variable or config.toml
        in the working directory. If no file exists at the default location, the configuration is empty.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV, DEFAULT_CONFIG_FILE)

        if not isfile(path):
            return ConfigObject({})

    with open(path, 'r') as f:
        # noinspection PyTypeChecker
        _dict = __resolve(pytomlpp.load(f), [path], dirname(path))

    return ConfigObject({key: _to_config_value(value) for key, value in _dict.items()})


def __resolve(_dict, resolving, base_dir):
    included = None

    for key in _dict:
        if key == '__include__':
            val = _dict['__include__']

            if not isabs(val):
                val = join(base_dir, val)

            if val in resolving:
                raise RuntimeError('Encountered __include__ cycle:\n'
                                   f' {" -> ".join(resolving)} -> {val}')

            with open(val, 'r') as f:
                # noinspection PyTypeChecker
                included = __resolve(pytomlpp.load(f), resolving + [val], dirname(val))
        elif isinstance(_dict[key], dict):
            _dict[key] = __resolve(_dict[key], resolving, base_dir)

    if included is not None:
        _dict = _merge(included, _dict)

    _dict.pop('__include__', None)

    return _dict


def _merge(defaults, overrides):
    merged = copy.deepcopy(defaults)

    for key, override in overrides.items():
        val = merged.get(key)

        if isinstance(val, dict) and isinstance(override, dict):
            merged[key] = _merge(val, override)
        else:
            merged[key] = override

    return merged


CONFIG = load()
