import logging
from dataclasses import dataclass, replace
from typing import TypeVar

_SettingT = TypeVar('_SettingT', bound='_DefaultOverride')


@dataclass(frozen=True)
class _DefaultOverride(object):
    def __call__(self: _SettingT, **kwargs) -> _SettingT:
        return replace(self, **kwargs)


@dataclass(frozen=True)
class _PngSetting(_DefaultOverride):
    """Setting for reading PNG chunk streams

    strict: if set to True, throws error on chunk with invalid type code,
        otherwise log warning

    check_crc: if set to True, throws error on checksum mismatch,
        otherwise log warning and keep the stored checksum

    logger: destination of parse diagnostics
    """

    strict: bool = False
    check_crc: bool = True
    logger: logging.Logger = logging.root


png = _PngSetting()
