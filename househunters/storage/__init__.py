"""
House Hunters 파일 저장 패키지
엑셀(.xlsx)과 JSON 형식의 내보내기/가져오기를 담당합니다.
"""

from pathlib import Path
from typing import Union

from .base import BaseCodec, ImportFormatError, ImportedData
from .excel_codec import ExcelCodec
from .json_codec import JsonCodec

CODECS: dict[str, type[BaseCodec]] = {
    ExcelCodec.name: ExcelCodec,
    JsonCodec.name: JsonCodec,
}


def get_codec(fmt: str = "xlsx") -> BaseCodec:
    """형식 이름으로 Codec 생성"""
    fmt = fmt.lower().lstrip(".")
    if fmt not in CODECS:
        raise ValueError(f"Unsupported format: {fmt}")
    return CODECS[fmt]()


def codec_for_path(path: Union[str, Path]) -> BaseCodec:
    """파일 확장자로 Codec 선택"""
    suffix = Path(path).suffix
    if not suffix:
        raise ValueError(f"Cannot detect format from path: {path}")
    return get_codec(suffix)


__all__ = [
    "BaseCodec",
    "ImportFormatError",
    "ImportedData",
    "ExcelCodec",
    "JsonCodec",
    "CODECS",
    "get_codec",
    "codec_for_path",
]
