#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# @FileName     :   point.py
# @Function     :   椭圆曲线点的非压缩编码 04 || X || Y
from typing import Tuple

from .curve import CurveFp
from .errors import InvalidEncodingError
from .utils import bytes_to_int, int_to_bytes

UNCOMPRESSED = 0x04


def encode_point(curve: CurveFp, x: int, y: int) -> bytes:
    """
    点编码, 坐标按曲线阶的字节长度定长大端编码
    :param curve: 曲线
    :param x: x坐标
    :param y: y坐标
    :return: 1 + 2 * curve.byte_size 字节
    """
    size = curve.byte_size
    try:
        return bytes([UNCOMPRESSED]) + int_to_bytes(x, size) + int_to_bytes(y, size)
    except OverflowError as exc:
        raise InvalidEncodingError('point coordinates do not fit in %d bytes' % size) from exc


def decode_point(curve: CurveFp, data: bytes, check: bool = False) -> Tuple[int, int]:
    """
    点解码
    :param curve: 曲线
    :param data: 编码后的点
    :param check: 是否校验点在曲线上
    :return: (x, y)
    """
    size = curve.byte_size
    if len(data) != 1 + 2 * size:
        raise InvalidEncodingError('point encoding must be %d bytes, got %d' % (1 + 2 * size, len(data)))
    if data[0] != UNCOMPRESSED:
        raise InvalidEncodingError('unsupported point encoding tag 0x%02x' % data[0])
    x = bytes_to_int(data[1:1 + size])
    y = bytes_to_int(data[1 + size:])
    if check and not curve.is_on_curve(x, y):
        raise InvalidEncodingError('point is not on curve %s' % curve.name)
    return x, y
