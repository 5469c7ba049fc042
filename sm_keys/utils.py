#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# @FileName     :   utils.py
# @Function     :   转换函数
from typing import Union


def pad(data: bytes, block_size: int = 16) -> bytes:
    """
    填充到分组长度的整数倍, 每个填充字节的值等于填充的字节数
    已对齐时仍追加一整个分组
    """
    count = block_size - len(data) % block_size
    return data + bytes([count]) * count


def unpad(data: bytes, block_size: int = 16) -> bytes:
    if not data or len(data) % block_size:
        raise ValueError('data length %d is not a positive multiple of %d' % (len(data), block_size))
    count = data[-1]
    if not 1 <= count <= block_size or data[-count:] != bytes([count]) * count:
        raise ValueError('invalid padding')
    return data[:-count]


def int_to_bytes(n: int, size: int) -> bytes:
    """大端定长编码, 超出长度时抛出OverflowError"""
    return n.to_bytes(size, byteorder='big')


def bytes_to_int(data: bytes) -> int:
    return int.from_bytes(data, byteorder='big')


def to_bytes(value: Union[str, bytes]) -> bytes:
    if isinstance(value, str):
        return value.encode('utf-8')
    return bytes(value)
