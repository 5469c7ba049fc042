#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# @FileName     :   errors.py
# @Function     :   异常定义
from typing import Optional


class SMKeyError(Exception):
    """密钥编解码异常基类"""

    fmt = "sm-keys: {description}"

    def __init__(self, desc: Optional[str] = None):
        super().__init__()
        self.description = desc

    def __str__(self):
        return self.fmt.format(description=self.description or "Unknown Error")


class DecodeError(SMKeyError, ValueError):
    """ASN.1/DER结构错误"""


class PemError(DecodeError):
    """PEM格式错误"""


class UnsupportedAlgorithmError(SMKeyError):
    """不支持的算法OID或算法组合"""


class InvalidScalarError(SMKeyError, ValueError):
    """私钥值不在 [1, n-1] 范围内或长度错误"""


class InvalidEncodingError(SMKeyError, ValueError):
    """点编码错误"""


class IncorrectPasswordError(SMKeyError):
    """
    解密后的数据无法解析
    注意: 无法区分密码错误和密文损坏
    """


class DecryptionError(SMKeyError):
    """分组密码层解密失败"""
