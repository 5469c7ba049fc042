#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# @FileName     :   kdf.py
# @Function     :   PBKDF2 口令密钥派生 (PKCS#5 v2.0)
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC


def pbkdf2_hmac(password: bytes, salt: bytes, iterations: int, key_size: int,
                hash_alg: hashes.HashAlgorithm = None) -> bytes:
    """
    派生密钥
    :param password: 口令
    :param salt: 盐值
    :param iterations: 迭代次数
    :param key_size: 派生密钥字节数
    :param hash_alg: HMAC使用的哈希算法, 默认为 hashes.SHA256()
    :return: key_size 字节的派生密钥
    """
    if iterations < 1:
        raise ValueError('iterations must be positive, got %d' % iterations)
    if key_size < 1:
        raise ValueError('key_size must be positive, got %d' % key_size)
    kdf = PBKDF2HMAC(
        algorithm=hash_alg or hashes.SHA256(),
        length=key_size,
        salt=salt,
        iterations=iterations,
    )
    return kdf.derive(password)
