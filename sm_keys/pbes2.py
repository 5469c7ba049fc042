#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# @FileName     :   pbes2.py
# @Function     :   PBES2 口令加密 PBKDF2-HMAC-SHA256 + AES-256-CBC
import logging
from secrets import token_bytes
from typing import NamedTuple, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .errors import DecryptionError
from .kdf import pbkdf2_hmac
from .utils import pad, to_bytes

logger = logging.getLogger(__name__)

ITERATIONS = 2048
MAX_ITERATIONS = 10000000  # 解析不可信输入时的迭代次数上限
SALT_SIZE = 8
IV_SIZE = 16
KEY_SIZE = 32  # AES-256
BLOCK_SIZE = algorithms.AES.block_size // 8


class PBES2Result(NamedTuple):
    ciphertext: bytes
    salt: bytes
    iv: bytes
    iterations: int


def derive_key(password: Union[str, bytes], salt: bytes, iterations: int) -> bytes:
    return pbkdf2_hmac(to_bytes(password), salt, iterations, KEY_SIZE, hashes.SHA256())


def encrypt(plaintext: bytes, password: Union[str, bytes], iterations: int = ITERATIONS) -> PBES2Result:
    """
    加密, 每次调用生成新的盐值和IV
    :param plaintext: 明文
    :param password: 口令
    :param iterations: PBKDF2迭代次数
    :return: PBES2Result(密文, 盐值, IV, 迭代次数)
    """
    salt = token_bytes(SALT_SIZE)
    iv = token_bytes(IV_SIZE)
    key = derive_key(password, salt, iterations)
    logger.debug("PBES2 encrypting %d bytes, iterations=%d", len(plaintext), iterations)
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    ciphertext = encryptor.update(pad(plaintext, BLOCK_SIZE)) + encryptor.finalize()
    return PBES2Result(ciphertext, salt, iv, iterations)


def decrypt(ciphertext: bytes, password: Union[str, bytes], salt: bytes, iv: bytes, iterations: int) -> bytes:
    """
    解密, 返回的明文保留填充字节
    口令错误不会在此处报错, 只能由后续的结构解析发现
    """
    if not ciphertext or len(ciphertext) % BLOCK_SIZE:
        raise DecryptionError('ciphertext length %d is not a positive multiple of %d' % (len(ciphertext), BLOCK_SIZE))
    if len(iv) != IV_SIZE:
        raise DecryptionError('IV must be %d bytes, got %d' % (IV_SIZE, len(iv)))
    if not 1 <= iterations <= MAX_ITERATIONS:
        raise DecryptionError('invalid PBKDF2 iteration count %d' % iterations)
    key = derive_key(password, salt, iterations)
    logger.debug("PBES2 decrypting %d bytes, iterations=%d", len(ciphertext), iterations)
    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    return decryptor.update(ciphertext) + decryptor.finalize()
