#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# @FileName     :   pem.py
# @Function     :   PEM格式读写及文件读写
import base64
import binascii
import logging
from typing import Optional, Tuple, Union

from .curve import sm2p256v1, CurveFp
from .errors import IncorrectPasswordError, PemError
from .pkcs8 import marshal_private_key, parse_private_key
from .sm2 import SM2PrivateKey, SM2PublicKey
from .spki import marshal_public_key, parse_public_key

logger = logging.getLogger(__name__)

PRIVATE_KEY = 'PRIVATE KEY'
ENCRYPTED_PRIVATE_KEY = 'ENCRYPTED PRIVATE KEY'
PUBLIC_KEY = 'PUBLIC KEY'

LINE_LENGTH = 64


def encode(der: bytes, label: str) -> bytes:
    body = base64.b64encode(der)
    lines = [b'-----BEGIN %s-----' % label.encode()]
    lines.extend([body[i:i + LINE_LENGTH] for i in range(0, len(body), LINE_LENGTH)])
    lines.append(b'-----END %s-----\n' % label.encode())
    return b'\n'.join(lines)


def decode(data: Union[str, bytes]) -> Tuple[str, bytes]:
    """
    解析第一个PEM块
    :param data: PEM文本
    :return: (标签, DER)
    """
    if isinstance(data, str):
        data = data.encode('ascii', errors='replace')
    lines = [line.strip() for line in data.splitlines()]
    begin = end = None
    for i, line in enumerate(lines):
        if begin is None and line.startswith(b'-----BEGIN ') and line.endswith(b'-----'):
            begin = i
        elif begin is not None and line.startswith(b'-----END ') and line.endswith(b'-----'):
            end = i
            break
    if begin is None or end is None:
        raise PemError('no PEM block found')

    label = lines[begin][len(b'-----BEGIN '):-len(b'-----')]
    if lines[end][len(b'-----END '):-len(b'-----')] != label:
        raise PemError('PEM END line does not match BEGIN line')
    body = b''.join(lines[begin + 1:end])
    try:
        der = base64.b64decode(body, validate=True)
    except binascii.Error as exc:
        raise PemError('PEM data are corrupted') from exc
    return label.decode('ascii', errors='replace'), der


def dump_private_key(key: SM2PrivateKey, password: Optional[Union[str, bytes]] = None) -> bytes:
    der = marshal_private_key(key, password)
    return encode(der, PRIVATE_KEY if password is None else ENCRYPTED_PRIVATE_KEY)


def load_private_key(data: Union[str, bytes], password: Optional[Union[str, bytes]] = None,
                     curve: CurveFp = sm2p256v1) -> SM2PrivateKey:
    label, der = decode(data)
    if label not in (PRIVATE_KEY, ENCRYPTED_PRIVATE_KEY):
        raise PemError('expected a private key PEM block, got "%s"' % label)
    if label == ENCRYPTED_PRIVATE_KEY and password is None:
        raise IncorrectPasswordError('private key is encrypted but no password was given')
    return parse_private_key(der, password, curve=curve)


def dump_public_key(key: SM2PublicKey) -> bytes:
    return encode(marshal_public_key(key), PUBLIC_KEY)


def load_public_key(data: Union[str, bytes], curve: CurveFp = sm2p256v1) -> SM2PublicKey:
    label, der = decode(data)
    if label != PUBLIC_KEY:
        raise PemError('expected a public key PEM block, got "%s"' % label)
    return parse_public_key(der, curve=curve)


def _read(path: str) -> bytes:
    logger.debug("Loading PEM file from %s", path)
    with open(path, 'rb') as f:
        return f.read()


def _write(path: str, data: bytes) -> None:
    logger.debug("Writing PEM file to %s", path)
    with open(path, 'wb') as f:
        f.write(data)


def load_private_key_file(path: str, password: Optional[Union[str, bytes]] = None,
                          curve: CurveFp = sm2p256v1) -> SM2PrivateKey:
    return load_private_key(_read(path), password, curve=curve)


def dump_private_key_file(path: str, key: SM2PrivateKey, password: Optional[Union[str, bytes]] = None) -> None:
    # 先完成编码, 编码失败时不创建文件
    _write(path, dump_private_key(key, password))


def load_public_key_file(path: str, curve: CurveFp = sm2p256v1) -> SM2PublicKey:
    return load_public_key(_read(path), curve=curve)


def dump_public_key_file(path: str, key: SM2PublicKey) -> None:
    _write(path, dump_public_key(key))
