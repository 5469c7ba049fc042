#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# @FileName     :   pkcs8.py
# @Function     :   SM2私钥 PKCS#8 编解码, 支持 PBES2 口令加密
"""
未加密: PrivateKeyInfo { 0, {id-ecPublicKey, sm2p256v1}, ECPrivateKey }
加密:   EncryptedPrivateKeyInfo { PBES2 {PBKDF2 {salt, 2048}, AES-256-CBC {iv}}, 密文 }

由私钥值d重新计算公钥, 容器中保存的公钥不参与校验
"""
import logging
from typing import Optional, Union

from pyasn1.codec.der import encoder
from pyasn1.error import PyAsn1Error
from pyasn1.type import univ

from . import pbes2
from . import sm2_asn1 as asn1
from .curve import sm2p256v1, CurveFp
from .errors import (DecodeError, IncorrectPasswordError, InvalidScalarError, SMKeyError,
                     UnsupportedAlgorithmError)
from .point import encode_point
from .sm2 import SM2PrivateKey
from .utils import bytes_to_int, int_to_bytes

logger = logging.getLogger(__name__)

PKCS8_VERSION = 0
EC_PRIVATE_KEY_VERSION = 1


def marshal_private_key(key: SM2PrivateKey, password: Optional[Union[str, bytes]] = None) -> bytes:
    """
    私钥序列化为DER
    :param key: 私钥
    :param password: 口令, 为None时不加密
    :return: PrivateKeyInfo 或 EncryptedPrivateKeyInfo 的DER编码
    """
    der = _marshal_unencrypted(key)
    if password is None:
        return der
    return _marshal_encrypted(der, password)


def parse_private_key(der: bytes, password: Optional[Union[str, bytes]] = None,
                      curve: CurveFp = sm2p256v1) -> SM2PrivateKey:
    """
    由DER解析私钥
    :param der: DER编码
    :param password: 口令, 为None时按未加密格式解析
    :param curve: 曲线
    :return: 私钥对象
    """
    if password is None:
        return _parse_unencrypted(der, curve)
    return _parse_encrypted(der, password, curve)


def _marshal_unencrypted(key: SM2PrivateKey) -> bytes:
    curve = key.curve
    if not 0 < key.d < curve.n:
        raise InvalidScalarError('private key is out of range [1, n-1]')
    logger.debug("Marshalling %s private key", curve.name)

    ec_key = asn1.ECPrivateKey()
    ec_key['version'] = EC_PRIVATE_KEY_VERSION
    ec_key['privateKey'] = int_to_bytes(key.d, curve.byte_size)
    ec_key['parameters'] = asn1.SM2_OID.subtype(explicitTag=asn1.PARAMETERS_TAG)
    public_key = encode_point(curve, key.x, key.y)
    ec_key['publicKey'] = univ.BitString(hexValue=public_key.hex()).subtype(explicitTag=asn1.PUBLIC_KEY_TAG)

    pkcs8_key = asn1.PrivateKeyInfo()
    pkcs8_key['version'] = PKCS8_VERSION
    pkcs8_key['privateKeyAlgorithm'] = asn1.sm2_algorithm
    pkcs8_key['privateKey'] = encoder.encode(ec_key)
    return encoder.encode(pkcs8_key)


def _marshal_encrypted(der: bytes, password: Union[str, bytes]) -> bytes:
    result = pbes2.encrypt(der, password)

    kdf_params = asn1.PBKDF2Params()
    kdf_params['salt'] = result.salt
    kdf_params['iterationCount'] = result.iterations

    kdf = asn1.PBKDF2Algorithm()
    kdf['algorithm'] = asn1.PBKDF2_OID
    kdf['parameters'] = kdf_params

    scheme = asn1.EncryptionScheme()
    scheme['algorithm'] = asn1.AES256_CBC_OID
    scheme['iv'] = result.iv

    params = asn1.PBES2Params()
    params['keyDerivationFunc'] = kdf
    params['encryptionScheme'] = scheme

    algorithm = asn1.PBES2Algorithm()
    algorithm['algorithm'] = asn1.PBES2_OID
    algorithm['parameters'] = params

    encrypted_key = asn1.EncryptedPrivateKeyInfo()
    encrypted_key['encryptionAlgorithm'] = algorithm
    encrypted_key['encryptedData'] = result.ciphertext
    return encoder.encode(encrypted_key)


def _parse_unencrypted(der: bytes, curve: CurveFp, allow_trailing: bool = False) -> SM2PrivateKey:
    try:
        pkcs8_key, rest = asn1.decode(der, asn1.PrivateKeyInfo())
    except PyAsn1Error as exc:
        raise DecodeError('failed to parse PKCS#8 private key: %s' % exc) from exc
    # 解密后的明文末尾带有CBC填充
    if rest and not allow_trailing:
        raise DecodeError('trailing data after PKCS#8 private key')
    if int(pkcs8_key['version']) != PKCS8_VERSION:
        raise DecodeError('unsupported PKCS#8 version %d' % int(pkcs8_key['version']))
    asn1.check_sm2_algorithm(pkcs8_key['privateKeyAlgorithm'])
    return _parse_ec_private_key(pkcs8_key['privateKey'].asOctets(), curve)


def _parse_ec_private_key(der: bytes, curve: CurveFp) -> SM2PrivateKey:
    try:
        ec_key, rest = asn1.decode(der, asn1.ECPrivateKey())
    except PyAsn1Error as exc:
        raise DecodeError('failed to parse SM2 private key: %s' % exc) from exc
    if rest:
        raise DecodeError('trailing data after SM2 private key')
    if int(ec_key['version']) != EC_PRIVATE_KEY_VERSION:
        raise DecodeError('unsupported EC private key version %d' % int(ec_key['version']))
    if ec_key['parameters'].isValue and not asn1.same_oid(ec_key['parameters'], asn1.SM2_OID):
        raise UnsupportedAlgorithmError('not an SM2 curve: %s' % ec_key['parameters'])

    value = ec_key['privateKey'].asOctets()
    size = curve.byte_size
    # 去掉多余的前导0, 再左补0到定长
    while len(value) > size:
        if value[0] != 0:
            raise InvalidScalarError('invalid private key length')
        value = value[1:]
    value = value.rjust(size, b'\x00')

    d = bytes_to_int(value)
    if d >= curve.n:
        raise InvalidScalarError('invalid elliptic curve private key value')
    if d == 0:
        raise InvalidScalarError('private key must not be zero')

    key = SM2PrivateKey(d, curve=curve)
    key.public_key()  # 由d重新计算公钥
    return key


def _parse_encrypted(der: bytes, password: Union[str, bytes], curve: CurveFp) -> SM2PrivateKey:
    try:
        encrypted_key, rest = asn1.decode(der, asn1.EncryptedPrivateKeyInfo())
    except PyAsn1Error as exc:
        raise UnsupportedAlgorithmError('unsupported encrypted private key format') from exc
    if rest:
        raise DecodeError('trailing data after encrypted private key')

    algorithm = encrypted_key['encryptionAlgorithm']
    if not asn1.same_oid(algorithm['algorithm'], asn1.PBES2_OID):
        raise UnsupportedAlgorithmError('only PBES2 is supported, got %s' % algorithm['algorithm'])
    kdf = algorithm['parameters']['keyDerivationFunc']
    if not asn1.same_oid(kdf['algorithm'], asn1.PBKDF2_OID):
        raise UnsupportedAlgorithmError('only PBKDF2 is supported, got %s' % kdf['algorithm'])
    scheme = algorithm['parameters']['encryptionScheme']
    if not asn1.same_oid(scheme['algorithm'], asn1.AES256_CBC_OID):
        raise UnsupportedAlgorithmError('only AES-256-CBC is supported, got %s' % scheme['algorithm'])

    kdf_params = kdf['parameters']
    # prf缺省时按HMAC-SHA256处理
    if kdf_params['prf'].isValue and not asn1.same_oid(kdf_params['prf']['algorithm'], asn1.HMAC_SHA256_OID):
        raise UnsupportedAlgorithmError('only HMAC-SHA256 PRF is supported, got %s'
                                        % kdf_params['prf']['algorithm'])
    if kdf_params['keyLength'].isValue and int(kdf_params['keyLength']) != pbes2.KEY_SIZE:
        raise UnsupportedAlgorithmError('unsupported PBKDF2 key length %d' % int(kdf_params['keyLength']))
    if int(kdf_params['iterationCount']) > pbes2.MAX_ITERATIONS:
        raise UnsupportedAlgorithmError('PBKDF2 iteration count %d exceeds %d'
                                        % (int(kdf_params['iterationCount']), pbes2.MAX_ITERATIONS))

    logger.debug("Decrypting PBES2 protected private key")
    plaintext = pbes2.decrypt(encrypted_key['encryptedData'].asOctets(), password,
                              salt=kdf_params['salt'].asOctets(),
                              iv=scheme['iv'].asOctets(),
                              iterations=int(kdf_params['iterationCount']))
    try:
        return _parse_unencrypted(plaintext, curve, allow_trailing=True)
    except SMKeyError as exc:
        raise IncorrectPasswordError('incorrect password or corrupted private key') from exc
