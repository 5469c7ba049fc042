#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# @FileName     :   spki.py
# @Function     :   SM2公钥 SubjectPublicKeyInfo 编解码
import logging

from pyasn1.codec.der import encoder
from pyasn1.error import PyAsn1Error
from pyasn1.type import univ

from . import sm2_asn1 as asn1
from .curve import sm2p256v1, CurveFp
from .errors import DecodeError, InvalidEncodingError
from .point import decode_point, encode_point
from .sm2 import SM2PublicKey

logger = logging.getLogger(__name__)


def marshal_public_key(key: SM2PublicKey) -> bytes:
    logger.debug("Marshalling %s public key", key.curve.name)
    public_key = asn1.SubjectPublicKeyInfo()
    public_key['algorithm'] = asn1.sm2_algorithm
    public_key['publicKey'] = univ.BitString(hexValue=encode_point(key.curve, key.x, key.y).hex())
    return encoder.encode(public_key)


def parse_public_key(der: bytes, curve: CurveFp = sm2p256v1) -> SM2PublicKey:
    """
    由DER解析公钥, 校验点在曲线上
    :param der: SubjectPublicKeyInfo的DER编码
    :param curve: 曲线
    :return: 公钥对象
    """
    try:
        public_key, rest = asn1.decode(der, asn1.SubjectPublicKeyInfo())
    except PyAsn1Error as exc:
        raise DecodeError('failed to parse public key: %s' % exc) from exc
    if rest:
        raise DecodeError('trailing data after public key')
    asn1.check_sm2_algorithm(public_key['algorithm'])

    bits = public_key['publicKey']
    if len(bits) % 8:
        raise InvalidEncodingError('public key bit string is not octet aligned')
    x, y = decode_point(curve, bits.asOctets(), check=True)
    return SM2PublicKey(x, y, curve=curve)
