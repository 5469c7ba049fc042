"""
PKCS#8 / SubjectPublicKeyInfo / PBES2 的ASN.1结构定义

PrivateKeyInfo ::= SEQUENCE {
    version                 INTEGER (0),
    privateKeyAlgorithm     AlgorithmIdentifier,
    privateKey              OCTET STRING (CONTAINING ECPrivateKey)
}

ECPrivateKey ::= SEQUENCE {
    version         INTEGER (1),
    privateKey      OCTET STRING,
    parameters      [0] EXPLICIT OBJECT IDENTIFIER OPTIONAL,
    publicKey       [1] EXPLICIT BIT STRING OPTIONAL
}

EncryptedPrivateKeyInfo ::= SEQUENCE {
    encryptionAlgorithm     PBES2Algorithm,
    encryptedData           OCTET STRING
}
"""
from pyasn1.codec.der import decoder, encoder
from pyasn1.error import PyAsn1Error
from pyasn1.type import namedtype, tag, univ

from .errors import UnsupportedAlgorithmError

EC_PUBLIC_KEY_OID = univ.ObjectIdentifier('1.2.840.10045.2.1')
SM2_OID = univ.ObjectIdentifier('1.2.156.10197.1.301')
PBKDF2_OID = univ.ObjectIdentifier('1.2.840.113549.1.5.12')
PBES2_OID = univ.ObjectIdentifier('1.2.840.113549.1.5.13')
AES256_CBC_OID = univ.ObjectIdentifier('2.16.840.1.101.3.4.1.42')
HMAC_SHA256_OID = univ.ObjectIdentifier('1.2.840.113549.2.9')

PARAMETERS_TAG = tag.Tag(tag.tagClassContext, tag.tagFormatSimple, 0)
PUBLIC_KEY_TAG = tag.Tag(tag.tagClassContext, tag.tagFormatSimple, 1)


def same_oid(a: univ.ObjectIdentifier, b: univ.ObjectIdentifier) -> bool:
    return tuple(a) == tuple(b)


class AlgorithmIdentifier(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('algorithm', univ.ObjectIdentifier()),
        namedtype.OptionalNamedType('parameters', univ.Any())
    )


class SubjectPublicKeyInfo(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('algorithm', AlgorithmIdentifier()),
        namedtype.NamedType('publicKey', univ.BitString())
    )


class ECPrivateKey(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('version', univ.Integer()),
        namedtype.NamedType('privateKey', univ.OctetString()),
        namedtype.OptionalNamedType('parameters', univ.ObjectIdentifier().subtype(explicitTag=PARAMETERS_TAG)),
        namedtype.OptionalNamedType('publicKey', univ.BitString().subtype(explicitTag=PUBLIC_KEY_TAG)),
    )


# pkcs8
class PrivateKeyInfo(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('version', univ.Integer()),
        namedtype.NamedType('privateKeyAlgorithm', AlgorithmIdentifier()),
        namedtype.NamedType('privateKey', univ.OctetString()),
    )


# pkcs5 v2.0
class PBKDF2Params(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('salt', univ.OctetString()),
        namedtype.NamedType('iterationCount', univ.Integer()),
        namedtype.OptionalNamedType('keyLength', univ.Integer()),
        namedtype.OptionalNamedType('prf', AlgorithmIdentifier()),
    )


class PBKDF2Algorithm(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('algorithm', univ.ObjectIdentifier()),
        namedtype.NamedType('parameters', PBKDF2Params()),
    )


class EncryptionScheme(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('algorithm', univ.ObjectIdentifier()),
        namedtype.NamedType('iv', univ.OctetString()),
    )


class PBES2Params(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('keyDerivationFunc', PBKDF2Algorithm()),
        namedtype.NamedType('encryptionScheme', EncryptionScheme()),
    )


class PBES2Algorithm(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('algorithm', univ.ObjectIdentifier()),
        namedtype.NamedType('parameters', PBES2Params()),
    )


class EncryptedPrivateKeyInfo(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('encryptionAlgorithm', PBES2Algorithm()),
        namedtype.NamedType('encryptedData', univ.OctetString()),
    )


# AlgorithmIdentifier { id-ecPublicKey, sm2p256v1 }, 公私钥共用
sm2_algorithm = AlgorithmIdentifier()
sm2_algorithm['algorithm'] = EC_PUBLIC_KEY_OID
sm2_algorithm['parameters'] = encoder.encode(SM2_OID)


def decode_oid(data: bytes) -> univ.ObjectIdentifier:
    """解码AlgorithmIdentifier中以ANY保存的OID参数"""
    oid, rest = decoder.decode(data, asn1Spec=univ.ObjectIdentifier())
    if rest:
        raise ValueError('trailing data after object identifier')
    return oid


def check_sm2_algorithm(algorithm: AlgorithmIdentifier) -> None:
    """校验 AlgorithmIdentifier 为 {id-ecPublicKey, sm2p256v1}, 曲线参数可缺省"""
    if not same_oid(algorithm['algorithm'], EC_PUBLIC_KEY_OID):
        raise UnsupportedAlgorithmError('not an elliptic curve key: %s' % algorithm['algorithm'])
    if algorithm['parameters'].isValue:
        try:
            named_curve = decode_oid(algorithm['parameters'].asOctets())
        except (PyAsn1Error, ValueError) as exc:
            raise UnsupportedAlgorithmError('curve parameters are not a named curve') from exc
        if not same_oid(named_curve, SM2_OID):
            raise UnsupportedAlgorithmError('not an SM2 curve: %s' % named_curve)


def decode(der: bytes, asn1_spec):
    """按结构解码, 返回 (对象, 剩余字节)"""
    if not der:
        raise PyAsn1Error('empty DER input')
    value, rest = decoder.decode(der, asn1Spec=asn1_spec)
    if not value.isValue:
        raise PyAsn1Error('%s has missing components' % asn1_spec.__class__.__name__)
    return value, rest
