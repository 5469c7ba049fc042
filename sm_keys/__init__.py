"""SM2密钥 PKCS#8 / SubjectPublicKeyInfo 编解码"""
import logging

from .curve import sm2p256v1
from .errors import (SMKeyError, DecodeError, PemError, UnsupportedAlgorithmError, InvalidScalarError,
                     InvalidEncodingError, IncorrectPasswordError, DecryptionError)
from .pem import (dump_private_key, load_private_key, dump_public_key, load_public_key,
                  dump_private_key_file, load_private_key_file, dump_public_key_file, load_public_key_file)
from .pkcs8 import marshal_private_key, parse_private_key
from .sm2 import SM2PrivateKey, SM2PublicKey
from .spki import marshal_public_key, parse_public_key

__version__ = '0.1.0'
__author__ = 'sm-keys developers'

logging.getLogger(__name__).addHandler(logging.NullHandler())
