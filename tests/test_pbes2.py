import pytest

from sm_keys import pbes2
from sm_keys.errors import DecryptionError
from sm_keys.utils import unpad


class TestPBES2:
    def test_encrypt_params(self):
        result = pbes2.encrypt(b'a' * 20, 'test')
        assert len(result.salt) == 8
        assert len(result.iv) == 16
        assert result.iterations == 2048
        assert len(result.ciphertext) == 32

    def test_aligned_plaintext_gets_full_padding_block(self):
        result = pbes2.encrypt(b'a' * 32, 'test')
        assert len(result.ciphertext) == 48

    def test_decrypt_keeps_padding(self):
        plaintext = b'0123456789'
        result = pbes2.encrypt(plaintext, b'test')
        decrypted = pbes2.decrypt(result.ciphertext, b'test', result.salt, result.iv, result.iterations)
        assert decrypted == plaintext + b'\x06' * 6
        assert unpad(decrypted) == plaintext

    def test_str_and_bytes_password(self):
        result = pbes2.encrypt(b'data', '口令')
        decrypted = pbes2.decrypt(result.ciphertext, '口令'.encode('utf-8'), result.salt, result.iv,
                                  result.iterations)
        assert unpad(decrypted) == b'data'

    def test_fresh_salt_and_iv(self):
        result1 = pbes2.encrypt(b'data', 'test')
        result2 = pbes2.encrypt(b'data', 'test')
        assert result1.salt != result2.salt
        assert result1.iv != result2.iv
        assert result1.ciphertext != result2.ciphertext

    def test_custom_iterations(self):
        result = pbes2.encrypt(b'data', 'test', iterations=10)
        assert result.iterations == 10
        decrypted = pbes2.decrypt(result.ciphertext, 'test', result.salt, result.iv, 10)
        assert unpad(decrypted) == b'data'

    def test_wrong_password_does_not_raise(self):
        """口令错误只能由后续的结构解析发现"""
        result = pbes2.encrypt(b'data', 'pwd1')
        decrypted = pbes2.decrypt(result.ciphertext, 'pwd2', result.salt, result.iv, result.iterations)
        assert len(decrypted) == 16

    @pytest.mark.parametrize('length', [0, 15, 17])
    def test_bad_ciphertext_length(self, length):
        with pytest.raises(DecryptionError):
            pbes2.decrypt(b'\x00' * length, 'test', b'\x00' * 8, b'\x00' * 16, 2048)

    def test_bad_iv_length(self):
        with pytest.raises(DecryptionError):
            pbes2.decrypt(b'\x00' * 16, 'test', b'\x00' * 8, b'\x00' * 8, 2048)

    def test_bad_iterations(self):
        with pytest.raises(DecryptionError):
            pbes2.decrypt(b'\x00' * 16, 'test', b'\x00' * 8, b'\x00' * 16, 0)

    def test_iterations_over_limit(self):
        with pytest.raises(DecryptionError):
            pbes2.decrypt(b'\x00' * 16, 'test', b'\x00' * 8, b'\x00' * 16, pbes2.MAX_ITERATIONS + 1)
