import pytest

from sm_keys.curve import sm2p256v1
from sm_keys.errors import InvalidEncodingError
from sm_keys.point import decode_point, encode_point


@pytest.fixture()
def curve():
    return sm2p256v1


class TestEncodePoint:
    def test_base_point(self, curve):
        data = encode_point(curve, curve.gx, curve.gy)
        assert data[0] == 0x04
        assert data[1:].hex() == curve.base_point().hex()

    @pytest.mark.parametrize('x, y', [(1, 2), (0, 0), (2 ** 255, 1), (2 ** 256 - 1, 2 ** 256 - 1)])
    def test_fixed_length(self, curve, x, y):
        """输出长度固定为 1 + 2 * 32, 与前导0无关"""
        assert len(encode_point(curve, x, y)) == 1 + 2 * curve.byte_size

    def test_leading_zero_padding(self, curve):
        data = encode_point(curve, 1, 2)
        assert data == b'\x04' + b'\x00' * 31 + b'\x01' + b'\x00' * 31 + b'\x02'

    def test_coordinate_too_large(self, curve):
        with pytest.raises(InvalidEncodingError):
            encode_point(curve, 2 ** 256, 1)

    def test_negative_coordinate(self, curve):
        with pytest.raises(InvalidEncodingError):
            encode_point(curve, -1, 1)


class TestDecodePoint:
    def test_decode(self, curve):
        data = encode_point(curve, curve.gx, curve.gy)
        assert decode_point(curve, data, check=True) == (curve.gx, curve.gy)

    def test_wrong_tag(self, curve):
        data = b'\x02' + encode_point(curve, curve.gx, curve.gy)[1:]
        with pytest.raises(InvalidEncodingError):
            decode_point(curve, data)

    @pytest.mark.parametrize('length', [0, 1, 33, 64, 66])
    def test_wrong_length(self, curve, length):
        with pytest.raises(InvalidEncodingError):
            decode_point(curve, b'\x04' * length)

    def test_not_on_curve(self, curve):
        data = encode_point(curve, curve.gx, curve.gy + 1)
        assert decode_point(curve, data) == (curve.gx, curve.gy + 1)
        with pytest.raises(InvalidEncodingError):
            decode_point(curve, data, check=True)
