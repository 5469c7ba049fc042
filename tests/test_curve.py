import pytest

from sm_keys.curve import CurvePoint, JacobianPoint, sm2p256v1


@pytest.fixture()
def curve():
    return sm2p256v1


@pytest.fixture()
def g(curve):
    return curve.base_point()


class TestCurvePoint:
    def test_add(self, g):
        assert g.add(g) == g.double()
        assert g.scalar_mult(3) == g.double().add(g)

    def test_double(self, g, curve):
        point = g.double()
        assert curve.is_on_curve(point.x, point.y)
        assert g.scalar_mult(2) == point

    def test_scalar_mult(self, g, curve):
        k = 17862946205452999060962975573530209623112644258847452921350520798185987396203
        point = g.scalar_mult(k)
        assert curve.is_on_curve(point.x, point.y)

        assert point.x == int('460333f094dcda438a35cb64ced03d04cc3694b598edb055056ce93c2149c0a8', 16)
        assert point.y == int('255130b63b4b096c29c4db80148d27a1c3944a466d14b8f8f9aac68d35a2d1fb', 16)

    def test_scalar_mult_one(self, g):
        assert g.scalar_mult(1) == g

    def test_scalar_mult_order_minus_one(self, g, curve):
        """(n-1)G = -G"""
        point = g.scalar_mult(curve.n - 1)
        assert point == CurvePoint(curve.gx, curve.p - curve.gy, curve=curve)

    def test_scalar_mult_order(self, g, curve):
        """nG 为无穷远点"""
        with pytest.raises(ValueError):
            g.scalar_mult(curve.n)

    def test_add_inverse(self, g, curve):
        neg = CurvePoint(curve.gx, curve.p - curve.gy, curve=curve)
        result = g.to_jacobian_point().add(neg.to_jacobian_point())
        assert result.is_infinity()

    def test_jacobian_infinity_is_identity(self, g, curve):
        infinity = JacobianPoint.infinity(curve)
        assert infinity.add(g.to_jacobian_point()).to_curve_point() == g
        assert infinity.double().is_infinity()

    def test_hex(self, g):
        assert g.hex() == ('32c4ae2c1f1981195f9904466a39c9948fe30bbff2660be1715a4589334c74c7'
                           'bc3736a2f4f6779c59bdcee36b692153d0a9877cc62a474002df32e52139f0a0')


class TestCurve:
    def test_is_on_curve(self, curve):
        assert curve.is_on_curve(curve.gx, curve.gy)

    def test_not_on_curve(self, curve):
        assert not curve.is_on_curve(curve.gx, curve.gy + 1)
        assert not curve.is_on_curve(curve.gx + curve.p, curve.gy)
        assert not curve.is_on_curve(None, None)

    def test_byte_size(self, curve):
        assert curve.byte_size == 32

    def test_scalar_base_mult(self, curve):
        assert curve.scalar_base_mult(1) == curve.base_point()
        assert curve.scalar_base_mult(2) == curve.scalar_mult(curve.gx, curve.gy, 2)
