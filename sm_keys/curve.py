#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# @FileName     :   curve.py
# @Function     :   SM2曲线及点运算, 仅供编解码时由私钥重新计算公钥
from typing import Optional, Tuple


class CurvePoint:
    """仿射坐标点"""

    def __init__(self, x: int, y: int, curve: "CurveFp"):
        self.x = x
        self.y = y
        self.curve = curve

    def __repr__(self):
        return '<CurvePoint(%d, %d)>' % (self.x, self.y)

    def __eq__(self, other):
        if not isinstance(other, CurvePoint):
            return NotImplemented
        return self.curve.name == other.curve.name and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.curve.name, self.x, self.y))

    def hex(self) -> str:
        size = self.curve.byte_size * 2
        return '%0*x%0*x' % (size, self.x, size, self.y)

    def values(self) -> Tuple[int, int]:
        return self.x, self.y

    def double(self) -> "CurvePoint":
        return self.to_jacobian_point().double().to_curve_point()

    def add(self, other: "CurvePoint") -> "CurvePoint":
        return self.to_jacobian_point().add(other.to_jacobian_point()).to_curve_point()

    def scalar_mult(self, k: int) -> "CurvePoint":
        # kP运算
        return self.to_jacobian_point().scalar_mult(k).to_curve_point()

    def to_jacobian_point(self) -> "JacobianPoint":
        return JacobianPoint(self.x, self.y, 1, curve=self.curve)


class JacobianPoint:
    """
    Jacobian加重射影坐标 (X, Y, Z) 对应仿射坐标 (X/Z^2, Y/Z^3)
    Z == 0 表示无穷远点
    """

    def __init__(self, x: int, y: int, z: int, curve: "CurveFp"):
        self.x = x
        self.y = y
        self.z = z
        self.curve = curve
        self.p = curve.p

    @classmethod
    def infinity(cls, curve: "CurveFp") -> "JacobianPoint":
        return cls(1, 1, 0, curve=curve)

    def is_infinity(self) -> bool:
        return self.z % self.p == 0

    def double(self) -> "JacobianPoint":
        p = self.p
        if self.is_infinity() or self.y % p == 0:
            return JacobianPoint.infinity(self.curve)
        yy = self.y * self.y % p
        zz = self.z * self.z % p
        s = 4 * self.x * yy % p
        m = (3 * self.x * self.x + self.curve.a * zz * zz) % p
        x3 = (m * m - 2 * s) % p
        y3 = (m * (s - x3) - 8 * yy * yy) % p
        z3 = 2 * self.y * self.z % p
        return JacobianPoint(x3, y3, z3, curve=self.curve)

    def add(self, other: "JacobianPoint") -> "JacobianPoint":
        if self.is_infinity():
            return other
        if other.is_infinity():
            return self
        p = self.p
        z1z1 = self.z * self.z % p
        z2z2 = other.z * other.z % p
        u1 = self.x * z2z2 % p
        u2 = other.x * z1z1 % p
        s1 = self.y * other.z * z2z2 % p
        s2 = other.y * self.z * z1z1 % p
        if u1 == u2:
            if s1 != s2:
                return JacobianPoint.infinity(self.curve)
            return self.double()
        h = (u2 - u1) % p
        r = (s2 - s1) % p
        hh = h * h % p
        hhh = h * hh % p
        v = u1 * hh % p
        x3 = (r * r - hhh - 2 * v) % p
        y3 = (r * (v - x3) - s1 * hhh) % p
        z3 = self.z * other.z * h % p
        return JacobianPoint(x3, y3, z3, curve=self.curve)

    def scalar_mult(self, k: int) -> "JacobianPoint":
        # 从高位到低位的倍点-点加
        if k < 0:
            raise ValueError('scalar must not be negative')
        result = JacobianPoint.infinity(self.curve)
        for bit in bin(k)[2:]:
            result = result.double()
            if bit == '1':
                result = result.add(self)
        return result

    def to_curve_point(self) -> CurvePoint:
        if self.is_infinity():
            raise ValueError('point at infinity has no affine coordinates')
        z_inv = pow(self.z, self.p - 2, self.p)
        z_inv2 = z_inv * z_inv % self.p
        x = self.x * z_inv2 % self.p
        y = self.y * z_inv2 * z_inv % self.p
        return CurvePoint(x, y, curve=self.curve)


class CurveFp:
    """Fp有限域曲线 方程 y^2 = x^3 + ax + b"""
    name: str
    key_size: int
    a: int
    b: int
    p: int
    n: int  # 基点的阶
    gx: int
    gy: int

    @property
    def byte_size(self) -> int:
        """私钥及坐标的定长字节数 ceil(bitlen(n) / 8)"""
        return (self.n.bit_length() + 7) // 8

    def base_point(self) -> CurvePoint:
        return CurvePoint(self.gx, self.gy, curve=self)

    def scalar_mult(self, x: int, y: int, k: int) -> CurvePoint:
        return CurvePoint(x, y, curve=self).scalar_mult(k)

    def scalar_base_mult(self, k: int) -> CurvePoint:
        return self.base_point().scalar_mult(k)

    def is_on_curve(self, x: Optional[int], y: Optional[int]) -> bool:
        """
        点(x, y)是否在曲线上, y^2 - (x^3 + ax + b) 应为p的倍数
        :param x: x坐标
        :param y: y坐标
        :return: 在曲线上返回True, 否则返回False
        """
        if x is None or y is None:
            return False
        if not (0 <= x < self.p and 0 <= y < self.p):
            return False
        return (y * y - x * x * x - self.a * x - self.b) % self.p == 0


class SM2P256Curve(CurveFp):
    name = 'sm2p256v1'
    key_size = 256
    a = 115792089210356248756420345214020892766250353991924191454421193933289684991996
    b = 18505919022281880113072981827955639221458448578012075254857346196103069175443
    p = 115792089210356248756420345214020892766250353991924191454421193933289684991999
    n = 115792089210356248756420345214020892766061623724957744567843809356293439045923
    gx = 22963146547237050559479531362550074578802567295341616970375194840604139615431
    gy = 85132369209828568825618990617112496413088388631904505083283536607588877201568


sm2p256v1 = SM2P256Curve()
