#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# @FileName     :   sm2.py
# @Function     :   SM2密钥对象
"""
私钥为 [1, n-1] 范围内的整数 d
公钥为曲线上的点 P = [d]G = (x, y)
"""
from .curve import sm2p256v1, CurveFp, CurvePoint


class SM2PrivateKey:
    """私钥"""

    def __init__(self, d: int, curve: CurveFp = sm2p256v1):
        """
        :param d: 私钥值
        :param curve: 曲线, 默认为sm2p256v1
        """
        self.d = d
        self.curve = curve
        self._public_key = None

    def __repr__(self):
        return '<SM2PrivateKey curve="%s">' % self.curve.name

    def __eq__(self, other):
        if not isinstance(other, SM2PrivateKey):
            return NotImplemented
        return self.curve.name == other.curve.name and self.d == other.d

    def __hash__(self):
        return hash((self.curve.name, self.d))

    def public_key(self) -> "SM2PublicKey":
        """
        公钥, 由 [d]G 计算并缓存
        :return: 公钥对象
        """
        if self._public_key is None:
            point = self.curve.scalar_base_mult(self.d)
            self._public_key = SM2PublicKey(x=point.x, y=point.y, curve=self.curve)
        return self._public_key

    @property
    def x(self) -> int:
        return self.public_key().x

    @property
    def y(self) -> int:
        return self.public_key().y


class SM2PublicKey(CurvePoint):
    """
    公钥 公钥是在椭圆曲线上的一个点，由一对坐标（x，y）组成
    公钥字符串可由 x || y 即 x 拼接 y代表
    """

    def __init__(self, x: int, y: int, curve: CurveFp = sm2p256v1):
        super().__init__(x, y, curve)

    def __repr__(self):
        return '<SM2PublicKey x="%s" y="%s">' % (self.x, self.y)

    @classmethod
    def from_hex(cls, value: str, curve: CurveFp = sm2p256v1) -> "SM2PublicKey":
        size = curve.byte_size * 2
        if len(value) != 2 * size:
            raise ValueError('public key hex must be %d characters, got %d' % (2 * size, len(value)))
        x, y = int(value[:size], 16), int(value[size:], 16)
        return cls(x=x, y=y, curve=curve)
