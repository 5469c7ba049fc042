#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import pytest

from sm_keys import sm2
from sm_keys.curve import sm2p256v1


@pytest.fixture
def public_key():
    """SM2公钥"""
    pub_x = 86486910365053747502063228060823248590345160013865894637560355242509364288962
    pub_y = 101181106946091265431204246512408544766318122779614061831337312322228957210561
    return sm2.SM2PublicKey(pub_x, pub_y)


@pytest.fixture()
def private_key():
    d = 72365085398694144586688860843300263721740873715599498623547807927292312544749
    return sm2.SM2PrivateKey(d)


class TestSM2PrivateKey:
    def test_public_key(self, private_key, public_key):  # ✅
        assert private_key.public_key() == public_key
        assert (private_key.x, private_key.y) == public_key.values()

    def test_public_key_cached(self, private_key):
        assert private_key.public_key() is private_key.public_key()

    def test_equality(self, private_key):
        assert private_key == sm2.SM2PrivateKey(private_key.d)
        assert private_key != sm2.SM2PrivateKey(private_key.d + 1)
        assert hash(private_key) == hash(sm2.SM2PrivateKey(private_key.d))

    def test_repr_hides_d(self, private_key):
        assert str(private_key.d) not in repr(private_key)


class TestSM2PublicKey:
    def test_on_curve(self, public_key):
        assert sm2p256v1.is_on_curve(public_key.x, public_key.y)

    def test_from_hex(self, public_key):
        assert sm2.SM2PublicKey.from_hex(public_key.hex()) == public_key

    def test_from_hex_wrong_length(self, public_key):
        with pytest.raises(ValueError):
            sm2.SM2PublicKey.from_hex(public_key.hex()[2:])
