#!/usr/bin/env python3

# Copyright (C) The elliptica developers
#
# This file is part of elliptica. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elliptica including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `elliptica.curve` module."

import secrets
from typing import Dict

import pytest

from elliptica.curve import CURVES, Curve, CurveParams, double_mult, mult, secp256k1
from elliptica.curve_group import CurveGroup, mult_aff
from elliptica.exceptions import EllipticaTypeError, EllipticaValueError
from elliptica.point import INF, Point

# test curves: very low cardinality
low_card_curves: Dict[str, Curve] = {}
# 13 % 4 = 1; 13 % 8 = 5
low_card_curves["ec13_11"] = Curve(13, 7, 6, (1, 1), 11, 1, False)
low_card_curves["ec13_19"] = Curve(13, 0, 2, (1, 9), 19, 1, False)
# 17 % 4 = 1; 17 % 8 = 1
low_card_curves["ec17_13"] = Curve(17, 6, 8, (0, 12), 13, 2, False)
low_card_curves["ec17_23"] = Curve(17, 3, 5, (1, 14), 23, 1, False)
# 19 % 4 = 3; 19 % 8 = 3
low_card_curves["ec19_13"] = Curve(19, 0, 2, (4, 16), 13, 2, False)
low_card_curves["ec19_23"] = Curve(19, 2, 9, (0, 16), 23, 1, False)
# 23 % 4 = 3; 23 % 8 = 7
low_card_curves["ec23_19"] = Curve(23, 9, 7, (5, 4), 19, 1, False)
low_card_curves["ec23_31"] = Curve(23, 5, 1, (0, 1), 31, 1, False)

all_curves: Dict[str, Curve] = {}
all_curves.update(low_card_curves)
all_curves.update(CURVES)

ec23_31 = low_card_curves["ec23_31"]

# secp256k1 domain parameters, as decimal literals
SECP256K1_P = (
    115792089237316195423570985008687907853269984665640564039457584007908834671663
)
SECP256K1_GX = (
    55066263022277343669578718895168534326250603453777594175500187360389116729240
)
SECP256K1_GY = (
    32670510020758816978083085130507043184471273380659243275938904335757337482424
)
SECP256K1_N = (
    115792089237316195423570985008687907852837564279074904382605163141518161494337
)


def test_exceptions() -> None:

    # good curve
    Curve(13, 0, 2, (1, 9), 19, 1, False)

    with pytest.raises(EllipticaValueError, match="p is not prime: "):
        Curve(15, 0, 2, (1, 9), 19, 1, False)

    with pytest.raises(EllipticaValueError, match="negative a: "):
        Curve(13, -1, 2, (1, 9), 19, 1, False)

    with pytest.raises(EllipticaValueError, match="p <= a: "):
        Curve(13, 13, 2, (1, 9), 19, 1, False)

    with pytest.raises(EllipticaValueError, match="negative b: "):
        Curve(13, 0, -2, (1, 9), 19, 1, False)

    with pytest.raises(EllipticaValueError, match="p <= b: "):
        Curve(13, 0, 13, (1, 9), 19, 1, False)

    with pytest.raises(EllipticaValueError, match="zero discriminant"):
        Curve(11, 7, 7, (1, 9), 19, 1, False)

    err_msg = "Generator must a be a sequence\\[int, int\\]"
    with pytest.raises(EllipticaValueError, match=err_msg):
        Curve(13, 0, 2, (1, 9, 1), 19, 1, False)  # type: ignore

    with pytest.raises(EllipticaValueError, match="Generator is not on the curve"):
        Curve(13, 0, 2, (2, 9), 19, 1, False)

    with pytest.raises(EllipticaValueError, match="n is not prime: "):
        Curve(13, 0, 2, (1, 9), 20, 1, False)

    with pytest.raises(EllipticaValueError, match="n not in "):
        Curve(13, 0, 2, (1, 9), 71, 1, False)

    with pytest.raises(EllipticaValueError, match="INF point cannot be a generator"):
        Curve(13, 0, 2, INF, 19, 1, False)

    with pytest.raises(EllipticaValueError, match="n is not the group order: "):
        Curve(13, 0, 2, (1, 9), 17, 1, False)

    with pytest.raises(EllipticaValueError, match="invalid cofactor: "):
        Curve(13, 0, 2, (1, 9), 19, 2, False)

    with pytest.raises(UserWarning, match="weak curve"):
        Curve(11, 2, 7, (6, 9), 7, 2, True)


def test_cofactor_default() -> None:
    ec = Curve(13, 0, 2, (1, 9), 19, weakness_check=False)
    assert ec.h == 1
    ec = Curve(17, 6, 8, (0, 12), 13, weakness_check=False)
    assert ec.h == 2


def test_generator_as_point() -> None:
    ec = Curve(13, 0, 2, Point(1, 9), 19, 1, False)
    assert ec.G == Point(1, 9)
    # hex-string and bytes integer representations
    ec = Curve("0x0d", "00", b"\x02", ("01", "0x09"), "0x13", 1, False)
    assert ec.p == 13
    assert ec.G == Point(1, 9)
    assert ec.n == 19


def test_secp256k1() -> None:
    assert secp256k1 is CURVES["secp256k1"]
    assert secp256k1.a == 0
    assert secp256k1.b == 7
    assert secp256k1.p == SECP256K1_P
    assert secp256k1.G == Point(SECP256K1_GX, SECP256K1_GY)
    assert secp256k1.n == SECP256K1_N
    assert secp256k1.h == 1
    assert secp256k1.p_size == 32
    assert secp256k1.nlen == 256
    assert secp256k1.n_size == 32
    assert secp256k1.p_is_3_mod_4

    # the same values as usually given in hex
    assert secp256k1.p == 2 ** 256 - 2 ** 32 - 977
    assert secp256k1.G.x == int(
        "79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798", 16
    )
    assert secp256k1.G.y == int(
        "483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8", 16
    )
    assert secp256k1.n == int(
        "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141", 16
    )


def test_curve_params() -> None:
    assert sorted(CURVES) == ["secp256k1", "secp256r1", "secp384r1"]

    params = CurveParams.from_dict(
        {"p": "13", "a": "0x0", "b": "2", "x_G": "1", "y_G": "9", "n": "19"}
    )
    assert params.p == 13
    assert params.h == 1
    ec = Curve(params.p, params.a, params.b, (params.x_G, params.y_G), params.n)
    assert ec.G == Point(1, 9)

    d = params.to_dict(encode_json=True)
    assert d["p"] == "13"
    assert CurveParams.from_dict(d) == params

    with pytest.raises(UserWarning, match="weak curve"):
        CurveParams.from_dict(
            {"p": "11", "a": "2", "b": "7", "x_G": "6", "y_G": "9", "n": "7", "h": 2}
        ).curve()


def test_ec_repr() -> None:
    for ec in all_curves.values():
        ec_repr = repr(ec)
        if ec in low_card_curves.values():
            ec_repr = ec_repr[:-1] + ", False)"
        ec2 = eval(ec_repr)  # pylint: disable=eval-used # nosec
        assert str(ec) == str(ec2)

    assert repr(CurveGroup(13, 0, 2)) == "CurveGroup(13, 0, 2)"


def test_ec_str() -> None:
    ec = low_card_curves["ec13_19"]
    assert str(ec) == "Curve\n p   = 13\n a   = 0\n b   = 2" + (
        "\n x_G = 1\n y_G = 9\n n   = 19\n h   = 1"
    )
    assert "\n p   = 'FFFFFFFF FFFFFFFF" in str(secp256k1)


def test_add_double() -> None:
    "Test self-consistency of add and double."
    for ec in all_curves.values():

        # add G and the infinity point
        assert ec.add(ec.G, INF) == ec.G
        assert ec.add(INF, ec.G) == ec.G

        # double G
        G2 = ec.add(ec.G, ec.G)
        assert G2 == ec.double(ec.G)
        assert ec.is_on_curve(G2)

        # double INF
        assert ec.add(INF, INF) == INF
        assert ec.double(INF) == INF

        # add G and minus G
        assert ec.add(ec.G, ec.negate(ec.G)) == INF
        assert ec.add(ec.G, Point(ec.G.x, ec.p - ec.G.y)) == INF

        # add INF and "minus" INF
        assert ec.add(INF, ec.negate(INF)) == INF


def test_add_double_require_on_curve() -> None:
    ec = secp256k1
    off_curve = Point(ec.G.x, ec.G.y + 1)
    with pytest.raises(EllipticaValueError, match="point not on curve"):
        ec.add(ec.G, off_curve)
    with pytest.raises(EllipticaValueError, match="point not on curve"):
        ec.add(off_curve, ec.G)
    with pytest.raises(EllipticaValueError, match="point not on curve"):
        ec.double(off_curve)
    with pytest.raises(EllipticaTypeError, match="not a point"):
        ec.add(ec.G, (ec.G.x, ec.G.y))  # type: ignore


def test_is_on_curve() -> None:
    for ec in all_curves.values():

        assert ec.is_on_curve(INF)
        assert ec.is_on_curve(ec.G)

        with pytest.raises(EllipticaTypeError, match="not a point"):
            ec.is_on_curve("not a point")  # type: ignore

        with pytest.raises(EllipticaValueError, match="x-coordinate not in 0..p-1: "):
            ec.y(ec.p)

        # just a random point, not INF
        q = 1 + secrets.randbelow(ec.n - 1)
        Q = mult(q, ec.G, ec)
        assert ec.is_on_curve(Q)
        # coordinates not reduced mod p
        assert not ec.is_on_curve(Point(Q.x, Q.y + ec.p))
        assert not ec.is_on_curve(Point(Q.x + ec.p, Q.y))


def test_negate() -> None:
    for ec in all_curves.values():

        # just a random point, not INF
        q = 1 + secrets.randbelow(ec.n - 1)
        Q = mult(q, ec.G, ec)
        minus_Q = ec.negate(Q)
        assert ec.add(Q, minus_Q) == INF
        assert ec.negate(minus_Q) == Q

        # negate of INF is INF
        assert ec.negate(INF) == INF

        with pytest.raises(EllipticaTypeError, match="not a point"):
            ec.negate((Q.x, Q.y))  # type: ignore


def test_symmetry() -> None:
    "Methods to break simmetry: even/odd, low/high."
    for ec in all_curves.values():

        # just a random point, not INF
        q = 1 + secrets.randbelow(ec.n - 1)
        Q = mult(q, ec.G, ec)

        y_even = ec.y_even(Q.x)
        assert not y_even % 2
        assert Q.y in (y_even, ec.p - y_even)
        y_low = ec.y_low(Q.x)
        assert y_low <= ec.p // 2
        assert Q.y in (y_low, ec.p - y_low)

    # x^3 + 2 = 2 is not a quadratic residue mod 13
    ec = low_card_curves["ec13_19"]
    with pytest.raises(EllipticaValueError, match="invalid x-coordinate: "):
        ec.y(0)
    with pytest.raises(EllipticaValueError):
        ec.y_even(0)
    with pytest.raises(EllipticaValueError):
        ec.y_low(0)


def test_mult() -> None:
    for ec in all_curves.values():
        assert mult(0, ec.G, ec) == INF
        assert mult(0, INF, ec) == INF
        assert mult(1, INF, ec) == INF
        assert mult(1, ec.G, ec) == ec.G
        assert mult(1, ec=ec) == ec.G
        assert mult(2, ec.G, ec) == ec.double(ec.G)

        Q = mult(ec.n - 1, ec.G, ec)
        assert ec.negate(ec.G) == Q
        assert ec.add(Q, ec.G) == INF
        assert mult(ec.n, ec.G, ec) == INF
        assert mult(ec.n, INF, ec) == INF
        # no reduction mod n
        assert mult(ec.n + 1, ec.G, ec) == ec.G

        with pytest.raises(EllipticaValueError, match="negative m: "):
            mult(-1, ec.G, ec)

        off_curve = Point(ec.G.x, (ec.G.y + 1) % ec.p)
        with pytest.raises(EllipticaValueError, match="point not on curve"):
            mult(1, off_curve, ec)

    # hex-string scalar
    assert mult("0x02") == secp256k1.double(secp256k1.G)


def test_mult_secp256k1_test_vectors() -> None:
    ec = secp256k1
    vectors = {
        2: (
            "C6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5",
            "1AE168FEA63DC339A3C58419466CEAEEF7F632653266D0E1236431A950CFE52A",
        ),
        3: (
            "F9308A019258C31049344F85F89D5229B531C845836F99B08601F113BCE036F9",
            "388F7B0F632DE8140FE337E62A37F3566500A99934C2231B6CB9FD7584B8E672",
        ),
        7: (
            "5CBDF0646E5DB4EAA398F365F2EA7A0E3D419B7E0330E39CE92BDDEDCAC4F9BC",
            "6AEBCA40BA255960A3178D6D861A54DBA813D0B813FDE7B5A5082628087264DA",
        ),
        8: (
            "2F01E5E15CCA351DAFF3843FB70F3C2F0A1BDD05E5AF888A67784EF3E10A2A01",
            "5C4DA8A741539949293D082A132D13B4C2E213D6BA5B7617B5DA2CB76CBDE904",
        ),
        255: (
            "1B38903A43F7F114ED4500B4EAC7083FDEFECE1CF29C63528D563446F972C180",
            "4036EDC931A60AE889353F77FD53DE4A2708B26B6F5DA72AD3394119DAF408F9",
        ),
        0xAA5E28D6A97A2479A65527F7290311A3624D4CC0FA1578598EE3C2613BF99522: (
            "34F9460F0E4F08393D192B3C5133A6BA099AA0AD9FD54EBCCFACDFA239FF49C6",
            "0B71EA9BD730FD8923F6D25A7A91E7DD7728A960686CB5A901BB419E0F2CA232",
        ),
        0x7E2B897B8CEBC6361663AD410835639826D590F393D90A9538881735256DFAE3: (
            "D74BF844B0862475103D96A611CF2D898447E288D34B360BC885CB8CE7C00575",
            "131C670D414C4546B88AC3FF664611B1C38CEB1C21D76369D7A7A0969D61D97D",
        ),
        0x6461E6DF0FE7DFD05329F41BF771B86578143D4DD1F7866FB4CA7E97C5FA945D: (
            "E8AECC370AEDD953483719A116711963CE201AC3EB21D3F3257BB48668C6A72F",
            "C25CAF2F0EBA1DDB2F0F3F47866299EF907867B7D27E95B3873BF98397B24EE1",
        ),
        0x376A3A2CDCD12581EFFF13EE4AD44C4044B8A0524C42422A7E1E181E4DEECCEC: (
            "14890E61FCD4B0BD92E5B36C81372CA6FED471EF3AA60A3E415EE4FE987DABA1",
            "297B858D9F752AB42D3BCA67EE0EB6DCD1C2B7B0DBE23397E66ADC272263F982",
        ),
        0x1B22644A7BE026548810C378D0B2994EEFA6D2B9881803CB02CEFF865287D1B9: (
            "F73C65EAD01C5126F28F442D087689BFA08E12763E0CEC1D35B01751FD735ED3",
            "F449A8376906482A84ED01479BD18882B919C140D638307F0C0934BA12590BDE",
        ),
    }
    for k, (x, y) in vectors.items():
        Q = Point(int(x, 16), int(y, 16))
        assert ec.is_on_curve(Q)
        assert mult(k, ec.G, ec) == Q
        # the opposite scalar gives the opposite point
        assert mult(ec.n - k, ec.G, ec) == ec.negate(Q)

    Q = Point(
        4051293998585674784991639592782214972820158391371785981004352359465450369227,
        88166831356626186178414913298033275054086243781277878360288998796587140930350,
    )
    assert ec.is_on_curve(Q)
    assert mult(123456789, ec.G, ec) == Q


def test_mult_against_libsecp256k1() -> None:
    coincurve = pytest.importorskip("coincurve")
    ec = secp256k1
    prv_keys = [
        1,
        2,
        123456789,
        ec.n - 1,
        0xAA5E28D6A97A2479A65527F7290311A3624D4CC0FA1578598EE3C2613BF99522,
    ]
    for q in prv_keys:
        x, y = coincurve.PrivateKey.from_int(q).public_key.point()
        assert mult(q, ec.G, ec) == Point(x, y)

    Q = mult(123456789, ec.G, ec)
    assert ec.is_on_curve(Q)
    assert not Q.inf
    assert mult_aff(123456789, ec.G, ec) == Q
    assert double_mult(123456789, ec.G, 0, ec.G, ec) == Q
    assert double_mult(123456788, ec.G, 1, ec.G, ec) == Q


def test_double_mult() -> None:
    H = mult(2, secp256k1.G)
    G = secp256k1.G

    # 0*G + 1*H
    T = double_mult(0, G, 1, H)
    assert T == H
    # 0*G + 2*H
    T = double_mult(0, G, 2, H)
    assert T == mult(4, G)
    # 1*G + 0*H
    T = double_mult(1, G, 0, H)
    assert T == G
    # 3*G + 2*H = 7*G
    T = double_mult(3, G, 2, H)
    assert T == mult(7, G)
    # 0*G + 0*H
    assert double_mult(0, G, 0, H) == INF

    ec = ec23_31
    for k1 in range(ec.n):
        for k2 in range(ec.n):
            shamir = double_mult(k1, ec.G, k2, ec.G, ec)
            assert shamir == mult(k1 + k2, ec.G, ec)

            shamir = double_mult(k1, INF, k2, ec.G, ec)
            assert shamir == mult(k2, ec.G, ec)

    with pytest.raises(EllipticaValueError, match="negative first coefficient: "):
        double_mult(-1, G, 1, H)
    with pytest.raises(EllipticaValueError, match="negative second coefficient: "):
        double_mult(1, G, -1, H)
    with pytest.raises(EllipticaValueError, match="point not on curve"):
        double_mult(1, Point(G.x, G.y + 1), 1, H)
