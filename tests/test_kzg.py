"""
Tests for KZG commit / prove / verify: kzg.py

Covers:
- msm (known combination, zero scalars, invalid input)
- commit (p(τ)·G1, length bound, linearity, known vector)
- compute_proof (q(τ)·G1, preconditions, custom roots)
- verify (round trip for every index, tamper sensitivity, malformed input)
"""
import pytest

from dakzg.blob import Blob
from dakzg.config import config
from dakzg.errors import (
    CommitError, PreconditionError, IndexOutOfRangeError,
)
from dakzg.fft import ifft
from dakzg.field import FR, G1, G2, Fq, ec_add, ec_mul, ec_neg
from dakzg.kzg import (
    msm, commit, blob_to_kzg_commitment, compute_proof, verify,
)
from dakzg.params import new_session
from dakzg.polynomial import Polynomial
from dakzg.serialization import g1_to_base64
from dakzg.srs import SRS, setup


def _evaluate_at(poly, x):
    """평가 형식 다항식을 계수로 되돌려 x에서 평가한다."""
    result = FR(0)
    for c in reversed(ifft(poly.to_list())):
        result = result * x + c
    return result


# ─────────────────────────────────────────────────────────────────────
# MSM
# ─────────────────────────────────────────────────────────────────────

class TestMSM:
    def test_linear_combination(self):
        bases = [G1, ec_mul(G1, 2), ec_mul(G1, 3)]
        assert msm(bases, [FR(1), FR(2), FR(3)]) == ec_mul(G1, 14)

    def test_zero_scalars(self):
        assert msm([G1, G1], [FR(0), FR(0)]) is None

    def test_infinity_base(self):
        assert msm([None, G1], [FR(5), FR(2)]) == ec_mul(G1, 2)

    def test_empty(self):
        assert msm([], []) is None

    def test_length_mismatch(self):
        with pytest.raises(CommitError, match="as many"):
            msm([G1, G1], [FR(1)])

    def test_off_curve_base(self):
        with pytest.raises(CommitError, match="not on the curve"):
            msm([(Fq(1), Fq(3))], [FR(1)])

    def test_malformed_base(self):
        with pytest.raises(CommitError):
            msm([(1, 2)], [FR(1)])


# ─────────────────────────────────────────────────────────────────────
# Commit
# ─────────────────────────────────────────────────────────────────────

class TestCommit:
    def test_commitment_is_p_tau(self, srs, srs_tau, poly8):
        assert commit(poly8, srs) == ec_mul(G1, _evaluate_at(poly8, srs_tau))

    def test_constant_polynomial(self, srs):
        # 모든 평가값이 c인 다항식은 상수 c
        assert commit(Polynomial([FR(9)] * 4), srs) == ec_mul(G1, 9)

    def test_zero_polynomial(self, srs):
        assert commit(Polynomial([FR(0)] * 4), srs) is None

    def test_deterministic(self, srs, poly4):
        assert commit(poly4, srs) == commit(poly4, srs)

    def test_linearity(self, srs):
        a = Polynomial([FR(1), FR(2), FR(3), FR(4)])
        b = Polynomial([FR(5), FR(0), FR(7), FR(1)])
        a_plus_b = Polynomial([x + y for x, y in zip(a, b)])
        assert commit(a_plus_b, srs) == ec_add(commit(a, srs), commit(b, srs))

    def test_longer_than_srs(self):
        tiny = SRS.generate(2, "tiny")
        with pytest.raises(PreconditionError, match="longer"):
            commit(Polynomial([FR(1)] * 4), tiny)

    def test_full_srs_length(self):
        tiny = SRS.generate(2, "tiny")
        assert commit(Polynomial([FR(3), FR(3)]), tiny) == ec_mul(G1, 3)


class TestKnownVector:
    def test_hello_with_test_srs(self, srs, hello_commitment):
        blob = Blob.from_bytes_and_pad(b"hello")
        assert g1_to_base64(blob_to_kzg_commitment(blob, srs)) == hello_commitment

    def test_hello_field_element(self, srs):
        blob = Blob.from_bytes_and_pad(b"hello")
        expected = ec_mul(G1, FR(0x0068656C6C6F << 208))
        assert blob_to_kzg_commitment(blob, srs) == expected

    @pytest.mark.skipif(not config.has_production_srs,
                        reason="production SRS payload is not configured")
    def test_hello_with_production_srs(self, hello_commitment):
        production = setup(use_test_parameters=False)
        blob = Blob.from_bytes_and_pad(b"hello")
        assert g1_to_base64(blob_to_kzg_commitment(blob, production)) == hello_commitment

    def test_unpadded_blob(self, srs):
        with pytest.raises(PreconditionError):
            blob_to_kzg_commitment(Blob(b"hello"), srs)


# ─────────────────────────────────────────────────────────────────────
# Prove
# ─────────────────────────────────────────────────────────────────────

class TestComputeProof:
    @pytest.mark.parametrize("index", [0, 5])
    def test_proof_is_quotient_at_tau(self, srs_tau, session8, poly8, index):
        z = session8.get_nth_root_of_unity(index)
        y = poly8.value_at(index)
        q_tau = (_evaluate_at(poly8, srs_tau) - y) / (srs_tau - z)
        assert compute_proof(poly8, index, session8) == ec_mul(G1, q_tau)

    def test_deterministic(self, session4, poly4):
        assert compute_proof(poly4, 1, session4) == compute_proof(poly4, 1, session4)

    def test_incomplete_session(self, srs, poly4):
        with pytest.raises(PreconditionError, match="setup incomplete"):
            compute_proof(poly4, 0, new_session(srs))

    def test_length_mismatch(self, session8, poly4):
        with pytest.raises(PreconditionError):
            compute_proof(poly4, 0, session8)

    @pytest.mark.parametrize("index", [-1, 4, 100])
    def test_index_out_of_range(self, session4, poly4, index):
        with pytest.raises(IndexOutOfRangeError):
            compute_proof(poly4, index, session4)

    def test_explicit_roots(self, session8, session4, poly4):
        roots = session4.expanded_roots_of_unity
        assert compute_proof(poly4, 2, session8, roots) == \
            compute_proof(poly4, 2, session4)

    def test_constant_polynomial_has_trivial_proof(self, session4):
        assert compute_proof(Polynomial([FR(6)] * 4), 3, session4) is None


# ─────────────────────────────────────────────────────────────────────
# Verify
# ─────────────────────────────────────────────────────────────────────

class TestVerify:
    def test_roundtrip_every_index(self, srs, session4, poly4):
        commitment = commit(poly4, srs)
        for i in range(len(poly4)):
            proof = compute_proof(poly4, i, session4)
            z = session4.get_nth_root_of_unity(i)
            assert verify(commitment, proof, poly4.value_at(i), z, srs), i

    def test_roundtrip_larger_domain(self, srs, session8, poly8):
        commitment = commit(poly8, srs)
        proof = compute_proof(poly8, 6, session8)
        z = session8.get_nth_root_of_unity(6)
        assert verify(commitment, proof, poly8.value_at(6), z, srs)

    def test_wrong_point(self, srs, session4, poly4):
        commitment = commit(poly4, srs)
        proof = compute_proof(poly4, 0, session4)
        # poly4는 인덱스 0과 2의 값이 다르다
        z_other = session4.get_nth_root_of_unity(2)
        assert not verify(commitment, proof, poly4.value_at(0), z_other, srs)

    def test_wrong_value(self, srs, session4, poly4):
        commitment = commit(poly4, srs)
        proof = compute_proof(poly4, 1, session4)
        z = session4.get_nth_root_of_unity(1)
        assert not verify(commitment, proof, poly4.value_at(1) + FR(1), z, srs)

    def test_wrong_commitment(self, srs, session4, poly4):
        proof = compute_proof(poly4, 1, session4)
        z = session4.get_nth_root_of_unity(1)
        other = commit(Polynomial([FR(1)] * 4), srs)
        assert not verify(other, proof, poly4.value_at(1), z, srs)

    def test_accepts_int_value_and_point(self, srs, session4):
        poly = Polynomial([FR(5)] * 4)
        assert verify(commit(poly, srs), None, 5, 1, srs)

    def test_off_curve_commitment(self, srs):
        assert verify((Fq(1), Fq(3)), G1, FR(0), FR(1), srs) is False

    def test_malformed_inputs_return_false(self, srs):
        assert verify((1, 2), G1, FR(0), FR(1), srs) is False
        assert verify("not a point", G1, FR(0), FR(1), srs) is False
        assert verify(G1, G1, "zero", FR(1), srs) is False
        assert verify(G1, ec_neg(G1), FR(0), object(), srs) is False

    def test_uses_explicit_tau_index(self, srs, session4, poly4):
        # τ·G2를 g2의 다른 위치에 두어도 tau_g2_index를 따라간다
        moved = SRS(srs.g1, [G2, ec_mul(G2, 2), srs.g2_tau], srs.srs_order,
                    tau_g2_index=2)
        commitment = commit(poly4, srs)
        proof = compute_proof(poly4, 3, session4)
        z = session4.get_nth_root_of_unity(3)
        assert verify(commitment, proof, poly4.value_at(3), z, moved)
