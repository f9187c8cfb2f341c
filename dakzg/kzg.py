"""
KZG 다항식 커밋먼트: 커밋, 열기 증명, 검증
===========================================

평가 형식 다항식 p = [p₀, ..., p_{n-1}] (도메인 H = {1, ω, ..., ω^{n-1}})에
대한 Kate-Zaverucha-Goldberg 커밋먼트.

**커밋**:
  C = Σᵢ pᵢ · L_i(τ)·G1 = p(τ)·G1
  Lagrange 기저 [L_i(τ)·G1]은 SRS의 G1 거듭제곱에 IFFT를 적용해 얻는다.

**열기 증명**:
  "p(z) = y" (z = ωⁱ)를 증명한다.
  1. 몫 다항식 q(X) = (p(X) - y) / (X - z)를 평가 형식으로 계산
       q_j = (p_j - y) / (ω_j - z)                         (ω_j ≠ z)
       q_i = Σ_{j≠i} (p_j - y)·ω_j / ((z - ω_j)·z)          (ω_i = z)
     두 번째 식은 분모가 0이 되는 도메인 위의 점에서의 값이다.
  2. 증명 π = commit(q)

**검증**:
  e(C - y·G1, G2) · e(-π, τ·G2 - z·G2) == 1
  두 Miller loop의 곱에 최종 지수승을 한 번만 적용한다.

사용 예시:
    >>> srs = setup(use_test_parameters=True)
    >>> session = derive_from_chunking(srs, 4, 2)
    >>> C = commit(poly, srs)
    >>> pi = compute_proof(poly, 3, session)
    >>> verify(C, pi, poly.value_at(3), session.get_nth_root_of_unity(3), srs)  # True
"""

import functools
import logging

from py_ecc import optimized_bn128 as bn128

from dakzg.errors import (
    CommitError, DomainError, IndexOutOfRangeError, PreconditionError,
)
from dakzg.fft import g1_ifft
from dakzg.field import (
    FR, CURVE_ORDER, G1, G2, Z1_PROJECTIVE,
    to_projective, to_affine, ec_mul, ec_neg, ec_sub,
    is_on_curve_g1, is_on_curve_g2, pairing_product_is_one,
)
from dakzg.utils import is_power_of_2

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────
# 다중 스칼라 곱셈 (MSM)
# ─────────────────────────────────────────────────────────────────────

def _check_g1(point, i):
    if point is None:
        return
    if not (isinstance(point, tuple) and len(point) == 2):
        raise CommitError(f"base {i} is not an affine G1 point")
    try:
        on_curve = is_on_curve_g1(point)
    except (TypeError, AttributeError) as e:
        raise CommitError(f"base {i} is not an affine G1 point: {e}") from e
    if not on_curve:
        raise CommitError(f"base {i} is not on the curve")


def msm(bases, scalars):
    """Σᵢ scalarsᵢ · basesᵢ

    Args:
        bases: 아핀 G1 점 리스트
        scalars: FR (또는 정수) 리스트

    Returns:
        아핀 G1 점 (항등원이면 None)

    Raises:
        CommitError: 길이가 다르거나 곡선 위에 없는 점이 있을 때
    """
    if len(bases) != len(scalars):
        raise CommitError(
            f"msm needs as many bases as scalars, got {len(bases)} and {len(scalars)}"
        )

    result = Z1_PROJECTIVE
    for i, (base, scalar) in enumerate(zip(bases, scalars)):
        _check_g1(base, i)
        s = int(scalar) % CURVE_ORDER
        if s == 0 or base is None:
            continue
        result = bn128.add(result, bn128.multiply(to_projective(base), s))

    return to_affine(result)


# ─────────────────────────────────────────────────────────────────────
# Lagrange 기저
# ─────────────────────────────────────────────────────────────────────

@functools.lru_cache(maxsize=None)
def _lagrange_basis(srs, length):
    logger.debug("computing Lagrange basis of length %d for %r", length, srs)
    return tuple(g1_ifft(srs.g1[:length]))


def to_lagrange_basis(srs, length):
    """SRS의 앞 length개 G1 거듭제곱을 Lagrange 기저로 변환한다.

    결과는 (srs, length)별로 캐시되며 commit과 compute_proof가 공유한다.

    Raises:
        DomainError: length가 2의 거듭제곱이 아니거나 SRS보다 클 때
    """
    if not is_power_of_2(length):
        raise DomainError(f"Lagrange basis length {length} is not a power of 2")
    if length > len(srs.g1):
        raise DomainError(
            f"Lagrange basis length {length} exceeds the {len(srs.g1)} SRS G1 points"
        )
    return list(_lagrange_basis(srs, length))


# ─────────────────────────────────────────────────────────────────────
# 커밋
# ─────────────────────────────────────────────────────────────────────

def commit(polynomial, srs):
    """평가 형식 다항식을 KZG 커밋한다.

    C = Σᵢ pᵢ · L_i(τ)·G1

    Args:
        polynomial: Polynomial
        srs: SRS

    Returns:
        G1 점: 커밋먼트 C

    Raises:
        PreconditionError: 다항식이 SRS의 G1 점 개수보다 길 때
        CommitError: MSM 실패
    """
    if len(polynomial) > len(srs.g1):
        raise PreconditionError(
            f"polynomial of length {len(polynomial)} is longer than "
            f"the {len(srs.g1)} SRS G1 points"
        )
    bases = to_lagrange_basis(srs, len(polynomial))
    logger.debug("committing to polynomial of length %d", len(polynomial))
    return msm(bases, polynomial.to_list())


def blob_to_kzg_commitment(blob, srs):
    """패딩된 블롭의 커밋먼트."""
    return commit(blob.to_polynomial(), srs)


# ─────────────────────────────────────────────────────────────────────
# 열기 증명
# ─────────────────────────────────────────────────────────────────────

def _quotient_at_singular_point(z, evals, value, roots):
    # q(z) = Σ_{ω_j ≠ z} (p_j - y)·ω_j / ((z - ω_j)·z)
    quotient = FR(0)
    for p_j, omega_j in zip(evals, roots):
        if omega_j == z:
            continue
        quotient += (p_j - value) * omega_j / ((z - omega_j) * z)
    return quotient


def compute_proof(polynomial, index, session, roots_of_unity=None):
    """index번째 도메인 점에서의 열기 증명을 만든다.

    Args:
        polynomial: Polynomial (길이 = 도메인 크기)
        index: 열어볼 평가 인덱스 i (z = ωⁱ, y = pᵢ)
        session: 유도가 끝난 EncodingSession
        roots_of_unity: 사용할 도메인 (기본값: session의 단위근)

    Returns:
        G1 점: 증명 π = q(τ)·G1

    Raises:
        PreconditionError: 세션 유도가 끝나지 않았거나 길이가 맞지 않을 때
        IndexOutOfRangeError: index가 도메인 범위를 벗어날 때
    """
    if not session.params.completed:
        raise PreconditionError(
            "setup incomplete: derive an encoding session before computing proofs"
        )
    if roots_of_unity is None:
        roots_of_unity = session.expanded_roots_of_unity
    roots = list(roots_of_unity)

    if len(polynomial) != len(roots):
        raise PreconditionError(
            f"polynomial length {len(polynomial)} does not match "
            f"{len(roots)} roots of unity"
        )
    if not 0 <= index < len(roots):
        raise IndexOutOfRangeError(
            f"index {index} is outside a domain of size {len(roots)}"
        )

    evals = polynomial.to_list()
    value = evals[index]
    z = roots[index]

    quotient = []
    for p_j, omega_j in zip(evals, roots):
        denominator = omega_j - z
        # FR 나눗셈은 0으로 나누면 예외 없이 0을 돌려준다
        if denominator == FR(0):
            quotient.append(_quotient_at_singular_point(z, evals, value, roots))
        else:
            quotient.append((p_j - value) / denominator)

    logger.debug("computing proof at index %d over %d roots", index, len(roots))
    return msm(to_lagrange_basis(session.srs, len(roots)), quotient)


# ─────────────────────────────────────────────────────────────────────
# 검증
# ─────────────────────────────────────────────────────────────────────

def verify(commitment, proof, value, z, srs):
    """KZG 열기 증명을 검증한다.

    e(C - y·G1, G2) · e(-π, τ·G2 - z·G2) == 1

    Args:
        commitment: 커밋먼트 C (G1 점)
        proof: 증명 π (G1 점)
        value: 주장하는 평가값 y
        z: 평가 점
        srs: SRS

    Returns:
        bool: 검증 성공 여부. 입력이 잘못된 경우에도 예외 대신 False.
    """
    try:
        for point in (commitment, proof):
            if point is not None and not is_on_curve_g1(point):
                logger.debug("verification rejected: G1 input is not on the curve")
                return False
        if not is_on_curve_g2(srs.g2_tau):
            logger.debug("verification rejected: tau G2 point is not on the curve")
            return False

        value = value if isinstance(value, FR) else FR(value)
        z = z if isinstance(z, FR) else FR(z)

        value_point = ec_mul(G1, value)
        commitment_minus_value = ec_sub(commitment, value_point)
        z_point = ec_mul(G2, z)
        x_minus_z = ec_sub(srs.g2_tau, z_point)

        return pairing_product_is_one([
            (commitment_minus_value, G2),
            (ec_neg(proof), x_minus_z),
        ])
    except (AssertionError, TypeError, ValueError, AttributeError,
            IndexError, ZeroDivisionError) as e:
        logger.debug("verification rejected malformed input: %s", e)
        return False
