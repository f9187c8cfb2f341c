"""
FFT / IFFT 및 Lagrange 기저 변환
=================================

**스칼라 FFT (NTT)**:
  FR 원소 리스트에 대한 radix-2 Cooley-Tukey 변환.
    fft:  계수 [c₀, ..., c_{n-1}] → 평가값 [p(1), p(ω), ..., p(ω^{n-1})]
    ifft: 평가값 → 계수

**G1 위의 IFFT**:
  같은 버터플라이를 타원곡선 점에 적용한다. 스칼라 곱셈이 "곱셈",
  점 덧셈이 "덧셈" 역할을 한다.

  SRS의 G1 거듭제곱 [G1, τ·G1, ..., τ^{n-1}·G1]에 IFFT를 적용하면
  Lagrange 기저 [L₀(τ)·G1, ..., L_{n-1}(τ)·G1]가 나온다.

    L_i(τ) = (1/n) Σⱼ ω^{-ij} τʲ

  평가 형식 다항식 [p₀, ..., p_{n-1}]의 커밋먼트는
    C = Σᵢ pᵢ · L_i(τ)·G1 = p(τ)·G1
  이므로 계수로 되돌리지 않고 바로 MSM으로 계산할 수 있다.

모든 변환은 roots.get_domain(n)과 같은 도메인을 사용한다.
n이 2의 거듭제곱이 아니면 DomainError.

사용 예시:
    >>> evals = fft([FR(1), FR(2), FR(3), FR(0)])
    >>> ifft(evals)  # [FR(1), FR(2), FR(3), FR(0)]
"""

from py_ecc import optimized_bn128 as bn128

from dakzg.field import FR, to_projective, to_affine
from dakzg.roots import get_domain


# ─────────────────────────────────────────────────────────────────────
# 공통 버터플라이
# ─────────────────────────────────────────────────────────────────────

def _fft(values, roots, add, sub, mul):
    """재귀 radix-2 FFT.

    values와 roots의 길이는 같아야 한다. roots[::2]는 절반 크기의 도메인이다.

    Args:
        values: 변환할 원소 (FR 또는 사영 좌표 점)
        roots: [1, ω, ..., ω^{n-1}]
        add, sub: 원소끼리의 덧셈/뺄셈
        mul: mul(원소, FR) 스칼라 곱
    """
    n = len(values)
    if n == 1:
        return list(values)

    half_roots = roots[::2]
    even_vals = _fft(values[::2], half_roots, add, sub, mul)
    odd_vals = _fft(values[1::2], half_roots, add, sub, mul)

    result = [None] * n
    half = n // 2
    for k in range(half):
        t = mul(odd_vals[k], roots[k])
        result[k] = add(even_vals[k], t)
        result[k + half] = sub(even_vals[k], t)
    return result


def _inverse_roots(roots):
    # ω^{-k} = ω^{n-k}
    return [roots[0]] + list(roots[1:])[::-1]


# ─────────────────────────────────────────────────────────────────────
# FR 위의 FFT
# ─────────────────────────────────────────────────────────────────────

def _fr_add(a, b):
    return a + b


def _fr_sub(a, b):
    return a - b


def _fr_mul(a, b):
    return a * b


def fft(values):
    """계수 → 평가값. len(values)는 2의 거듭제곱."""
    roots = list(get_domain(len(values)))
    values = [v if isinstance(v, FR) else FR(v) for v in values]
    return _fft(values, roots, _fr_add, _fr_sub, _fr_mul)


def ifft(values):
    """평가값 → 계수. fft의 역변환.

    역 단위근으로 FFT를 수행한 뒤 1/n을 곱한다.
    """
    n = len(values)
    roots = _inverse_roots(get_domain(n))
    values = [v if isinstance(v, FR) else FR(v) for v in values]
    n_inv = FR(1) / FR(n)
    return [c * n_inv for c in _fft(values, roots, _fr_add, _fr_sub, _fr_mul)]


# ─────────────────────────────────────────────────────────────────────
# G1 위의 IFFT
# ─────────────────────────────────────────────────────────────────────

def _g1_sub(a, b):
    return bn128.add(a, bn128.neg(b))


def _g1_mul(point, scalar):
    return bn128.multiply(point, int(scalar))


def g1_ifft(points):
    """G1 점 리스트에 IFFT를 적용한다.

    Args:
        points: 아핀 G1 점 리스트 (길이는 2의 거듭제곱)

    Returns:
        list: 아핀 G1 점 리스트 (항등원은 None)
    """
    n = len(points)
    roots = _inverse_roots(get_domain(n))
    projective = [to_projective(p) for p in points]
    transformed = _fft(projective, roots, bn128.add, _g1_sub, _g1_mul)
    n_inv = int(FR(1) / FR(n))
    return [to_affine(bn128.multiply(p, n_inv)) for p in transformed]
