"""
KZG 기반 모듈: 유한체(Finite Field) 및 타원곡선 연산
======================================================

커밋먼트 엔진 전체에서 사용하는 기본 대수적 도구를 정의한다.

**유한체 FR**:
  BN254 (bn128) 타원곡선의 스칼라 필드. 다항식의 평가값, 단위근,
  몫 다항식 계산 등 모든 스칼라 연산의 기본 단위이다.
  - 위수 r ≈ 2^254, 소수체
  - r - 1 = 2^28 × m (m은 홀수) → 최대 2^28차 단위근을 지원

**타원곡선 연산**:
  G1, G2 그룹 연산과 페어링. py_ecc의 optimized_bn128 (사영 좌표)을
  사용하고, 외부에 노출되는 점은 항상 아핀(affine) 좌표 튜플 (x, y)이다.
  무한원점(항등원)은 None으로 표현한다.

  - 아핀 → 사영:  to_projective(P)   (x, y) → (x, y, 1)
  - 사영 → 아핀:  to_affine(P)       (X, Y, Z) → (X/Z, Y/Z)  (py_ecc normalize)

  FFT와 MSM처럼 점 연산을 반복하는 루프는 사영 좌표에서 계산하고
  마지막에 한 번만 아핀으로 변환한다.

사용 예시:
    >>> from dakzg.field import FR, G1, ec_mul
    >>> a = FR(3)
    >>> b = FR(7)
    >>> c = a * b          # FR(21)
    >>> P = ec_mul(G1, 5)  # 5·G1 (아핀)
"""

from py_ecc.fields import bn128_FQ as FQ
from py_ecc import optimized_bn128 as bn128


# ─────────────────────────────────────────────────────────────────────
# 유한체(Finite Field) FR
# ─────────────────────────────────────────────────────────────────────

class FR(FQ):
    """BN254 스칼라 필드 위의 유한체 원소.

    py_ecc의 FQ를 상속하여 +, -, *, /, ** 연산을 제공한다.

    예시:
        >>> x = FR(3)
        >>> x * x          # FR(9)
        >>> FR(1) / FR(3)  # 3의 모듈러 역원
    """
    field_modulus = bn128.curve_order


# 스칼라 필드 위수 r
CURVE_ORDER = bn128.curve_order

# 베이스 필드 위수 p (좌표가 속하는 필드)
FIELD_MODULUS = bn128.field_modulus

# 필드 원소 하나의 직렬화 바이트 수
BYTES_PER_FIELD_ELEMENT = 32

# 점 좌표의 필드 타입 (베이스 필드와 2차 확대체)
Fq = bn128.FQ
Fq2 = bn128.FQ2


# ─────────────────────────────────────────────────────────────────────
# 타원곡선 상수
# ─────────────────────────────────────────────────────────────────────

# G1 그룹 생성자 (아핀): (1, 2)
G1 = bn128.normalize(bn128.G1)

# G2 그룹 생성자 (아핀)
G2 = bn128.normalize(bn128.G2)

# 무한원점 (항등원)
Z1 = None

# 사영 좌표의 항등원
Z1_PROJECTIVE = bn128.Z1
Z2_PROJECTIVE = bn128.Z2


# ─────────────────────────────────────────────────────────────────────
# 좌표 변환
# ─────────────────────────────────────────────────────────────────────

def to_projective(point, infinity=Z1_PROJECTIVE):
    """아핀 점 (x, y)를 사영 점 (x, y, 1)로 올린다.

    None(무한원점)은 infinity로 바뀐다. G2 점을 변환할 때는
    infinity=Z2_PROJECTIVE를 넘겨야 한다.
    """
    if point is None:
        return infinity
    x, y = point
    return (x, y, x.one())


def to_affine(point):
    """사영 점을 아핀 튜플로 정규화한다. 무한원점은 None."""
    if bn128.is_inf(point):
        return None
    return bn128.normalize(point)


def _scalar_int(scalar):
    return int(scalar) % CURVE_ORDER


# ─────────────────────────────────────────────────────────────────────
# 아핀 점 연산
# ─────────────────────────────────────────────────────────────────────

def ec_mul(point, scalar):
    """타원곡선 스칼라 곱셈: scalar · point.

    Args:
        point: G1 또는 G2 위의 아핀 점
        scalar: 정수 또는 FR 원소

    Returns:
        scalar · point (같은 그룹의 아핀 점, 항등원이면 None)

    예시:
        >>> P = ec_mul(G1, FR(5))  # 5·G1
        >>> Q = ec_mul(G2, 3)      # 3·G2
    """
    if point is None:
        return None
    return to_affine(bn128.multiply(to_projective(point), _scalar_int(scalar)))


def ec_add(p1, p2):
    """타원곡선 점 덧셈: p1 + p2 (같은 그룹의 아핀 점)."""
    if p1 is None:
        return p2
    if p2 is None:
        return p1
    return to_affine(bn128.add(to_projective(p1), to_projective(p2)))


def ec_neg(point):
    """타원곡선 점의 역원: -point (y좌표 반전)."""
    if point is None:
        return None
    x, y = point
    return (x, -y)


def ec_sub(p1, p2):
    """p1 - p2."""
    return ec_add(p1, ec_neg(p2))


def is_on_curve_g1(point):
    """아핀 점이 G1 곡선 y² = x³ + 3 위에 있는지 확인한다."""
    if point is None:
        return True
    return bn128.is_on_curve(to_projective(point), bn128.b)


def is_on_curve_g2(point):
    """아핀 점이 트위스트 곡선 y² = x³ + 3/(9+u) 위에 있는지 확인한다."""
    if point is None:
        return True
    return bn128.is_on_curve(to_projective(point, Z2_PROJECTIVE), bn128.b2)


def is_in_g2_subgroup(point):
    """G2 점이 위수 r인 부분군에 속하는지 확인한다.

    BN254의 G1은 여인수(cofactor)가 1이라 곡선 위에 있으면 충분하지만,
    G2 트위스트 곡선은 여인수가 커서 r·P = O 검사가 별도로 필요하다.
    """
    if point is None:
        return True
    return bn128.is_inf(bn128.multiply(to_projective(point, Z2_PROJECTIVE), CURVE_ORDER))


# ─────────────────────────────────────────────────────────────────────
# 페어링
# ─────────────────────────────────────────────────────────────────────

def ec_pairing(g2_point, g1_point):
    """쌍선형 페어링 e(G1, G2) → GT.

    주의:
        py_ecc의 pairing 인자 순서는 (G2, G1)이다.
    """
    return bn128.pairing(
        to_projective(g2_point, Z2_PROJECTIVE), to_projective(g1_point)
    )


def pairing_product_is_one(pairs):
    """Π e(Pᵢ, Qᵢ) == 1 인지 하나의 다중 페어링으로 확인한다.

    각 쌍에 대해 Miller loop만 수행해 곱한 뒤, 최종 지수승(final
    exponentiation)은 한 번만 적용한다.

    Args:
        pairs: [(G1 아핀 점, G2 아핀 점), ...]

    Returns:
        bool
    """
    acc = bn128.FQ12.one()
    for g1_point, g2_point in pairs:
        acc = acc * bn128.pairing(
            to_projective(g2_point, Z2_PROJECTIVE),
            to_projective(g1_point),
            final_exponentiate=False,
        )
    return bn128.final_exponentiate(acc) == bn128.FQ12.one()
