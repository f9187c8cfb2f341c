"""
KZG Structured Reference String (SRS)
=====================================

신뢰 설정(trusted setup)의 결과물인 공개 파라미터를 보관하고
버전이 붙은 바이너리 페이로드에서 읽어 들인다.

**SRS란?**
  비밀 값 τ ("toxic waste")의 거듭제곱을 두 그룹에 인코딩한 값이다.

  SRS = {
      g1: [G1, τ·G1, τ²·G1, ..., τ^(n-1)·G1]   (n = srs_order)
      g2: [G2, τ·G2, ...]                       (최소 2개)
  }

  τ·G2가 g2 안의 몇 번째 원소인지는 tau_g2_index로 명시한다.

**수명**:
  시작 시 한 번 로드되고 이후 절대 변경되지 않는다. 모든 commit/prove/verify
  호출이 같은 인스턴스를 읽기 전용으로 공유한다.

**페이로드 형식 (v1, big-endian)**:

  magic        8B   b"DAKZGSRS"
  version      u16  1
  srs_order    u64
  tau_g2_index u32
  g1_count     u32
  g2_count     u32
  g1 points    g1_count × 64B
  g2 points    g2_count × 128B
  digest       32B  앞선 모든 바이트의 SHA-256

  이 SRS는 이후 모든 증명의 신뢰 근거이므로, 바이트 스트림을 그대로 믿지 않고
  길이, 다이제스트, 좌표 범위, 곡선/부분군 소속을 모두 검사한다.

사용 예시:
    >>> srs = setup(use_test_parameters=True)
    >>> srs.srs_order   # 64
    >>> srs.g1[0] == G1  # True
"""

import functools
import hashlib
import logging
import struct

from dakzg.config import config as default_config
from dakzg.errors import SetupError
from dakzg.field import (
    FR, CURVE_ORDER, G1, G2, ec_mul,
    is_on_curve_g1, is_on_curve_g2, is_in_g2_subgroup,
)
from dakzg.serialization import (
    G1_POINT_SIZE, G2_POINT_SIZE,
    g1_to_bytes, g1_from_bytes, g2_to_bytes, g2_from_bytes,
)

logger = logging.getLogger(__name__)

MAGIC = b"DAKZGSRS"
VERSION = 1
_HEADER = struct.Struct(">8sHQIII")
_DIGEST_SIZE = hashlib.sha256().digest_size


class SRS:
    """Structured Reference String: KZG 커밋먼트용 공개 파라미터.

    속성:
        g1: (G1, τ·G1, ..., τ^(n-1)·G1)  아핀 점 튜플
        g2: (G2, τ·G2, ...)               아핀 점 튜플
        srs_order: 사용 가능한 G1 점의 개수 n
        tau_g2_index: g2 안에서 τ·G2의 위치
    """

    def __init__(self, g1, g2, srs_order, tau_g2_index=1):
        g1 = tuple(g1)
        g2 = tuple(g2)
        if len(g1) != srs_order:
            raise SetupError(
                f"SRS declares order {srs_order} but carries {len(g1)} G1 points"
            )
        if len(g2) < 2:
            raise SetupError(f"SRS needs at least 2 G2 points, got {len(g2)}")
        if not 0 <= tau_g2_index < len(g2):
            raise SetupError(
                f"tau G2 index {tau_g2_index} is outside the {len(g2)} G2 points"
            )
        self._g1 = g1
        self._g2 = g2
        self._srs_order = srs_order
        self._tau_g2_index = tau_g2_index

    @property
    def g1(self):
        return self._g1

    @property
    def g2(self):
        return self._g2

    @property
    def srs_order(self):
        return self._srs_order

    @property
    def tau_g2_index(self):
        return self._tau_g2_index

    @property
    def g2_tau(self):
        """검증에 쓰이는 τ·G2."""
        return self._g2[self._tau_g2_index]

    def get_g1_points(self):
        """G1 점 리스트의 복사본."""
        return list(self._g1)

    def get_g2_points(self):
        """G2 점 리스트의 복사본."""
        return list(self._g2)

    def __repr__(self):
        return (
            f"SRS(srs_order={self._srs_order}, g2={len(self._g2)} points, "
            f"tau_g2_index={self._tau_g2_index})"
        )

    # ─────────────────────────────────────────────────────────────────
    # 생성 (테스트/도구용)
    # ─────────────────────────────────────────────────────────────────

    @classmethod
    def generate(cls, order, seed, g2_powers=2):
        """seed에서 결정론적으로 SRS를 생성한다.

        τ = SHA-256(str(seed)) mod r. τ가 공개되므로 테스트와 도구 전용이며,
        실제 시스템에서는 MPC 세레모니의 결과물을 로드해야 한다.

        Args:
            order: G1 점 개수 (srs_order)
            seed: τ 유도용 시드
            g2_powers: G2 거듭제곱 개수 [G2, τ·G2, ...] (최소 2)

        Returns:
            SRS

        예시:
            >>> srs = SRS.generate(order=8, seed="example")
            >>> len(srs.g1)  # 8
        """
        h = hashlib.sha256(str(seed).encode()).digest()
        tau = FR(int.from_bytes(h, "big") % CURVE_ORDER)

        g1 = []
        tau_power = FR(1)
        for _ in range(order):
            g1.append(ec_mul(G1, tau_power))
            tau_power = tau_power * tau

        g2 = []
        tau_power = FR(1)
        for _ in range(g2_powers):
            g2.append(ec_mul(G2, tau_power))
            tau_power = tau_power * tau

        return cls(g1, g2, order, tau_g2_index=1)

    # ─────────────────────────────────────────────────────────────────
    # 직렬화
    # ─────────────────────────────────────────────────────────────────

    def to_bytes(self):
        """v1 페이로드로 직렬화한다."""
        parts = [
            _HEADER.pack(
                MAGIC, VERSION, self._srs_order, self._tau_g2_index,
                len(self._g1), len(self._g2),
            )
        ]
        parts.extend(g1_to_bytes(p) for p in self._g1)
        parts.extend(g2_to_bytes(p) for p in self._g2)
        body = b"".join(parts)
        return body + hashlib.sha256(body).digest()

    @classmethod
    def from_bytes(cls, data):
        """v1 페이로드를 검증하며 역직렬화한다.

        Raises:
            SetupError: 형식, 길이, 다이제스트, 좌표, 곡선 검사 중 하나라도 실패할 때
        """
        data = bytes(data)
        if len(data) < _HEADER.size + _DIGEST_SIZE:
            raise SetupError(f"SRS payload is truncated ({len(data)} bytes)")

        magic, version, srs_order, tau_g2_index, g1_count, g2_count = \
            _HEADER.unpack_from(data)
        if magic != MAGIC:
            raise SetupError(f"not an SRS payload (magic {magic!r})")
        if version != VERSION:
            raise SetupError(f"unsupported SRS payload version {version}")

        expected = (
            _HEADER.size + g1_count * G1_POINT_SIZE + g2_count * G2_POINT_SIZE
            + _DIGEST_SIZE
        )
        if len(data) != expected:
            raise SetupError(
                f"SRS payload is {len(data)} bytes, header implies {expected}"
            )

        body, digest = data[:-_DIGEST_SIZE], data[-_DIGEST_SIZE:]
        if hashlib.sha256(body).digest() != digest:
            raise SetupError("SRS payload digest mismatch")

        if g1_count != srs_order:
            raise SetupError(
                f"SRS declares order {srs_order} but carries {g1_count} G1 points"
            )

        offset = _HEADER.size
        g1 = []
        for i in range(g1_count):
            point = g1_from_bytes(body[offset:offset + G1_POINT_SIZE])
            if not is_on_curve_g1(point):
                raise SetupError(f"G1 point {i} is not on the curve")
            g1.append(point)
            offset += G1_POINT_SIZE

        g2 = []
        for i in range(g2_count):
            point = g2_from_bytes(body[offset:offset + G2_POINT_SIZE])
            if not is_on_curve_g2(point):
                raise SetupError(f"G2 point {i} is not on the curve")
            if not is_in_g2_subgroup(point):
                raise SetupError(f"G2 point {i} is not in the prime-order subgroup")
            g2.append(point)
            offset += G2_POINT_SIZE

        return cls(g1, g2, srs_order, tau_g2_index)


# ─────────────────────────────────────────────────────────────────────
# 로딩
# ─────────────────────────────────────────────────────────────────────

@functools.lru_cache(maxsize=None)
def load_srs(path):
    """경로의 페이로드를 읽어 SRS를 만든다. 경로별로 한 번만 로드된다."""
    try:
        with open(path, "rb") as f:
            data = f.read()
    except FileNotFoundError:
        raise SetupError(f"SRS payload not found: {path}") from None
    srs = SRS.from_bytes(data)
    logger.info("loaded SRS from %s: order %d, %d G2 points",
                path, srs.srs_order, len(srs.g2))
    return srs


def setup(use_test_parameters, config=None):
    """테스트 또는 프로덕션 SRS를 로드한다.

    Args:
        use_test_parameters: True면 패키지에 포함된 테스트 페이로드,
                             False면 설정된 프로덕션 페이로드
        config: dakzg.config.Config (기본값: 모듈 전역 설정)

    Returns:
        SRS: 같은 플래그로 다시 호출하면 같은 인스턴스를 돌려준다

    Raises:
        SetupError: 파일이 없거나 페이로드가 손상되었을 때
    """
    cfg = config or default_config
    path = cfg.test_srs_path if use_test_parameters else cfg.production_srs_path
    return load_srs(str(path))
