"""
타원곡선 점 직렬화 헬퍼
=======================

두 가지 표현을 제공한다.

**바이트 표현** (SRS 페이로드, CLI 출력):
  - G1:  x || y  (각 32바이트 big-endian, 64바이트). 무한원점은 64개의 0 바이트
  - G2:  x.c1 || x.c0 || y.c1 || y.c0  (EIP-197 순서, 128바이트)
  - base64 좌표: 커밋먼트를 (base64(x), base64(y))로 표기

**JSON 친화 표현** (inspect-srs 출력):
  - G1 → [str, str] or None
  - G2 → [[str, str], [str, str]] or None
"""

import base64

from dakzg.errors import SetupError
from dakzg.field import FIELD_MODULUS, Fq, Fq2, BYTES_PER_FIELD_ELEMENT

G1_POINT_SIZE = 2 * BYTES_PER_FIELD_ELEMENT
G2_POINT_SIZE = 4 * BYTES_PER_FIELD_ELEMENT


# ─── G1 point ───

def serialize_g1(point):
    """G1 point → [str, str] or None"""
    if point is None:
        return None
    return [str(int(point[0])), str(int(point[1]))]


def deserialize_g1(data):
    """[str, str] or None → G1 point"""
    if data is None:
        return None
    return (Fq(int(data[0])), Fq(int(data[1])))


def _coordinate(data, offset):
    value = int.from_bytes(data[offset:offset + BYTES_PER_FIELD_ELEMENT], "big")
    if value >= FIELD_MODULUS:
        raise SetupError(f"coordinate at byte offset {offset} is not reduced modulo p")
    return value


def g1_to_bytes(point):
    """G1 point → 64바이트"""
    if point is None:
        return bytes(G1_POINT_SIZE)
    return (
        int(point[0]).to_bytes(BYTES_PER_FIELD_ELEMENT, "big")
        + int(point[1]).to_bytes(BYTES_PER_FIELD_ELEMENT, "big")
    )


def g1_from_bytes(data):
    """64바이트 → G1 point (곡선 위 여부는 호출자가 검사한다)"""
    if len(data) != G1_POINT_SIZE:
        raise SetupError(f"G1 point must be {G1_POINT_SIZE} bytes, got {len(data)}")
    if not any(data):
        return None
    x = _coordinate(data, 0)
    y = _coordinate(data, BYTES_PER_FIELD_ELEMENT)
    return (Fq(x), Fq(y))


def g1_to_base64(point):
    """G1 point → (base64(x), base64(y))"""
    raw = g1_to_bytes(point)
    return (
        base64.b64encode(raw[:BYTES_PER_FIELD_ELEMENT]).decode("ascii"),
        base64.b64encode(raw[BYTES_PER_FIELD_ELEMENT:]).decode("ascii"),
    )


def g1_from_base64(x_b64, y_b64):
    """(base64(x), base64(y)) → G1 point"""
    return g1_from_bytes(base64.b64decode(x_b64) + base64.b64decode(y_b64))


# ─── G2 point ───

def serialize_g2(point):
    """G2 point → [[str,str],[str,str]] or None"""
    if point is None:
        return None
    return [
        [str(int(point[0].coeffs[0])), str(int(point[0].coeffs[1]))],
        [str(int(point[1].coeffs[0])), str(int(point[1].coeffs[1]))]
    ]


def deserialize_g2(data):
    """[[str,str],[str,str]] or None → G2 point"""
    if data is None:
        return None
    return (
        Fq2([int(data[0][0]), int(data[0][1])]),
        Fq2([int(data[1][0]), int(data[1][1])])
    )


def g2_to_bytes(point):
    """G2 point → 128바이트 (x.c1 || x.c0 || y.c1 || y.c0)"""
    if point is None:
        return bytes(G2_POINT_SIZE)
    x, y = point
    return b"".join(
        int(c).to_bytes(BYTES_PER_FIELD_ELEMENT, "big")
        for c in (x.coeffs[1], x.coeffs[0], y.coeffs[1], y.coeffs[0])
    )


def g2_from_bytes(data):
    """128바이트 → G2 point (곡선/부분군 검사는 호출자가 한다)"""
    if len(data) != G2_POINT_SIZE:
        raise SetupError(f"G2 point must be {G2_POINT_SIZE} bytes, got {len(data)}")
    if not any(data):
        return None
    x_c1, x_c0, y_c1, y_c0 = (
        _coordinate(data, i * BYTES_PER_FIELD_ELEMENT) for i in range(4)
    )
    return (Fq2([x_c0, x_c1]), Fq2([y_c0, y_c1]))
