import hashlib
import os
import sys

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from dakzg.field import FR, CURVE_ORDER
from dakzg.params import derive_from_chunking
from dakzg.polynomial import Polynomial
from dakzg.srs import setup


# ── 테스트 상수 ──
TEST_SRS_SEED = "dakzg-test-srs-v1"
TEST_SRS_ORDER = 64

HELLO_COMMITMENT = (
    "LvAG1kdZAttu4Le86xzTDZGmZIgEuocTNYicLlTsLuA=",
    "Ez88I+rPb1gYjuepHJFaW9DtXIXzZKy0eEVFwKbwEtA=",
)


@pytest.fixture(scope="session")
def srs():
    """패키지에 포함된 테스트 SRS (order 64)."""
    return setup(use_test_parameters=True)


@pytest.fixture(scope="session")
def hello_commitment():
    """패딩한 b"hello"의 커밋먼트 (base64 x, y)."""
    return HELLO_COMMITMENT


@pytest.fixture(scope="session")
def srs_tau():
    """테스트 SRS의 공개된 τ."""
    digest = hashlib.sha256(TEST_SRS_SEED.encode()).digest()
    return FR(int.from_bytes(digest, "big") % CURVE_ORDER)


@pytest.fixture(scope="session")
def session4(srs):
    """청크 길이 2 × 청크 2개 → 도메인 크기 4."""
    return derive_from_chunking(srs, 2, 2)


@pytest.fixture(scope="session")
def session8(srs):
    """청크 길이 4 × 청크 2개 → 도메인 크기 8."""
    return derive_from_chunking(srs, 4, 2)


@pytest.fixture
def poly4():
    return Polynomial([FR(3), FR(1), FR(4), FR(1)])


@pytest.fixture
def poly8():
    return Polynomial([FR(v) for v in (2, 7, 1, 8, 2, 8, 1, 8)])
