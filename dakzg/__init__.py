"""
dakzg: BN254 위의 KZG 커밋먼트 엔진
===================================

데이터 가용성(data availability) 파이프라인에서 인코딩된 청크를 커밋하고
단일 좌표에 대한 열기 증명을 만들고 검증한다.

사용 예시:
    >>> import dakzg
    >>> srs = dakzg.setup(use_test_parameters=True)
    >>> blob = dakzg.Blob.from_bytes_and_pad(b"hello")
    >>> dakzg.blob_to_kzg_commitment(blob, srs)
"""

from dakzg.blob import Blob
from dakzg.errors import (
    KzgError, SetupError, ConfigurationError, DomainError,
    PreconditionError, CommitError, IndexOutOfRangeError,
)
from dakzg.kzg import (
    commit, compute_proof, verify, to_lagrange_basis, blob_to_kzg_commitment,
)
from dakzg.params import (
    EncodingParams, EncodingSession,
    new_session, derive_from_chunking, derive_from_blob_size,
)
from dakzg.polynomial import Polynomial
from dakzg.srs import SRS, setup

__all__ = [
    "setup", "derive_from_blob_size", "derive_from_chunking", "new_session",
    "commit", "compute_proof", "verify", "to_lagrange_basis",
    "blob_to_kzg_commitment",
    "SRS", "Polynomial", "Blob", "EncodingParams", "EncodingSession",
    "KzgError", "SetupError", "ConfigurationError", "DomainError",
    "PreconditionError", "CommitError", "IndexOutOfRangeError",
]
