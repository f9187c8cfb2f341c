"""
인코딩 파라미터와 세션
======================

블롭을 청크로 나누는 방식(청크 길이 × 청크 개수)을 정하고, 그에 맞는
평가 도메인(단위근)을 준비한다.

**세션은 값(value)이다**:
  EncodingSession은 SRS 참조, 파라미터, 확장된 단위근을 묶은 불변 객체다.
  청크 구성을 바꾸고 싶으면 새 세션을 유도한다. 하나의 SRS를 여러 세션이
  동시에 공유해도 서로 간섭하지 않는다.

**유도 규칙**:
  1. chunk_length, num_chunks를 각각 다음 2의 거듭제곱으로 올린다 (0 → 1)
  2. max_fft_width = chunk_length × num_chunks
  3. 단위근 지수 k = log2(chunk_length × num_chunks)
     단, chunk_length == 1이면 k = log2(2 × num_chunks)
  4. chunk_length × num_chunks < srs_order 이어야 한다
  5. 2^k차 원시 단위근을 확장하고 마지막 항등원을 잘라낸다

사용 예시:
    >>> session = derive_from_chunking(srs, min_chunk_length=4, min_num_chunks=2)
    >>> session.params.max_fft_width   # 8
    >>> session.get_nth_root_of_unity(0)  # FR(1)
"""

import logging
from dataclasses import dataclass

from dakzg.errors import ConfigurationError, IndexOutOfRangeError
from dakzg.field import BYTES_PER_FIELD_ELEMENT
from dakzg.roots import expand_root_of_unity, get_primitive_root_of_unity
from dakzg.utils import div_ceil, log2_exact, next_power_of_2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodingParams:
    chunk_length: int = 0
    num_chunks: int = 0
    max_fft_width: int = 0
    completed: bool = False


@dataclass(frozen=True)
class EncodingSession:
    """SRS + 인코딩 파라미터 + 확장된 단위근."""

    srs: object
    params: EncodingParams = EncodingParams()
    expanded_roots_of_unity: tuple = ()

    @property
    def domain_size(self):
        return len(self.expanded_roots_of_unity)

    def get_nth_root_of_unity(self, i):
        """i번째 단위근 ω^i. 범위를 벗어나면 IndexOutOfRangeError."""
        if not 0 <= i < len(self.expanded_roots_of_unity):
            raise IndexOutOfRangeError(
                f"root index {i} is outside a domain of size "
                f"{len(self.expanded_roots_of_unity)}"
            )
        return self.expanded_roots_of_unity[i]


def new_session(srs):
    """아직 유도되지 않은 세션 (completed=False, 단위근 없음)."""
    return EncodingSession(srs)


def derive_from_chunking(srs, min_chunk_length, min_num_chunks):
    """최소 청크 길이/개수로부터 세션을 유도한다.

    Args:
        srs: SRS
        min_chunk_length: 청크당 최소 필드 원소 수
        min_num_chunks: 최소 청크 개수

    Returns:
        EncodingSession (completed=True)

    Raises:
        ConfigurationError: 음수 입력, chunk_length × num_chunks >= srs_order,
                            또는 지원 범위를 넘는 단위근 차수
    """
    if min_chunk_length < 0 or min_num_chunks < 0:
        raise ConfigurationError(
            f"chunk parameters must be non-negative, got "
            f"chunk_length={min_chunk_length}, num_chunks={min_num_chunks}"
        )

    chunk_length = next_power_of_2(min_chunk_length)
    num_chunks = next_power_of_2(min_num_chunks)
    evaluations = chunk_length * num_chunks

    if evaluations >= srs.srs_order:
        raise ConfigurationError(
            f"chunk_length {chunk_length} x num_chunks {num_chunks} = {evaluations} "
            f"does not fit an SRS of order {srs.srs_order}"
        )

    if chunk_length == 1:
        exponent = log2_exact(2 * num_chunks)
    else:
        exponent = log2_exact(evaluations)

    roots = expand_root_of_unity(get_primitive_root_of_unity(exponent))
    params = EncodingParams(
        chunk_length=chunk_length,
        num_chunks=num_chunks,
        max_fft_width=evaluations,
        completed=True,
    )
    logger.debug("derived encoding session: %s, %d roots", params, len(roots) - 1)
    return EncodingSession(srs, params, tuple(roots[:-1]))


def derive_from_blob_size(srs, node_count, padded_byte_size):
    """노드 수와 패딩된 블롭 크기로부터 세션을 유도한다.

    elements = ⌈padded_byte_size / 32⌉
    min_chunk_length = ⌈elements / node_count⌉
    """
    if node_count <= 0:
        raise ConfigurationError(f"node count must be positive, got {node_count}")
    if padded_byte_size < 0:
        raise ConfigurationError(
            f"blob size must be non-negative, got {padded_byte_size}"
        )
    elements = div_ceil(padded_byte_size, BYTES_PER_FIELD_ELEMENT)
    min_chunk_length = div_ceil(elements, node_count)
    return derive_from_chunking(srs, min_chunk_length, node_count)
