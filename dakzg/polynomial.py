"""
평가 형식(evaluation form) 다항식
=================================

커밋먼트와 열기 증명의 단위가 되는 다항식.

**평가 형식이란?**
  계수 [c₀, c₁, ...] 대신, 도메인 H = {1, ω, ..., ω^(n-1)}의 각 점에서의
  값 [p(1), p(ω), ..., p(ω^(n-1))]으로 다항식을 표현한다.
  블롭 인코더가 만든 필드 원소 벡터가 그대로 평가값이 된다.

**길이**:
  FFT 도메인은 2의 거듭제곱이어야 하므로 원소 벡터는 다음 2의 거듭제곱까지
  FR(0)으로 채운다. length_of_padded_blob은 원래 (패딩된) 블롭의 바이트 수이다.

사용 예시:
    >>> p = Polynomial([FR(1), FR(2), FR(3)])
    >>> len(p)           # 4 (2의 거듭제곱으로 패딩)
    >>> p.value_at(3)    # FR(0)
"""

from dakzg.errors import IndexOutOfRangeError, PreconditionError
from dakzg.field import FR
from dakzg.utils import pad_to_power_of_2


class Polynomial:
    """FR 위의 평가 형식 다항식.

    속성:
        elements: 평가값 리스트 (길이는 2의 거듭제곱)
        length_of_padded_blob: 원본 블롭의 바이트 수
    """

    def __init__(self, elements, length_of_padded_blob=None):
        """다항식 생성.

        Args:
            elements: FR 원소 (또는 정수) 리스트. 비어 있으면 안 된다.
            length_of_padded_blob: 원본 블롭 바이트 수 (기본값: 원소 수 × 32)

        Raises:
            PreconditionError: elements가 비어 있을 때
        """
        if len(elements) == 0:
            raise PreconditionError("a polynomial needs at least one element")
        values = [e if isinstance(e, FR) else FR(e) for e in elements]
        self.elements = pad_to_power_of_2(values)
        if length_of_padded_blob is None:
            length_of_padded_blob = len(values) * 32
        self.length_of_padded_blob = length_of_padded_blob

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def __getitem__(self, index):
        return self.elements[index]

    def value_at(self, index):
        """index번째 평가값. 범위를 벗어나면 IndexOutOfRangeError."""
        if not 0 <= index < len(self.elements):
            raise IndexOutOfRangeError(
                f"index {index} is outside a polynomial of length {len(self.elements)}"
            )
        return self.elements[index]

    def to_list(self):
        return list(self.elements)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return False
        return self.elements == other.elements

    def __repr__(self):
        head = ", ".join(str(int(e)) for e in self.elements[:4])
        if len(self.elements) > 4:
            head += ", ..."
        return f"Polynomial([{head}], len={len(self.elements)})"
