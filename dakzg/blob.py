"""
블롭(Blob) 인코딩
=================

임의의 바이트 열을 BN254 스칼라 필드 원소 벡터로 바꾼다.

**왜 패딩이 필요한가?**
  필드 위수 r은 254비트라서 임의의 32바이트 값은 r보다 클 수 있다.
  31바이트마다 앞에 0x00 한 바이트를 붙여 32바이트 청크로 만들면
  각 청크는 항상 r보다 작다.

    원본:   [31바이트][31바이트][나머지 k바이트]
    패딩:   [00|31바이트][00|31바이트][00|k바이트]

  마지막 청크는 (1 + k)바이트로 잘린 채 남는다.

**필드 원소 변환 (to_fr_array)**:
  32바이트씩 big-endian 정수로 읽고 mod r로 축소한다. 마지막 부분 청크는
  오른쪽을 0으로 채워 32바이트로 만든다.

사용 예시:
    >>> blob = Blob.from_bytes_and_pad(b"hello")
    >>> blob.data             # b"\\x00hello"
    >>> blob.to_polynomial()  # Polynomial([0x0068656c6c6f << 208])
    >>> blob.remove_padding() # b"hello"
"""

from dakzg.errors import PreconditionError
from dakzg.field import FR, CURVE_ORDER, BYTES_PER_FIELD_ELEMENT
from dakzg.polynomial import Polynomial
from dakzg.utils import div_ceil

# 패딩 전 청크당 데이터 바이트 수
BYTES_PER_PADDED_CHUNK = BYTES_PER_FIELD_ELEMENT - 1


# ─────────────────────────────────────────────────────────────────────
# 바이트 패딩
# ─────────────────────────────────────────────────────────────────────

def convert_by_padding_empty_byte(data):
    """31바이트마다 0x00을 앞에 붙여 32바이트 청크를 만든다."""
    data = bytes(data)
    out = bytearray()
    for start in range(0, len(data), BYTES_PER_PADDED_CHUNK):
        out.append(0)
        out += data[start:start + BYTES_PER_PADDED_CHUNK]
    return bytes(out)


def remove_empty_byte_from_padded_bytes(data):
    """convert_by_padding_empty_byte의 역변환: 각 32바이트 청크의 첫 바이트를 버린다."""
    data = bytes(data)
    out = bytearray()
    for start in range(0, len(data), BYTES_PER_FIELD_ELEMENT):
        out += data[start + 1:start + BYTES_PER_FIELD_ELEMENT]
    return bytes(out)


# ─────────────────────────────────────────────────────────────────────
# 바이트 → FR
# ─────────────────────────────────────────────────────────────────────

def get_num_element(data_len, symbol_size=BYTES_PER_FIELD_ELEMENT):
    """data_len 바이트를 담는 데 필요한 심볼 수."""
    return div_ceil(data_len, symbol_size)


def set_bytes_canonical(chunk):
    """최대 32바이트 big-endian 청크 → FR (mod r 축소)."""
    return FR(int.from_bytes(chunk, "big") % CURVE_ORDER)


def to_fr_array(data):
    """바이트 열을 32바이트 청크 단위의 FR 리스트로 변환한다.

    마지막 부분 청크는 오른쪽을 0으로 채운다.
    """
    data = bytes(data)
    elements = []
    for i in range(get_num_element(len(data))):
        chunk = data[i * BYTES_PER_FIELD_ELEMENT:(i + 1) * BYTES_PER_FIELD_ELEMENT]
        elements.append(set_bytes_canonical(chunk.ljust(BYTES_PER_FIELD_ELEMENT, b"\x00")))
    return elements


# ─────────────────────────────────────────────────────────────────────
# Blob
# ─────────────────────────────────────────────────────────────────────

class Blob:
    """커밋 대상 바이트 페이로드.

    속성:
        data: 바이트 (패딩 여부는 is_padded)
        is_padded: 31→32 패딩이 적용되었는지
        length_after_padding: 패딩 후 바이트 수 (패딩 전이면 0)
    """

    def __init__(self, data, is_padded=False, length_after_padding=0):
        self.data = bytes(data)
        self.is_padded = is_padded
        self.length_after_padding = length_after_padding

    @classmethod
    def from_bytes_and_pad(cls, data):
        """원본 바이트를 패딩해서 Blob을 만든다."""
        padded = convert_by_padding_empty_byte(data)
        return cls(padded, is_padded=True, length_after_padding=len(padded))

    @classmethod
    def from_padded_bytes_unchecked(cls, data):
        """이미 패딩된 바이트로 Blob을 만든다. 형식은 검사하지 않는다."""
        return cls(data, is_padded=True, length_after_padding=len(data))

    def pad(self):
        """패딩된 새 Blob. 이미 패딩되어 있으면 self."""
        if self.is_padded:
            return self
        return Blob.from_bytes_and_pad(self.data)

    def remove_padding(self):
        """패딩을 제거한 원본 바이트."""
        if not self.is_padded:
            raise PreconditionError("blob is not padded")
        return remove_empty_byte_from_padded_bytes(self.data)

    def to_polynomial(self):
        """평가 형식 다항식으로 변환한다.

        Raises:
            PreconditionError: 패딩되지 않은 블롭이거나 비어 있을 때
        """
        if not self.is_padded:
            raise PreconditionError("blob must be padded before it becomes a polynomial")
        return Polynomial(to_fr_array(self.data), len(self.data))

    def __len__(self):
        return len(self.data)

    def __eq__(self, other):
        if not isinstance(other, Blob):
            return False
        return self.data == other.data and self.is_padded == other.is_padded

    def __repr__(self):
        return f"Blob({len(self.data)} bytes, is_padded={self.is_padded})"
