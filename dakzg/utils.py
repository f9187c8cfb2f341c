"""
공유 유틸리티
=============

여러 모듈에서 공유되는 정수 연산 헬퍼.

  - next_power_of_2: n 이상의 가장 작은 2의 거듭제곱
  - is_power_of_2: 2의 거듭제곱 여부
  - log2_exact: 2의 거듭제곱의 지수
  - div_ceil: 올림 나눗셈
  - pad_to_power_of_2: 리스트를 2의 거듭제곱 길이로 패딩
"""

from dakzg.field import FR


def next_power_of_2(n):
    """n 이상의 가장 작은 2의 거듭제곱을 반환한다.

    예시:
        >>> next_power_of_2(0)  # 1
        >>> next_power_of_2(3)  # 4
        >>> next_power_of_2(4)  # 4
    """
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def is_power_of_2(n):
    return isinstance(n, int) and n > 0 and (n & (n - 1)) == 0


def log2_exact(n):
    """2의 거듭제곱 n의 지수 k (n = 2^k)."""
    return n.bit_length() - 1


def div_ceil(a, b):
    """⌈a / b⌉ (음이 아닌 정수)."""
    return -(-a // b)


def pad_to_power_of_2(lst, fill=None):
    """리스트를 2의 거듭제곱 길이로 패딩한다.

    FFT는 입력 길이가 2의 거듭제곱이어야 한다.

    Args:
        lst: 패딩할 리스트
        fill: 채울 값 (기본값: FR(0))
    """
    if fill is None:
        fill = FR(0)
    n = len(lst)
    target = next_power_of_2(n)
    return list(lst) + [fill] * (target - n)
