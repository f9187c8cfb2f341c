"""
KZG 오류 계층
=============

커밋먼트 엔진에서 발생하는 모든 실패는 KzgError의 하위 클래스로 보고된다.
KzgError는 ValueError를 상속하므로, ValueError를 잡던 기존 호출자 코드도
그대로 동작한다.

분류:
  - SetupError: SRS 페이로드가 손상되었거나 길이가 맞지 않음
  - ConfigurationError: 청크 파라미터가 SRS 크기/단위근 표 범위를 벗어남
  - DomainError: FFT 길이가 2의 거듭제곱이 아님, 도메인 확장이 끝나지 않음
  - PreconditionError: 설정 미완료 상태에서 증명 요청, 길이 불일치
  - CommitError: 다중 스칼라 곱셈(MSM) 실패
  - IndexOutOfRangeError: 평가 인덱스가 범위를 벗어남

verify()만은 예외를 던지지 않고 False를 반환한다 (fail closed).
"""


class KzgError(ValueError):
    """모든 KZG 오류의 기반 클래스."""


class SetupError(KzgError):
    """SRS 페이로드 역직렬화 실패."""


class ConfigurationError(KzgError):
    """인코딩 파라미터가 SRS 또는 단위근 표와 맞지 않음."""


class DomainError(KzgError):
    """평가 도메인 크기가 올바르지 않음."""


class PreconditionError(KzgError):
    """연산의 사전 조건 위반."""


class CommitError(KzgError):
    """다중 스칼라 곱셈(MSM) 실패."""


class IndexOutOfRangeError(KzgError, IndexError):
    """평가 인덱스가 다항식/단위근 시퀀스 범위를 벗어남."""
