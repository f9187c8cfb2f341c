"""
단위근(Roots of Unity) 표와 도메인 확장
========================================

**원시 단위근 표**:
  PRIMITIVE_ROOTS_OF_UNITY[k]는 BN254 스칼라 필드의 원시 2^k차 단위근이다
  (k = 0, ..., 28). 필드의 곱셈 생성자와 r - 1의 인수분해에서 유도되는
  프로토콜 상수이므로 실행 시간에 다시 계산하지 않고 리터럴로 보관한다.

    k = 0  → 1
    k = 1  → r - 1  (= -1)
    k = 28 → 2^28차 원시 단위근 (BN254가 지원하는 최대 2-adic 차수)

  인접한 항목은 제곱 관계다: PRIMITIVE_ROOTS_OF_UNITY[k+1]² = PRIMITIVE_ROOTS_OF_UNITY[k].

**도메인 확장**:
  원시 단위근 ω에서 순환 부분군 H = {1, ω, ω², ..., ω^(n-1)}을 나열한다.
  FFT, Lagrange 기저 변환, 증명 생성이 모두 같은 도메인을 사용해야
  커밋먼트와 증명이 서로 맞아떨어진다.

사용 예시:
    >>> omega = get_primitive_root_of_unity(2)  # 4차 원시 단위근
    >>> expand_root_of_unity(omega)             # [1, ω, ω², ω³, 1]
    >>> get_domain(4)                           # [1, ω, ω², ω³]
"""

import functools

from dakzg.errors import ConfigurationError, DomainError
from dakzg.field import FR
from dakzg.utils import is_power_of_2, log2_exact


# 표가 지원하는 최대 지수 (2^28차 단위근)
MAX_ROOT_OF_UNITY_EXPONENT = 28

# 지원하는 최대 도메인 크기 = 도메인 확장 반복 상한
MAX_DOMAIN_SIZE = 1 << MAX_ROOT_OF_UNITY_EXPONENT

_PRIMITIVE_ROOTS_OF_UNITY_DECIMAL = (
    "1",
    "21888242871839275222246405745257275088548364400416034343698204186575808495616",
    "21888242871839275217838484774961031246007050428528088939761107053157389710902",
    "19540430494807482326159819597004422086093766032135589407132600596362845576832",
    "14940766826517323942636479241147756311199852622225275649687664389641784935947",
    "4419234939496763621076330863786513495701855246241724391626358375488475697872",
    "9088801421649573101014283686030284801466796108869023335878462724291607593530",
    "10359452186428527605436343203440067497552205259388878191021578220384701716497",
    "3478517300119284901893091970156912948790432420133812234316178878452092729974",
    "6837567842312086091520287814181175430087169027974246751610506942214842701774",
    "3161067157621608152362653341354432744960400845131437947728257924963983317266",
    "1120550406532664055539694724667294622065367841900378087843176726913374367458",
    "4158865282786404163413953114870269622875596290766033564087307867933865333818",
    "197302210312744933010843010704445784068657690384188106020011018676818793232",
    "20619701001583904760601357484951574588621083236087856586626117568842480512645",
    "20402931748843538985151001264530049874871572933694634836567070693966133783803",
    "421743594562400382753388642386256516545992082196004333756405989743524594615",
    "12650941915662020058015862023665998998969191525479888727406889100124684769509",
    "11699596668367776675346610687704220591435078791727316319397053191800576917728",
    "15549849457946371566896172786938980432421851627449396898353380550861104573629",
    "17220337697351015657950521176323262483320249231368149235373741788599650842711",
    "13536764371732269273912573961853310557438878140379554347802702086337840854307",
    "12143866164239048021030917283424216263377309185099704096317235600302831912062",
    "934650972362265999028062457054462628285482693704334323590406443310927365533",
    "5709868443893258075976348696661355716898495876243883251619397131511003808859",
    "19200870435978225707111062059747084165650991997241425080699860725083300967194",
    "7419588552507395652481651088034484897579724952953562618697845598160172257810",
    "2082940218526944230311718225077035922214683169814847712455127909555749686340",
    "19103219067921713944291392827692070036145651957329286315305642004821462161904",
)

PRIMITIVE_ROOTS_OF_UNITY = tuple(FR(int(s)) for s in _PRIMITIVE_ROOTS_OF_UNITY_DECIMAL)


def get_primitive_root_of_unity(k):
    """원시 2^k차 단위근을 반환한다.

    Raises:
        ConfigurationError: k가 0..28 범위를 벗어날 때
    """
    if not 0 <= k <= MAX_ROOT_OF_UNITY_EXPONENT:
        raise ConfigurationError(
            f"no primitive root of unity of order 2^{k}: "
            f"the table covers exponents 0..{MAX_ROOT_OF_UNITY_EXPONENT}"
        )
    return PRIMITIVE_ROOTS_OF_UNITY[k]


def expand_root_of_unity(root, max_order=MAX_DOMAIN_SIZE):
    """단위근 root가 생성하는 순환 부분군을 나열한다.

    [1, root, root², ...]를 root^m = 1이 다시 나올 때까지 이어 붙인다.
    반환값의 마지막 원소는 닫는 항등원(1)이며, 호출자가 잘라내야 한다.

    사전 조건:
        root는 반드시 단위근이어야 한다. 그렇지 않으면 1로 돌아오지 않으므로
        max_order번 곱한 뒤에도 닫히지 않으면 DomainError를 던진다.

    Args:
        root: FR 단위근
        max_order: 허용하는 최대 곱셈 위수

    Returns:
        list[FR]: [1, root, ..., root^(m-1), 1]  (길이 m + 1)

    예시:
        >>> expand_root_of_unity(FR(-1))  # [1, -1, 1]
    """
    if not isinstance(root, FR):
        root = FR(root)
    one = FR(1)
    roots = [one, root]
    while roots[-1] != one:
        if len(roots) > max_order:
            raise DomainError(
                f"element did not cycle back to 1 within {max_order} steps; "
                "it is not a root of unity of supported order"
            )
        roots.append(roots[-1] * root)
    return roots


@functools.lru_cache(maxsize=None)
def _domain(n):
    omega = get_primitive_root_of_unity(log2_exact(n))
    return tuple(expand_root_of_unity(omega)[:-1])


def get_domain(n):
    """크기 n인 평가 도메인 [1, ω, ..., ω^(n-1)]을 반환한다 (캐시됨).

    Raises:
        DomainError: n이 2의 거듭제곱이 아닐 때
    """
    if not is_power_of_2(n):
        raise DomainError(f"domain size {n} is not a power of 2")
    return _domain(n)
