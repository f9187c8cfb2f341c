"""
dakzg 설정
==========

환경 변수에서 SRS 페이로드 경로와 로그 레벨을 읽는다.

  DAKZG_TEST_SRS_PATH        테스트 페이로드 (기본값: 패키지에 포함된 파일)
  DAKZG_PRODUCTION_SRS_PATH  프로덕션 페이로드 (저장소에는 포함되지 않음)
  DAKZG_LOG_LEVEL            configure_logging()의 레벨 (기본값: WARNING)
"""

import logging
import os
from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent / "data"

DEFAULT_TEST_SRS_PATH = DATA_DIR / "kzg_srs_test.bin"
DEFAULT_PRODUCTION_SRS_PATH = DATA_DIR / "kzg_srs_production.bin"
DEFAULT_LOG_LEVEL = "WARNING"


class Config:
    """설정 클래스. 생성 시점의 환경 변수를 읽는다."""

    def __init__(self):
        self.test_srs_path = Path(
            os.getenv("DAKZG_TEST_SRS_PATH", DEFAULT_TEST_SRS_PATH)
        )
        self.production_srs_path = Path(
            os.getenv("DAKZG_PRODUCTION_SRS_PATH", DEFAULT_PRODUCTION_SRS_PATH)
        )
        self.log_level = os.getenv("DAKZG_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    @property
    def has_production_srs(self):
        return self.production_srs_path.is_file()


def configure_logging(level=None):
    """루트 로거에 기본 핸들러를 붙인다. 라이브러리 코드는 호출하지 않는다."""
    logging.basicConfig(
        level=level or config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# 전역 설정 인스턴스
config = Config()
