"""시간 측정 유틸리티 테스트"""

import time

import pytest

from projectvault.core.utils.time import measure_time


def test_measure_time_context_manager():
    """measure_time 컨텍스트 매니저 테스트"""
    with measure_time() as timer:
        # 초기값은 0
        assert timer["elapsed_ms"] == 0.0
        time.sleep(0.03)  # 30ms 대기

    # 컨텍스트 종료 후 경과 시간이 기록됨
    assert timer["elapsed_ms"] >= 30


def test_measure_time_with_exception():
    """예외 발생 시에도 시간이 측정되는지 테스트"""
    with pytest.raises(ValueError):
        with measure_time() as timer:
            time.sleep(0.02)  # 20ms 대기
            raise ValueError("Test error")

    # 예외가 발생해도 시간은 측정됨
    assert timer["elapsed_ms"] >= 20


def test_measure_time_nested():
    """중첩된 measure_time 테스트"""
    with measure_time() as outer_timer:
        time.sleep(0.01)  # 10ms

        with measure_time() as inner_timer:
            time.sleep(0.02)  # 20ms

        assert inner_timer["elapsed_ms"] >= 20

    # 외부 타이머는 내부보다 김
    assert outer_timer["elapsed_ms"] >= inner_timer["elapsed_ms"]
