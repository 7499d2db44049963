"""
도메인 예외 정의
"""


class InvalidConfigurationError(ValueError):
    """
    캘린더 설정 값이 잘못된 경우

    - minDate > maxDate
    - 잘못된 요일 값
    - 선택 모드와 맞지 않는 선택 날짜 개수
    """
