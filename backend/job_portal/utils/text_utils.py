import math
import re
from typing import Optional

# 선행 공백 + 부호 + 숫자(소수점/지수 포함)
_NUMERIC_PREFIX = re.compile(r'^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')

def parse_salary(value: Optional[str]) -> Optional[float]:
    """
    급여 문자열을 숫자로 변환합니다.

    문자열 앞부분의 가장 긴 숫자 부분만 해석합니다 ("50000원" -> 50000.0).
    해석할 수 없거나 무한대인 경우 None 을 반환합니다.

    Args:
        value: 폼에서 전달된 급여 문자열

    Returns:
        변환된 급여 또는 None
    """
    if value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _NUMERIC_PREFIX.match(str(value))
        if not match:
            return None
        number = float(match.group(1))

    if math.isnan(number) or math.isinf(number):
        return None
    return number
