from datetime import date, datetime

from accounts.core.errors import ValidationError

# 对外统一 dd.MM.yyyy
DATE_FORMAT = "%d.%m.%Y"


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def today() -> str:
    return format_date(datetime.now().date())


def parse_birth_date(text: str) -> str:
    """
    接收 ISO 日期（YYYY-MM-DD），转成存储格式
    解析失败抛 ValidationError
    """
    try:
        parsed = date.fromisoformat(text.strip())
    except ValueError:
        raise ValidationError(f"Invalid birth date '{text}', expected YYYY-MM-DD")
    return format_date(parsed)
