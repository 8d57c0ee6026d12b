from decimal import Decimal
from typing import Mapping, NamedTuple

from utils.errors import EmptyUpdateError

SqlValue = str | int | float | Decimal | bool | None


class SqlClause(NamedTuple):
    set_cols: str
    values: list[SqlValue]


def sql_for_partial_update(
    data_to_update: Mapping[str, SqlValue],
    column_map: Mapping[str, str],
) -> SqlClause:
    """
    부분 수정용 UPDATE SET 절 생성.

    Args:
        data_to_update: 수정할 필드와 값 {"firstName": "Aliya", "age": 32}
            dict 삽입 순서대로 placeholder 번호가 매겨진다.
        column_map: 필드 -> DB 컬럼 매핑 {"firstName": "first_name"}
            매핑이 없는 필드는 필드명을 그대로 컬럼명으로 사용한다.

    Returns:
        SqlClause(set_cols, values)
        - set_cols: '"first_name"=$1, "age"=$2'
        - values: ["Aliya", 32]  (values[i-1]이 $i에 바인딩됨)

    Raises:
        EmptyUpdateError: data_to_update가 비어 있는 경우

    컬럼명은 SQL 문자열에 그대로 들어가고 값만 파라미터화된다.
    키와 column_map은 스키마(extra='forbid')로 걸러진 고정 값만 넘겨야 한다.

    Example:
        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        SqlClause(set_cols='"first_name"=$1, "age"=$2', values=['Aliya', 32])
    """
    if not data_to_update:
        raise EmptyUpdateError()

    set_parts = []
    values = []

    for idx, (field_name, value) in enumerate(data_to_update.items(), start=1):
        column_name = column_map.get(field_name, field_name)
        set_parts.append(f'"{column_name}"=${idx}')
        values.append(value)

    return SqlClause(", ".join(set_parts), values)
