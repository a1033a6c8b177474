from __future__ import annotations

import json
from typing import Any


def dumps(obj: Any) -> str:
    """
    Минимальный JSON-дампер для отчётов CLI.
    Без prettify, ensure_ascii=False, завершающий \n добавляет вызывающая сторона.
    """
    return json.dumps(obj, ensure_ascii=False)
