import os
from typing import List

from .exceptions import InputFormatError


def read_source(path: str) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def parse_inputs(text: str) -> List[int]:
    # 每行一个整数，跳过空行
    values = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            values.append(int(line))
        except ValueError:
            raise InputFormatError(line, lineno) from None
    return values


def read_inputs(path: str, missing_ok: bool = False) -> List[int]:
    if missing_ok and not os.path.exists(path):
        return []
    with open(path, 'r', encoding='utf-8') as f:
        return parse_inputs(f.read())
