"""
インクリメンタル配信用のテキスト分割

空白区切りのトークン単位で、元の区切り文字を保持したまま
増加するプレフィックスを生成する。
"""

from __future__ import annotations

import re
from typing import Iterator, List, Tuple

_TOKEN_PATTERN = re.compile(r"\S+")


def token_spans(text: str) -> List[Tuple[int, int]]:
    """空白区切りトークンの (start, end) 位置のリスト"""
    return [match.span() for match in _TOKEN_PATTERN.finditer(text)]


def split_tokens(text: str) -> List[str]:
    """空白区切りトークンのリスト"""
    return _TOKEN_PATTERN.findall(text)


def iter_token_prefixes(text: str) -> Iterator[str]:
    """
    先頭 i トークン分のプレフィックスを i = 1..N の順に生成

    プレフィックスは最初のトークンの先頭から i 番目のトークンの末尾までの
    元テキストの部分文字列で、トークン間の区切り文字はそのまま保持される。

    Examples:
        >>> list(iter_token_prefixes("Hello  big\\tworld"))
        ['Hello', 'Hello  big', 'Hello  big\\tworld']
    """
    spans = token_spans(text)
    if not spans:
        return
    start = spans[0][0]
    for _, end in spans:
        yield text[start:end]
