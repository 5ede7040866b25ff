# app/errors.py

from __future__ import annotations


class InputError(ValueError):
    """
    リクエスト入力の不備（domain が無い・空文字など）。
    パイプラインを実行する前に検出し、400 として返す。
    """

    def __init__(self, message: str = "Domain required") -> None:
        super().__init__(message)
        self.message = message
