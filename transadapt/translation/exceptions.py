"""
翻訳エラーの例外クラス階層

翻訳処理で発生する各種エラーを分類するための例外クラスを定義。
リトライ可否は例外クラスで判定する（TranslationNetworkError のみ一時的エラー）。
"""


class TranslationError(Exception):
    """翻訳エラーの基底クラス"""

    pass


class RequestValidationError(TranslationError, ValueError):
    """不正なリクエスト（空テキスト、空または不正な言語タグ）"""

    pass


class TranslationNetworkError(TranslationError):
    """ネットワーク関連エラー（API 失敗、タイムアウト）。リトライ対象"""

    pass


class TranslationTimeoutError(TranslationNetworkError):
    """バックエンド応答のタイムアウト"""

    pass


class TranslationBackendError(TranslationError):
    """バックエンド関連の恒久的エラー（不正な応答など）。リトライしない"""

    pass


class TranslationAuthError(TranslationBackendError):
    """認証エラー（API キー不正など）"""

    pass


class UnsupportedLanguagePairError(TranslationError):
    """未サポートの言語ペア"""

    def __init__(self, source: str, target: str, translator: str):
        self.source = source
        self.target = target
        self.translator = translator
        super().__init__(
            f"Language pair ({source} -> {target}) not supported by {translator}"
        )


class ProviderClosedError(TranslationError):
    """解放済みのプロバイダを使用した"""

    def __init__(self, translator: str):
        self.translator = translator
        super().__init__(f"Provider '{translator}' has already been closed")


class TranslationCancelledError(TranslationError):
    """
    呼び出し側によるキャンセル

    一時的エラー・恒久的エラーのどちらとも区別される。
    """

    def __init__(self, message: str = "Translation was cancelled"):
        super().__init__(message)


def is_transient(error: BaseException) -> bool:
    """リトライで回復し得るエラーかどうか"""
    return isinstance(error, TranslationNetworkError)
